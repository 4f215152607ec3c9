"""Cloud Foundry v2 list filters.

The v2 API narrows list endpoints with repeated ``q`` query parameters of the
form ``<field><operator><value>``, for example ``q=name:dev`` or
``q=status IN active,suspended``.  Request objects declare which of their
accessors map onto such a filter with the :func:`filter_parameter` decorator,
and :func:`augment` turns an instance into query parameters.
"""

import enum
import inspect
import weakref
from collections.abc import Iterable, Mapping


class Operation(enum.Enum):
    """The comparison operators understood by the v2 filter grammar"""

    IS = ':'
    GREATER_THAN = '>'
    GREATER_THAN_OR_EQUAL_TO = '>='
    LESS_THAN = '<'
    LESS_THAN_OR_EQUAL_TO = '<='
    IN = ' IN '

    def __str__(self):
        return self.value


class FilterParameter(object):
    """Describes how an accessor maps onto a ``q`` filter

    Args:
        field_name(str): The name of the field in the filter grammar (example: 'name')
        operation(Operation): Used when the accessor yields a single value
        collection_operation(Operation): Used when the accessor yields more than one value

    Raises:
        ValueError: field_name is blank
    """

    __slots__ = ('field_name', 'operation', 'collection_operation')

    def __init__(self, field_name, operation=Operation.IS, collection_operation=Operation.IN):
        if not field_name or not str(field_name).strip():
            raise ValueError('A filter parameter needs a field name.')

        object.__setattr__(self, 'field_name', str(field_name).strip())
        object.__setattr__(self, 'operation', Operation(operation))
        object.__setattr__(self, 'collection_operation', Operation(collection_operation))

    def __setattr__(self, name, value):
        raise AttributeError('FilterParameter is immutable')

    def __eq__(self, other):
        if not isinstance(other, FilterParameter):
            return NotImplemented
        return (self.field_name, self.operation, self.collection_operation) == \
            (other.field_name, other.operation, other.collection_operation)

    def __hash__(self):
        return hash((self.field_name, self.operation, self.collection_operation))

    def __repr__(self):
        return 'FilterParameter({0!r}, {1}, {2})'.format(
            self.field_name, self.operation.name, self.collection_operation.name)

    def render(self, value):
        """Render an already trimmed single value as a filter expression"""
        return '{0}{1}{2}'.format(self.field_name, self.operation, value)

    def render_collection(self, value):
        """Render an already joined collection value as a filter expression"""
        return '{0}{1}{2}'.format(self.field_name, self.collection_operation, value)


class FilterInvocationError(RuntimeError):
    """Raised when a filter accessor fails while its value is being read

    Attributes:
        accessor: The name of the accessor that failed
        cause: The exception the accessor raised
    """

    def __init__(self, accessor, cause):
        self.accessor = accessor
        self.cause = cause

        super(FilterInvocationError, self).__init__(
            'Unable to read filter value from {0}: {1}'.format(accessor, cause))


def filter_parameter(field_name, operation=Operation.IS, collection_operation=Operation.IN):
    """Mark a zero argument accessor as a filter

    Works on plain methods and, when applied beneath ``@property``, on properties::

        @property
        @filter_parameter('name')
        def names(self):
            return self._names
    """
    parameter = FilterParameter(field_name, operation, collection_operation)

    def decorator(accessor):
        target = accessor.fget if isinstance(accessor, property) else accessor
        target.filter_parameter = parameter
        return accessor

    return decorator


def _descriptor_of(member):
    if isinstance(member, property):
        return getattr(member.fget, 'filter_parameter', None)
    if inspect.isfunction(member):
        return getattr(member, 'filter_parameter', None)
    return None


_tables = weakref.WeakKeyDictionary()


def filter_descriptors(cls):
    """Return the filter table for a request type

    Args:
        cls(type): The request type to inspect

    Returns:
        tuple: ``(accessor name, FilterParameter)`` pairs ordered by accessor name

    """
    try:
        return _tables[cls]
    except KeyError:
        pass

    table = {}
    # walk the mro backwards so subclasses override their parents; an
    # undecorated accessor override keeps the nearest ancestor's filter
    for klass in reversed(cls.__mro__):
        for name, member in vars(klass).items():
            if name.startswith('_'):
                continue
            if not isinstance(member, property) and not inspect.isfunction(member):
                table.pop(name, None)
                continue
            descriptor = _descriptor_of(member)
            if descriptor is not None:
                table[name] = descriptor

    _tables[cls] = tuple(sorted(table.items()))
    return _tables[cls]


def _read(instance, name):
    try:
        if isinstance(inspect.getattr_static(type(instance), name), property):
            return getattr(instance, name)
        return getattr(instance, name)()
    except Exception as e:
        raise FilterInvocationError(name, e) from e


def _is_collection(value):
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Iterable)


def _render_collection(target, descriptor, value):
    if isinstance(value, (set, frozenset)):
        elements = sorted(str(element).strip() for element in value)
    else:
        elements = [str(element).strip() for element in value]
    elements = [element for element in elements if element]

    if len(elements) == 1:
        _render_single(target, descriptor, elements[0])
    elif len(elements) > 1:
        target.query_param('q', descriptor.render_collection(','.join(elements)))


def _render_single(target, descriptor, value):
    value = str(value).strip()
    if value:
        target.query_param('q', descriptor.render(value))


def augment(target, instance):
    """Add a ``q`` query parameter to target for every populated filter on instance

    Filters are processed in accessor name order. A failing accessor stops
    processing; parameters already added for earlier accessors are kept.

    Args:
        target: Anything with a ``query_param(key, value)`` method
        instance: The request whose decorated accessors are read

    Raises:
        FilterInvocationError: An accessor raised while being read

    """
    for name, descriptor in filter_descriptors(type(instance)):
        value = _read(instance, name)

        if value is None:
            continue

        if _is_collection(value):
            _render_collection(target, descriptor, value)
        else:
            _render_single(target, descriptor, value)
