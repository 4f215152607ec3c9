"""Payload shapes shared by every v2 resource"""

from dataclasses import dataclass, field
import typing


@dataclass(frozen=True)
class Metadata:
    """The ``metadata`` block of a v2 resource"""

    id: str
    url: str
    created_at: typing.Optional[str] = None
    updated_at: typing.Optional[str] = None

    @classmethod
    def from_json(cls, data):
        return cls(
            id=data['guid'],
            url=data['url'],
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at'),
        )


@dataclass(frozen=True)
class Resource:
    """A v2 resource: ``metadata`` plus a type specific ``entity``"""

    metadata: Metadata
    entity: typing.Any

    @classmethod
    def from_json(cls, data, entity_type):
        return cls(
            metadata=Metadata.from_json(data['metadata']),
            entity=entity_type.from_json(data['entity']),
        )


@dataclass(frozen=True)
class ListResponse:
    """One page of a v2 list endpoint"""

    total_results: int
    total_pages: int
    next_url: typing.Optional[str] = None
    prev_url: typing.Optional[str] = None
    resources: typing.Tuple[Resource, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data, entity_type):
        return cls(
            total_results=data.get('total_results', 0),
            total_pages=data.get('total_pages', 0),
            next_url=data.get('next_url'),
            prev_url=data.get('prev_url'),
            resources=tuple(Resource.from_json(r, entity_type) for r in data.get('resources', [])),
        )


class PaginatedRequest(object):
    """Paging options shared by the list requests

    Args:
        page(int, optional): The page to return, starting at 1
        results_per_page(int, optional): Page size, the API allows 1 to 100
        order_direction(str, optional): 'asc' or 'desc'
    """

    ORDER_DIRECTIONS = ('asc', 'desc')

    def __init__(self, page=None, results_per_page=None, order_direction=None):
        if order_direction is not None and order_direction not in self.ORDER_DIRECTIONS:
            raise ValueError('order_direction must be one of {0}'.format(', '.join(self.ORDER_DIRECTIONS)))

        self._page = page
        self._results_per_page = results_per_page
        self._order_direction = order_direction

    @property
    def page(self):
        return self._page

    @property
    def results_per_page(self):
        return self._results_per_page

    @property
    def order_direction(self):
        return self._order_direction

    def paging_params(self):
        """Return the paging query parameters that have been set"""
        params = []
        if self._page is not None:
            params.append(('page', str(self._page)))
        if self._results_per_page is not None:
            params.append(('results-per-page', str(self._results_per_page)))
        if self._order_direction is not None:
            params.append(('order-direction', self._order_direction))
        return params


def as_tuple(values):
    """Freeze an optional collection argument"""
    if values is None:
        return None
    if isinstance(values, str):
        return (values,)
    return tuple(values)
