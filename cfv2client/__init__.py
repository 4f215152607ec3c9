from cfv2client.clients import CFClient, CFError  # noqa: F401
from cfv2client.filters import FilterInvocationError, FilterParameter, Operation, augment, filter_parameter  # noqa: F401
from cfv2client.query import QueryBuilder  # noqa: F401
