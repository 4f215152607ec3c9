from dataclasses import dataclass, field
import typing

from cfv2client.filters import filter_parameter
from cfv2client.v2.resources import PaginatedRequest, as_tuple


@dataclass(frozen=True)
class OrganizationSpaceSummary:
    """The Space part of an Organization summary"""

    application_count: int
    id: str
    memory_development_total: int
    memory_production_total: int
    name: str
    service_count: int

    @classmethod
    def from_json(cls, data):
        return cls(
            application_count=data['app_count'],
            id=data['guid'],
            memory_development_total=data['mem_dev_total'],
            memory_production_total=data['mem_prod_total'],
            name=data['name'],
            service_count=data['service_count'],
        )


@dataclass(frozen=True)
class OrganizationSummary:
    """The response body of ``GET /v2/organizations/:guid/summary``"""

    id: str
    name: str
    status: str
    spaces: typing.Tuple[OrganizationSpaceSummary, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data):
        return cls(
            id=data['guid'],
            name=data['name'],
            status=data['status'],
            spaces=tuple(OrganizationSpaceSummary.from_json(s) for s in data.get('spaces', [])),
        )


@dataclass(frozen=True)
class OrganizationEntity:
    name: str
    status: typing.Optional[str] = None
    billing_enabled: typing.Optional[bool] = None
    quota_definition_id: typing.Optional[str] = None

    @classmethod
    def from_json(cls, data):
        return cls(
            name=data['name'],
            status=data.get('status'),
            billing_enabled=data.get('billing_enabled'),
            quota_definition_id=data.get('quota_definition_guid'),
        )


class ListOrganizationsRequest(PaginatedRequest):
    """The request options for ``GET /v2/organizations``

    Every filter is optional; a collection with more than one entry is sent
    as an ``IN`` filter.
    """

    def __init__(self, names=None, auditor_ids=None, billing_manager_ids=None, manager_ids=None,
                 space_ids=None, statuses=None, user_ids=None, **paging):
        super(ListOrganizationsRequest, self).__init__(**paging)
        self._names = as_tuple(names)
        self._auditor_ids = as_tuple(auditor_ids)
        self._billing_manager_ids = as_tuple(billing_manager_ids)
        self._manager_ids = as_tuple(manager_ids)
        self._space_ids = as_tuple(space_ids)
        self._statuses = as_tuple(statuses)
        self._user_ids = as_tuple(user_ids)

    @property
    @filter_parameter('auditor_guid')
    def auditor_ids(self):
        return self._auditor_ids

    @property
    @filter_parameter('billing_manager_guid')
    def billing_manager_ids(self):
        return self._billing_manager_ids

    @property
    @filter_parameter('manager_guid')
    def manager_ids(self):
        return self._manager_ids

    @property
    @filter_parameter('name')
    def names(self):
        return self._names

    @property
    @filter_parameter('space_guid')
    def space_ids(self):
        return self._space_ids

    @property
    @filter_parameter('status')
    def statuses(self):
        return self._statuses

    @property
    @filter_parameter('user_guid')
    def user_ids(self):
        return self._user_ids


class ListOrganizationSpacesRequest(PaginatedRequest):
    """The request options for ``GET /v2/organizations/:guid/spaces``

    Args:
        organization_id(str): The organization whose spaces are listed
    """

    def __init__(self, organization_id, names=None, application_ids=None, developer_ids=None, **paging):
        super(ListOrganizationSpacesRequest, self).__init__(**paging)
        if not organization_id:
            raise ValueError('organization_id is required')

        self._organization_id = organization_id
        self._names = as_tuple(names)
        self._application_ids = as_tuple(application_ids)
        self._developer_ids = as_tuple(developer_ids)

    @property
    def organization_id(self):
        return self._organization_id

    @property
    @filter_parameter('app_guid')
    def application_ids(self):
        return self._application_ids

    @property
    @filter_parameter('developer_guid')
    def developer_ids(self):
        return self._developer_ids

    @property
    @filter_parameter('name')
    def names(self):
        return self._names
