from dataclasses import dataclass
import typing

from cfv2client.filters import filter_parameter
from cfv2client.v2.resources import PaginatedRequest, as_tuple


@dataclass(frozen=True)
class SpaceEntity:
    name: str
    organization_id: str
    allow_ssh: typing.Optional[bool] = None
    space_quota_definition_id: typing.Optional[str] = None

    @classmethod
    def from_json(cls, data):
        return cls(
            name=data['name'],
            organization_id=data['organization_guid'],
            allow_ssh=data.get('allow_ssh'),
            space_quota_definition_id=data.get('space_quota_definition_guid'),
        )


class ListSpacesRequest(PaginatedRequest):
    """The request options for ``GET /v2/spaces``"""

    def __init__(self, names=None, organization_ids=None, application_ids=None, developer_ids=None, **paging):
        super(ListSpacesRequest, self).__init__(**paging)
        self._names = as_tuple(names)
        self._organization_ids = as_tuple(organization_ids)
        self._application_ids = as_tuple(application_ids)
        self._developer_ids = as_tuple(developer_ids)

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

    @property
    @filter_parameter('organization_guid')
    def organization_ids(self):
        return self._organization_ids
