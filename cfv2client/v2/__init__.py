from cfv2client.v2.resources import ListResponse, Metadata, PaginatedRequest, Resource  # noqa: F401
from cfv2client.v2.organizations import (  # noqa: F401
    ListOrganizationSpacesRequest,
    ListOrganizationsRequest,
    OrganizationEntity,
    OrganizationSpaceSummary,
    OrganizationSummary,
)
from cfv2client.v2.spaces import ListSpacesRequest, SpaceEntity  # noqa: F401
