"""A minimal wrapper for the Cloud Foundry v2 API.
https://apidocs.cloudfoundry.org/

Currently it only supports the organizations and spaces endpoints that are
needed for listing orgs, their summaries and their spaces.
"""

from posixpath import join as urljoin
from urllib.parse import quote
import json
import logging

import requests

from cfv2client.filters import augment
from cfv2client.query import QueryBuilder
from cfv2client.v2 import (
    ListResponse,
    OrganizationEntity,
    OrganizationSummary,
    Resource,
    SpaceEntity,
)

logger = logging.getLogger(__name__)


class CFError(RuntimeError):
    """This exception is raised when the CF API returns a status code >= 400

    Attributes:
        response:   The full response object from requests that was returned
        error:  The body of the response json decoded, None if it was not json
        code: The numeric CF error code, if any
        error_code: The symbolic CF error code (example: 'CF-OrganizationNotFound'), if any

    Args:
        response: The full response object that is causing this exception to be raised

    """

    def __init__(self, response):
        self.response = response
        try:
            self.error = json.loads(response.text)
        except ValueError:
            self.error = None

        if isinstance(self.error, dict):
            self.code = self.error.get('code')
            self.error_code = self.error.get('error_code')
            message = self.error.get('description') or response.text
        else:
            self.code = None
            self.error_code = None
            message = response.text

        super(CFError, self).__init__(message)


class CFClient(object):
    """A minimal client for the CF v2 API

    Args:
        base_url: The URL to your CF API (example: https://api.bosh-lite.com)
        token: A bearer token.
        verify_tls: Do we validate certs when talking to CF
        results_per_page: Page size used when a list request does not set one
    """

    def __init__(self, base_url, token, verify_tls=True, results_per_page=None):
        self.base_url = base_url
        self.token = token
        self.verify_tls = verify_tls
        self.results_per_page = results_per_page

    def _request(self, resource, method, params=None, body=None):
        """Make a request to the CF API.

        Args:
            resource: The API method you wish to call (example: '/v2/organizations')
            method: The method to use when making the request GET/POST/etc
            params (optional): Query string parameters, a dict or a list of (key, value) pairs
            body (optional): An json encodeable object which will be included as the body
            of the request

        Raises:
            CFError: An error occured making the request

        Returns:
            dict:   The parsed json response

        """
        endpoint = urljoin(self.base_url.rstrip('/'), resource.lstrip('/'))

        requests_method = getattr(requests, method.lower())

        headers = {}
        if self.token:
            headers['Authorization'] = 'Bearer ' + self.token

        logger.debug('{0} {1} {2}'.format(method.upper(), endpoint, params))

        response = requests_method(
            endpoint,
            params=params,
            json=body,
            verify=self.verify_tls,
            headers=headers,
        )

        if response.status_code >= 400:
            raise CFError(response)

        return json.loads(response.text)

    def _list(self, builder, request, entity_type):
        if request is not None:
            augment(builder, request)
            for key, value in request.paging_params():
                builder.query_param(key, value)
            if request.results_per_page is None and self.results_per_page is not None:
                builder.query_param('results-per-page', str(self.results_per_page))
        elif self.results_per_page is not None:
            builder.query_param('results-per-page', str(self.results_per_page))

        response = self._request(builder.path, 'GET', params=builder.params or None)
        return ListResponse.from_json(response, entity_type)

    def list_organizations(self, request=None):
        """List organizations visible to the token

        Args:
            request(ListOrganizationsRequest, optional): Filters and paging

        Raises:
            CFError: There was an error listing organizations

        Returns:
            ListResponse: One page of organization resources

        """
        return self._list(QueryBuilder('/v2/organizations'), request, OrganizationEntity)

    def get_organization(self, organization_id):
        """Retrieve a single organization

        Raises:
            CFError: There was an error getting the organization

        Returns:
            Resource: The organization
        """
        response = self._request(urljoin('/v2/organizations', quote(organization_id, safe='')), 'GET')
        return Resource.from_json(response, OrganizationEntity)

    def summary_organization(self, organization_id):
        """Retrieve the summary of an organization, including its spaces

        Raises:
            CFError: There was an error getting the summary

        Returns:
            OrganizationSummary: The summary
        """
        response = self._request(urljoin('/v2/organizations', quote(organization_id, safe=''), 'summary'), 'GET')
        return OrganizationSummary.from_json(response)

    def list_organization_spaces(self, request):
        """List the spaces of an organization

        Args:
            request(ListOrganizationSpacesRequest): The organization plus filters and paging

        Raises:
            CFError: There was an error listing spaces

        Returns:
            ListResponse: One page of space resources
        """
        builder = QueryBuilder(urljoin('/v2/organizations', quote(request.organization_id, safe=''), 'spaces'))
        return self._list(builder, request, SpaceEntity)

    def list_spaces(self, request=None):
        """List spaces visible to the token

        Args:
            request(ListSpacesRequest, optional): Filters and paging

        Raises:
            CFError: There was an error listing spaces

        Returns:
            ListResponse: One page of space resources
        """
        return self._list(QueryBuilder('/v2/spaces'), request, SpaceEntity)

    def iter_resources(self, list_call, request=None):
        """Yield every resource of a list endpoint, following next_url until the last page

        Args:
            list_call: One of the list_* methods of this client
            request(optional): The request passed to the first call

        Raises:
            CFError: There was an error fetching a page

        """
        if request is None:
            page = list_call()
        else:
            page = list_call(request)

        while True:
            for resource in page.resources:
                yield resource

            if not page.next_url or not page.resources:
                return

            entity_type = type(page.resources[0].entity)

            logger.debug('Following {0}'.format(page.next_url))
            page = ListResponse.from_json(self._request(page.next_url, 'GET'), entity_type)

