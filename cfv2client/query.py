from posixpath import join as urljoin
from urllib.parse import urlencode


class QueryBuilder(object):
    """Collects the path and query string of an outgoing request

    Parameters are kept in the order they were added and a key may be added
    more than once, so ``params`` can be handed straight to requests.

    Args:
        path: The API resource (example: '/v2/organizations')
    """

    def __init__(self, path):
        self.path = path
        self._params = []

    def query_param(self, key, value):
        self._params.append((key, value))
        return self

    @property
    def params(self):
        return list(self._params)

    def to_url(self, base_url):
        url = urljoin(base_url.rstrip('/'), self.path.lstrip('/'))
        if self._params:
            url = '{0}?{1}'.format(url, urlencode(self._params))
        return url

    def __repr__(self):
        return 'QueryBuilder({0!r}, {1!r})'.format(self.path, self._params)
