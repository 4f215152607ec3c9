import unittest

from cfv2client.query import QueryBuilder


class TestQueryBuilder(unittest.TestCase):

    def test_repeated_keys(self):
        """The same key can be added more than once and order is kept"""
        builder = QueryBuilder('/v2/organizations')
        builder.query_param('q', 'name:a').query_param('page', '2').query_param('q', 'status:active')

        self.assertEqual(builder.params, [('q', 'name:a'), ('page', '2'), ('q', 'status:active')])

    def test_to_url(self):
        """Parameters are encoded onto the joined url"""
        builder = QueryBuilder('/v2/organizations')
        builder.query_param('q', 'name IN a,b')

        self.assertEqual(
            builder.to_url('https://api.example.com/'),
            'https://api.example.com/v2/organizations?q=name+IN+a%2Cb'
        )

    def test_to_url_no_params(self):
        builder = QueryBuilder('/v2/spaces')

        self.assertEqual(builder.to_url('https://api.example.com'), 'https://api.example.com/v2/spaces')

    def test_params_is_a_copy(self):
        builder = QueryBuilder('/v2/spaces')
        builder.params.append(('q', 'x'))

        self.assertEqual(builder.params, [])
