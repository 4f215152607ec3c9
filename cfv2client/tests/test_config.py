import unittest

from cfv2client.config import CONFIG_KEYS, client_from_env, load_config
from cfv2client.utils import str_to_bool


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        """Defaults are used when the environment is empty"""
        config = load_config({})

        self.assertEqual(config['CF_API_URL'], CONFIG_KEYS['CF_API_URL'])
        self.assertIsNone(config['CF_TOKEN'])
        self.assertTrue(config['CF_VERIFY_TLS'])
        self.assertEqual(config['CF_RESULTS_PER_PAGE'], 50)

    def test_environment(self):
        config = load_config({
            'CF_API_URL': 'https://api.example.com',
            'CF_TOKEN': 'tok',
            'CF_VERIFY_TLS': 'no',
            'CF_RESULTS_PER_PAGE': '100',
        })

        self.assertEqual(config['CF_API_URL'], 'https://api.example.com')
        self.assertFalse(config['CF_VERIFY_TLS'])
        self.assertEqual(config['CF_RESULTS_PER_PAGE'], 100)

    def test_bad_verify(self):
        with self.assertRaises(ValueError):
            load_config({'CF_VERIFY_TLS': 'maybe'})

    def test_bad_page_size(self):
        with self.assertRaises(ValueError):
            load_config({'CF_RESULTS_PER_PAGE': '500'})

    def test_client_from_env(self):
        client = client_from_env({'CF_API_URL': 'https://api.example.com', 'CF_TOKEN': 'tok'})

        self.assertEqual(client.base_url, 'https://api.example.com')
        self.assertEqual(client.token, 'tok')
        self.assertTrue(client.verify_tls)
        self.assertEqual(client.results_per_page, 50)


class TestStrToBool(unittest.TestCase):

    def test_str_to_bool(self):
        for val in ['1', 'true', 'Yes', 'on', ' t ', 'y', True]:
            self.assertIs(str_to_bool(val), True)
        for val in ['0', 'false', 'No', 'off', 'f', 'n', 'none', '', None, False]:
            self.assertIs(str_to_bool(val), False)
        self.assertIsNone(str_to_bool('maybe'))
