import logging
import os

from cfv2client.clients import CFClient
from cfv2client.utils import str_to_bool

logger = logging.getLogger(__name__)

# key = configuration variable to be loaded from the environment
# value = The default to use if env var is not present
CONFIG_KEYS = {
    'CF_API_URL': 'https://api.bosh-lite.com',
    'CF_TOKEN': None,
    'CF_VERIFY_TLS': True,
    'CF_RESULTS_PER_PAGE': 50,
}


def load_config(environ=None):
    """Read the client configuration from the environment

    Args:
        environ(dict, optional): The environment to read, defaults to os.environ

    Raises:
        ValueError: A value could not be parsed

    Returns:
        dict: CONFIG_KEYS with values from the environment applied

    """
    if environ is None:
        environ = os.environ

    config = {}
    for key, default in CONFIG_KEYS.items():
        config[key] = environ.get(key, default)

    verify = str_to_bool(config['CF_VERIFY_TLS'])
    if verify is None:
        raise ValueError('CF_VERIFY_TLS must be a true/false value, got {0}'.format(config['CF_VERIFY_TLS']))
    config['CF_VERIFY_TLS'] = verify

    per_page = int(config['CF_RESULTS_PER_PAGE'])
    if not 1 <= per_page <= 100:
        raise ValueError('CF_RESULTS_PER_PAGE must be between 1 and 100')
    config['CF_RESULTS_PER_PAGE'] = per_page

    if not config['CF_VERIFY_TLS']:
        logger.warning('TLS verification is disabled for {0}'.format(config['CF_API_URL']))

    return config


def client_from_env(environ=None):
    """Build a CFClient from the environment"""
    config = load_config(environ)
    return CFClient(
        config['CF_API_URL'],
        config['CF_TOKEN'],
        verify_tls=config['CF_VERIFY_TLS'],
        results_per_page=config['CF_RESULTS_PER_PAGE'],
    )
