"""Database settings read from the environment."""

import os

def _flag(name: str) -> bool:
    return os.environ.get(name, '').lower() in ('1', 'true', 'yes', 'y')

DB_CONFIG = {
    'conn_str': os.environ.get('SCHEMAUTILZ_DB_URL', 'sqlite:///anon.db'),
    'debug': _flag('SCHEMAUTILZ_DEBUG'),
    'echo': _flag('SCHEMAUTILZ_ECHO'),
}
