from enum import StrEnum


class History:
    """History store defaults."""

    STORAGE_KEY = 'slink_history'  # Name of the persisted slot
    MAX_ITEMS = 50  # Capacity bound, oldest records are evicted beyond it


class Shortcode:
    """Short code generation parameters."""

    LENGTH = 6  # Maximum number of base-36 characters kept
    FALLBACK = 'abc123'  # Returned when the hash magnitude is 0
    ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyz'


# Public prefix prepended to every short code
DEFAULT_SHORT_URL_BASE = 'https://slink.to'

# Local data directory for the file slot backend
DEFAULT_DATA_DIR = '~/.slink'


class Backend(StrEnum):
    """Supported slot storage backends."""

    FILE = 'file'
    REDIS = 'redis'
    MEMORY = 'memory'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        LOG_LEVEL = 'LOG_LEVEL'

    class Slink(StrEnum):
        CONFIG_PATH = 'SLINK_CONFIG_PATH'
        BACKEND = 'SLINK_BACKEND'
        MAX_HISTORY_ITEMS = 'SLINK_MAX_HISTORY_ITEMS'
        STORAGE_KEY = 'SLINK_STORAGE_KEY'
        SHORT_URL_BASE = 'SLINK_SHORT_URL_BASE'
        DATA_DIR = 'SLINK_DATA_DIR'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105
