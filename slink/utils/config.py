"""Utility functions for application configuration management.

Configuration is read from an optional JSON document (`SLINK_CONFIG_PATH`)
and from environment variables, which take precedence. The JSON document
follows this structure:

    {
        "active_backend": "file",
        "logging": {"level": "INFO"},
        "history": {
            "max_items": 50,
            "storage_key": "slink_history",
            "short_url_base": "https://slink.to"
        },
        "backends": {
            "file": {"data_dir": "~/.slink"},
            "redis": {"host": "localhost", "port": 6379, "db": 0}
        }
    }

Only the active backend's section is returned by `load_config()`:

    {
        "backend": "file",
        "history": {"max_items": 50, "storage_key": "slink_history", "short_url_base": "https://slink.to"},
        "logging": {"level": "INFO"},
        "file": {"data_dir": "/home/user/.slink"}
    }

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the key prefix for shared slot backends, or None if
        `APP_NAME` is not set.

    load_config() -> dict
        Resolve the complete configuration as a Python dictionary.

Example:
    >>> from slink.utils.config import load_config
    >>> config = load_config()
    >>> config['backend']
    'file'
    >>> config['history']['max_items']
    50
"""

import os
import json
import logging
from pathlib import Path
from typing import Any

from slink.types import AppConfig
from slink.constants import ENV, Backend, History, DEFAULT_DATA_DIR, DEFAULT_SHORT_URL_BASE
from slink.exceptions import BadConfigurationError
from slink.utils.helpers import require_environment


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'

    Returns:
        str:
            Value of `APP_NAME` environment variable.
            None if variable is not set.
    """
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return key prefix for shared slot backends

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'slink'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'slink:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _load_document() -> dict[str, Any]:
    """Read the optional JSON configuration document pointed to by SLINK_CONFIG_PATH."""
    path = os.environ.get(ENV.Slink.CONFIG_PATH)
    if not path:
        return {}

    logger.debug('Loading configuration document.', extra={'configPath': path})
    try:
        document = json.loads(Path(path).expanduser().read_text(encoding='utf-8'))
    except FileNotFoundError as e:
        raise BadConfigurationError(f"Configuration document '{path}' does not exist.") from e
    except json.JSONDecodeError as e:
        raise BadConfigurationError(f"Configuration document '{path}' is not valid JSON.") from e

    if not isinstance(document, dict):
        raise BadConfigurationError(f"Configuration document '{path}' must hold a JSON object.")
    return document


def _int_setting(name: str, value: Any, minimum: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise BadConfigurationError(f"'{name}' must be an integer (given value: {value!r}).") from e
    if number < minimum:
        raise BadConfigurationError(f"'{name}' must be at least {minimum} (given value: {number}).")
    return number


def _history_settings(document: dict[str, Any]) -> dict[str, Any]:
    section = document.get('history', {})
    max_items = os.environ.get(ENV.Slink.MAX_HISTORY_ITEMS) or section.get('max_items', History.MAX_ITEMS)
    return {
        'max_items': _int_setting(ENV.Slink.MAX_HISTORY_ITEMS, max_items, minimum=1),
        'storage_key': os.environ.get(ENV.Slink.STORAGE_KEY) or section.get('storage_key', History.STORAGE_KEY),
        'short_url_base': os.environ.get(ENV.Slink.SHORT_URL_BASE) or section.get('short_url_base', DEFAULT_SHORT_URL_BASE),
    }


def _logging_settings(document: dict[str, Any]) -> dict[str, Any]:
    level = str(os.environ.get(ENV.App.LOG_LEVEL) or document.get('logging', {}).get('level', 'INFO')).upper()
    if level not in logging.getLevelNamesMapping():
        raise BadConfigurationError(f"'{ENV.App.LOG_LEVEL}' must be a logging level name (given value: {level!r}).")
    return {'level': level}


def _file_settings(section: dict[str, Any]) -> dict[str, Any]:
    data_dir = os.environ.get(ENV.Slink.DATA_DIR) or section.get('data_dir', DEFAULT_DATA_DIR)
    return {'data_dir': str(Path(data_dir).expanduser())}


def _redis_settings(section: dict[str, Any]) -> dict[str, Any]:
    # REDIS_HOST is only mandatory when the document names no host
    if section.get('host'):
        return _redis_settings_from(section)
    return _redis_settings_from_environment(section)


@require_environment(ENV.Redis.HOST)
def _redis_settings_from_environment(section: dict[str, Any]) -> dict[str, Any]:
    return _redis_settings_from(section)


def _redis_settings_from(section: dict[str, Any]) -> dict[str, Any]:
    port = os.environ.get(ENV.Redis.PORT) or section.get('port', 6379)
    db = os.environ.get(ENV.Redis.DB) or section.get('db', 0)
    return {
        'host': os.environ.get(ENV.Redis.HOST) or section['host'],
        'port': _int_setting(ENV.Redis.PORT, port, minimum=1),
        'db': _int_setting(ENV.Redis.DB, db, minimum=0),
        'username': os.environ.get(ENV.Redis.USERNAME) or section.get('username'),
        'password': os.environ.get(ENV.Redis.PASSWORD) or section.get('password'),
    }


def load_config() -> AppConfig:
    """Resolve the application configuration

    Returns:
        dict: Configuration with the 'backend' name, the 'history' and
              'logging' settings and the active backend's settings under
              its own name. The memory backend has an empty section.

    Raises:
        BadConfigurationError:
            If the document is unreadable or a setting holds an invalid value.
        MissingEnvironmentVariableError:
            If the redis backend is active and no Redis host is configured.

    Example:
        >>> os.environ['SLINK_BACKEND'] = 'memory'
        >>> load_config()
        {'backend': 'memory', 'history': {...}, 'logging': {...}, 'memory': {}}
    """
    document = _load_document()
    backend_name = str(os.environ.get(ENV.Slink.BACKEND) or document.get('active_backend', Backend.FILE)).lower()
    try:
        backend = Backend(backend_name)
    except ValueError as e:
        supported = ', '.join(f"'{b}'" for b in Backend)
        raise BadConfigurationError(f"Unsupported backend '{backend_name}' (supported: {supported}).") from e

    section = document.get('backends', {}).get(backend, {})
    match backend:
        case Backend.FILE:
            backend_settings = _file_settings(section)
        case Backend.REDIS:
            backend_settings = _redis_settings(section)
        case Backend.MEMORY:
            backend_settings = {}

    config = {
        'backend': str(backend),
        'history': _history_settings(document),
        'logging': _logging_settings(document),
        str(backend): backend_settings,
    }
    logger.debug('Loaded configuration.', extra={'backend': str(backend), 'appEnv': app_env()})
    return config
