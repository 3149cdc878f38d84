"""Helper utilities for shortening orchestration.

Functions:
    get_short_url(shortcode, base) -> str
        Get string representation of short URL for a given shortcode
    validate_url(url) -> str
        Ensure a URL is an absolute http(s) URL
    utc_now() -> datetime
        Current time as a timezone-aware UTC datetime
    isoformat_millis(moment) -> str
        ISO-8601 UTC timestamp with millisecond precision and 'Z' suffix
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present

Example:
    >>> from slink.utils.helpers import get_short_url
    >>> get_short_url('ags5vy', 'https://slink.to/')
    'https://slink.to/ags5vy'
"""

import os
import functools
from datetime import datetime, UTC
from urllib.parse import urlsplit
from collections.abc import Callable

from slink.constants import DEFAULT_SHORT_URL_BASE
from slink.exceptions import ValidationError, MissingEnvironmentVariableError


def get_short_url(shortcode: str, base: str = DEFAULT_SHORT_URL_BASE) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base (str): public short URL base, e.g. 'https://slink.to'

    Returns:
        str: short url string representation
    """
    return f'{base.rstrip("/")}/{shortcode}'


def validate_url(url: str | None) -> str:
    """Ensure a URL is a non-empty, absolute http:// or https:// URL

    Surrounding whitespace is stripped before validation.

    Args:
        url (str | None): URL submitted by the user.

    Returns:
        str: the stripped URL.

    Raises:
        ValidationError:
            With a user-facing message when the URL is missing, malformed or
            uses another scheme.

    Example:
        >>> validate_url('  https://example.com ')
        'https://example.com'
        >>> validate_url('ftp://example.com')
        ValidationError: URL must start with http:// or https://
    """
    url = (url or '').strip()
    if not url:
        raise ValidationError('Please enter a URL')

    try:
        # Lone surrogates cannot be stored or sent anywhere
        url.encode('utf-8')
        components = urlsplit(url)
        # Accessing port validates it (raises ValueError when out of range)
        components.port
    except ValueError as e:
        raise ValidationError('Please enter a valid URL') from e

    if not components.scheme:
        raise ValidationError('Please enter a valid URL')
    if components.scheme.lower() not in {'http', 'https'}:
        raise ValidationError('URL must start with http:// or https://')
    if not components.hostname:
        raise ValidationError('Please enter a valid URL')
    if any(character.isspace() for character in components.netloc):
        raise ValidationError('Please enter a valid URL')
    return url


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def isoformat_millis(moment: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with millisecond precision

    Naive datetimes are assumed to already be in UTC.

    Example:
        >>> isoformat_millis(datetime(2025, 10, 15, 12, 0, tzinfo=UTC))
        '2025-10-15T12:00:00.000Z'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    # fmt: off
    return moment.astimezone(UTC) \
                 .isoformat(timespec='milliseconds') \
                 .replace('+00:00', 'Z')
    # fmt: on


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('REDIS_HOST')
        ... def redis_settings():
        ...     pass
        >>> redis_settings()
        MissingEnvironmentVariableError: Missing required environment variables: 'REDIS_HOST'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator
