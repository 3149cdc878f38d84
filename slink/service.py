"""Shortening orchestration for presentation layers

This module wires the pieces a user interface needs: URL validation, code
generation, short URL building and the persisted history.

Classes:
    LinkShortener:
        Facade used by presentation layers to shorten URLs and manage history.

Functions:
    create_slot(config) -> SlotBaseDAO
        Build the slot DAO selected by the configuration.
    create_history_store(config) -> HistoryStore
        Build a HistoryStore from the configuration.

Example:
    >>> from slink.service import LinkShortener, create_history_store
    >>> shortener = LinkShortener(create_history_store())
    >>> record = shortener.shorten('https://example.com')
    >>> record.short_url
    'https://slink.to/ags5vy'
    >>> [r.original for r in shortener.history()]
    ['https://example.com']
"""

import logging

from slink.types import AppConfig
from slink.models import ShortLinkRecord
from slink.constants import Backend, DEFAULT_SHORT_URL_BASE
from slink.dao import HistoryBaseDAO, HistoryStore, SlotBaseDAO
from slink.dao.local import FileSlotDAO, MemorySlotDAO
from slink.dao.redis import RedisSlotDAO
from slink.utils import generate_shortcode, get_short_url, validate_url, load_config, app_prefix, initialize_logging


logger = logging.getLogger(__name__)


def create_slot(config: AppConfig) -> SlotBaseDAO:
    """Build the slot DAO for the configured backend

    Args:
        config (dict): Output of load_config().

    Returns:
        SlotBaseDAO: A memory, file or Redis slot named after the storage key.

    Raises:
        DataStoreError:
            If the Redis backend is selected and Redis is unreachable.
    """
    key = config['history']['storage_key']
    backend = Backend(config['backend'])
    settings = config.get(str(backend), {})

    match backend:
        case Backend.MEMORY:
            return MemorySlotDAO(key=key)
        case Backend.FILE:
            return FileSlotDAO(key=key, data_dir=settings['data_dir'])
        case Backend.REDIS:
            redis_config = {f'redis_{k}': v for k, v in settings.items()}
            return RedisSlotDAO(key=key, **redis_config, prefix=app_prefix())


def create_history_store(config: AppConfig | None = None) -> HistoryStore:
    """Build a HistoryStore from the configuration (load_config() by default)."""
    config = load_config() if config is None else config
    slot = create_slot(config)
    logger.debug('Created history store.', extra={'backend': config['backend'], 'slot': repr(slot)})
    return HistoryStore(slot, max_history_items=config['history']['max_items'])


class LinkShortener:
    """Shorten URLs and keep their history

    This class follows this procedure to shorten URLs:
    - Step 1: Validate the submitted URL (absolute http/https)
    - Step 2: Generate the shortcode for the URL
    - Step 3: Build the public short URL
    - Step 4: Record the mapping in the history store

    Attributes:
        store (HistoryBaseDAO):
            History the shortened links are recorded in.
        short_url_base (str):
            Public prefix of short URLs.

    Example:
        >>> shortener = LinkShortener(store, short_url_base='https://slink.to')
        >>> shortener.shorten('ftp://example.com')
        ValidationError: URL must start with http:// or https://
    """

    def __init__(self, store: HistoryBaseDAO, short_url_base: str = DEFAULT_SHORT_URL_BASE):
        self.store = store
        self.short_url_base = short_url_base

    @classmethod
    def from_config(cls, config: AppConfig | None = None) -> 'LinkShortener':
        """Build a shortener, its history store and package logging from configuration."""
        config = load_config() if config is None else config
        initialize_logging(config.get('logging', {}).get('level'))
        return cls(create_history_store(config), short_url_base=config['history']['short_url_base'])

    def shorten(self, url: str, clicks: int = 0) -> ShortLinkRecord:
        """Shorten a URL and record it in the history

        Args:
            url (str):
                URL submitted by the user. Surrounding whitespace is ignored.
            clicks (int):
                Opaque display counter stored with the record. Defaults to 0.

        Returns:
            ShortLinkRecord: the recorded mapping.

        Raises:
            ValidationError:
                If the URL is missing, malformed or not http(s).
            DataStoreError:
                If the history cannot be persisted.
        """
        # 1- Validate the submitted URL
        original = validate_url(url)

        # 2- Generate shortcode for the new link
        shortcode = generate_shortcode(original)

        # 3- Build the public short URL
        short_url = get_short_url(shortcode, self.short_url_base)

        # 4- Record the mapping
        record = self.store.add(original, short_url, shortcode, clicks)
        logger.info('Shortened URL.', extra={'original': original, 'shortUrl': short_url})
        return record

    def history(self) -> list[ShortLinkRecord]:
        return self.store.list()

    def delete(self, id: int) -> None:
        self.store.remove(id)

    def clear_history(self) -> None:
        self.store.clear()
