"""Unit tests for the shortening orchestration in service.py

Test coverage includes:

1. Shortening
   - Ensures valid URLs are shortened and recorded with the generated code.
   - Ensures the same URL yields the same code twice.
   - Ensures invalid URLs raise ValidationError and record nothing.

2. History management
   - Ensures history(), delete() and clear_history() delegate to the store.

3. Factories
   - Ensures create_slot() builds the configured backend.
   - Ensures create_history_store() and LinkShortener.from_config() honor the configuration.
   - Ensures LinkShortener.from_config() initializes package logging.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from slink.dao import HistoryStore, HistoryBaseDAO
from slink.dao.local import MemorySlotDAO, FileSlotDAO
from slink.exceptions import ValidationError
from slink.service import LinkShortener, create_slot, create_history_store
from slink.utils.logging import JsonFormatter


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def store():
    return HistoryStore(MemorySlotDAO(key='slink_history'))


@pytest.fixture
def shortener(store):
    return LinkShortener(store)


def _config(backend: str, settings: dict, max_items: int = 50) -> dict:
    return {
        'backend': backend,
        'history': {'max_items': max_items, 'storage_key': 'slink_history', 'short_url_base': 'https://go.example'},
        backend: settings,
    }


# -------------------------------
# 1. Shortening
# -------------------------------


def test_shorten_records_mapping(shortener, store):
    record = shortener.shorten('https://example.com', clicks=5)

    assert record.original == 'https://example.com'
    assert record.shortcode == 'ags5vy'
    assert record.short_url == 'https://slink.to/ags5vy'
    assert record.clicks == 5
    assert store.list() == [record]


def test_shorten_strips_whitespace(shortener):
    record = shortener.shorten('   https://example.com  ')
    assert record.original == 'https://example.com'
    assert record.shortcode == 'ags5vy'


def test_shorten_same_url_twice(shortener, store):
    first = shortener.shorten('https://example.com')
    second = shortener.shorten('https://example.com')

    assert first.shortcode == second.shortcode
    assert first.id != second.id
    assert store.list() == [second, first]


def test_shorten_custom_base(store):
    record = LinkShortener(store, short_url_base='http://localhost:3000/').shorten('https://example.com')
    assert record.short_url == 'http://localhost:3000/ags5vy'


@pytest.mark.parametrize(
    'url, message',
    [
        ('', 'Please enter a URL'),
        ('example.com', 'Please enter a valid URL'),
        ('ftp://example.com', 'URL must start with http:// or https://'),
        ('https://example.com/\udcff', 'Please enter a valid URL'),
    ],
)
def test_shorten_invalid_url(shortener, store, url, message):
    with pytest.raises(ValidationError, match=message):
        shortener.shorten(url)
    assert store.list() == []


# -------------------------------
# 2. History management
# -------------------------------


def test_history_delete_and_clear(shortener):
    first = shortener.shorten('https://example.com/1')
    second = shortener.shorten('https://example.com/2')
    assert shortener.history() == [second, first]

    shortener.delete(first.id)
    assert shortener.history() == [second]

    shortener.clear_history()
    assert shortener.history() == []


def test_shortener_delegates_to_any_history_dao():
    store = MagicMock(spec=HistoryBaseDAO)
    shortener = LinkShortener(store)

    shortener.shorten('https://example.com', clicks=3)
    shortener.delete(1)
    shortener.clear_history()

    store.add.assert_called_once_with('https://example.com', 'https://slink.to/ags5vy', 'ags5vy', 3)
    store.remove.assert_called_once_with(1)
    store.clear.assert_called_once_with()


# -------------------------------
# 3. Factories
# -------------------------------


def test_create_memory_slot():
    slot = create_slot(_config('memory', {}))
    assert isinstance(slot, MemorySlotDAO)
    assert slot.key == 'slink_history'


def test_create_file_slot(tmp_path):
    slot = create_slot(_config('file', {'data_dir': str(tmp_path)}))
    assert isinstance(slot, FileSlotDAO)
    assert slot.path == tmp_path.resolve() / 'slink_history.json'


def test_create_redis_slot(monkeypatch):
    monkeypatch.setenv('APP_NAME', 'slink')
    monkeypatch.setenv('APP_ENV', 'test')
    settings = {'host': 'redis.local', 'port': 6379, 'db': 0, 'username': None, 'password': None}

    with patch('slink.service.RedisSlotDAO', autospec=True) as redis_slot_mock:
        slot = create_slot(_config('redis', settings))

    redis_slot_mock.assert_called_once_with(
        key='slink_history',
        redis_host='redis.local',
        redis_port=6379,
        redis_db=0,
        redis_username=None,
        redis_password=None,
        prefix='slink:test',
    )
    assert slot is redis_slot_mock.return_value


def test_create_history_store_uses_capacity():
    store = create_history_store(_config('memory', {}, max_items=3))
    assert isinstance(store, HistoryStore)
    assert store.max_history_items == 3


def test_create_history_store_loads_config(monkeypatch, tmp_path):
    monkeypatch.delenv('SLINK_CONFIG_PATH', raising=False)
    monkeypatch.setenv('SLINK_BACKEND', 'file')
    monkeypatch.setenv('SLINK_DATA_DIR', str(tmp_path))
    monkeypatch.setenv('SLINK_MAX_HISTORY_ITEMS', '7')

    store = create_history_store()

    assert isinstance(store.slot, FileSlotDAO)
    assert store.max_history_items == 7


def test_from_config_end_to_end(tmp_path):
    """Ensure a file-backed shortener persists across instances."""
    config = _config('file', {'data_dir': str(tmp_path)}, max_items=2)

    shortener = LinkShortener.from_config(config)
    for i in range(3):
        shortener.shorten(f'https://example.com/{i}')

    reopened = LinkShortener.from_config(config)
    history = reopened.history()

    assert [record.original for record in history] == ['https://example.com/2', 'https://example.com/1']
    assert all(record.short_url.startswith('https://go.example/') for record in history)


def test_from_config_initializes_package_logging():
    config = _config('memory', {}) | {'logging': {'level': 'DEBUG'}}

    LinkShortener.from_config(config)

    logger = logging.getLogger('slink')
    assert logger.level == logging.DEBUG
    assert [type(handler.formatter) for handler in logger.handlers] == [JsonFormatter]
