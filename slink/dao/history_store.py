"""Bounded, most-recent-first shortening history persisted in a single slot

This module provides HistoryStore, the HistoryBaseDAO implementation that
sits on top of any SlotBaseDAO (memory, file or Redis).

Responsibilities:
    - Read and decode the slot on every call (no in-memory cache);
    - Recover silently from absent or corrupt slot content;
    - Allocate unique record ids and stamp creation times;
    - Prepend new records and evict the oldest ones beyond the capacity bound;
    - Re-encode and write the whole list on every mutation.

Classes:
    HistoryStore:
        Shortening history backed by a slot DAO.

Example:
    >>> from slink.dao.local import MemorySlotDAO
    >>> store = HistoryStore(MemorySlotDAO(key='slink_history'), max_history_items=2)
    >>> for code in ('aaa', 'bbb', 'ccc'):
    ...     _ = store.add(f'https://example.com/{code}', f'https://slink.to/{code}', code, 0)
    >>> [record.shortcode for record in store.list()]
    ['ccc', 'bbb']
"""

import logging

from beartype import beartype

from slink.types import Clock, IdSource
from slink.models import ShortLinkRecord
from slink.constants import History
from slink.dao.base import HistoryBaseDAO, SlotBaseDAO
from slink.dao.exceptions import CorruptHistoryError
from slink.dao.serialization import encode_history, decode_history
from slink.utils.ids import MonotonicIdSource
from slink.utils.helpers import utc_now, isoformat_millis


logger = logging.getLogger(__name__)


class HistoryStore(HistoryBaseDAO):
    """Shortening history persisted as one JSON array in a slot

    Attributes:
        slot (SlotBaseDAO):
            Storage port holding the serialized history.
        max_history_items (int):
            Capacity bound. The store never holds more records after a mutation.

    Methods:
        list() -> list[ShortLinkRecord]:
            Records, most recent first. Corrupt or absent slots yield [].

        get(id: int) -> ShortLinkRecord | None:
            The record with the given id, or None.

        add(original, short_url, shortcode, clicks=0) -> ShortLinkRecord:
            Prepend a new record and persist the capped list.

        remove(id: int) -> None:
            Drop the record with the given id (no-op if absent) and persist.

        clear() -> None:
            Delete the slot.

    NOTE:
        - The store assumes a single writer. Two processes mutating the same
          slot concurrently may lose updates.
    """

    def __init__(
        self,
        slot: SlotBaseDAO,
        max_history_items: int = History.MAX_ITEMS,
        id_source: IdSource | None = None,
        clock: Clock | None = None,
    ):
        """Initialize a history store on top of a slot

        Args:
            slot (SlotBaseDAO):
                Storage port for the serialized history.
            max_history_items (int):
                Capacity bound, a positive integer. Defaults to 50.
            id_source (Callable[[], int] | None):
                Returns candidate record ids. Defaults to a MonotonicIdSource
                (millisecond timestamps, strictly increasing).
            clock (Callable[[], datetime] | None):
                Returns the creation time of new records. Defaults to utc_now().

        Raises:
            TypeError:
                If slot is not a SlotBaseDAO or max_history_items not an integer.
            ValueError:
                If max_history_items is not positive.
        """
        if not isinstance(slot, SlotBaseDAO):
            raise TypeError(f'Slot must be a SlotBaseDAO (given type: {type(slot)}).')
        if not isinstance(max_history_items, int) or isinstance(max_history_items, bool):
            raise TypeError(f'Capacity bound must be of type integer (given type: {type(max_history_items)}).')
        if max_history_items < 1:
            raise ValueError(f'Capacity bound must be a positive integer (given value: {max_history_items}).')

        self.slot = slot
        self.max_history_items = max_history_items
        self._next_id = id_source if id_source is not None else MonotonicIdSource()
        self._now = clock if clock is not None else utc_now

    def _load(self) -> list[ShortLinkRecord]:
        try:
            return decode_history(self.slot.read())
        except CorruptHistoryError as e:
            logger.warning('Discarding unreadable history slot.', extra={'slot': self.slot.key, 'reason': str(e)})
            return []

    def _save(self, records: list[ShortLinkRecord]) -> None:
        self.slot.write(encode_history(records))

    def _allocate_id(self, records: list[ShortLinkRecord]) -> int:
        candidate = self._next_id()
        if not records:
            return candidate

        # Ids must be unique among stored records and grow towards the head
        newest = max(record.id for record in records)
        return candidate if candidate > newest else newest + 1

    def list(self) -> list[ShortLinkRecord]:
        return self._load()

    @beartype
    def get(self, id: int) -> ShortLinkRecord | None:
        """Return the stored record with the given id, or None if absent."""
        return next((record for record in self._load() if record.id == id), None)

    @beartype
    def add(self, original: str, short_url: str, shortcode: str, clicks: int = 0) -> ShortLinkRecord:
        """Create a record, prepend it to the history and persist the capped list

        Args:
            original (str):
                The original URL (validated by the caller).
            short_url (str):
                The public short URL.
            shortcode (str):
                The generated shortcode.
            clicks (int):
                Opaque, non-negative display counter. Defaults to 0.

        Returns:
            ShortLinkRecord: the newly created record.

        Raises:
            TypeError:
                If clicks is a boolean.
            ValueError:
                If clicks is negative.
            DataStoreError:
                If the slot cannot be read or written.

        Example:
            >>> store.add('https://example.com', 'https://slink.to/ags5vy', 'ags5vy', 0)
            ShortLinkRecord(id=1760529600000, original='https://example.com', ...)
        """
        if isinstance(clicks, bool):
            raise TypeError(f'Clicks must be of type integer (given type: {type(clicks)}).')
        if clicks < 0:
            raise ValueError(f'Clicks must be a non-negative integer (given value: {clicks}).')

        records = self._load()
        record = ShortLinkRecord(
            id=self._allocate_id(records),
            original=original,
            short_url=short_url,
            shortcode=shortcode,
            created_at=isoformat_millis(self._now()),
            clicks=clicks,
        )

        records.insert(0, record)
        evicted = len(records) - self.max_history_items
        del records[self.max_history_items :]
        self._save(records)

        logger.debug(
            'Recorded short link.',
            extra={'slot': self.slot.key, 'recordId': record.id, 'shortcode': shortcode, 'evicted': max(evicted, 0)},
        )
        return record

    @beartype
    def remove(self, id: int) -> None:
        records = self._load()
        remaining = [record for record in records if record.id != id]
        # Slots written under a larger bound are trimmed on the way back
        self._save(remaining[: self.max_history_items])
        logger.debug('Removed short link.', extra={'slot': self.slot.key, 'recordId': id, 'found': len(remaining) != len(records)})

    def clear(self) -> None:
        self.slot.delete()
        logger.debug('Cleared history.', extra={'slot': self.slot.key})

    def __len__(self) -> int:
        return len(self._load())
