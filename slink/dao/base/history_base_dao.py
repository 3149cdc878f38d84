"""Abstract base class for shortening history data access objects (DAOs).

This class establishes a consistent contract for history stores, regardless of
how the underlying slot is persisted.

Example:
    >>> from slink.dao import HistoryStore
    >>> from slink.dao.local import MemorySlotDAO

    >>> store = HistoryStore(MemorySlotDAO(key='slink_history'))
    >>> record = store.add('https://example.com', 'https://slink.to/ags5vy', 'ags5vy', 0)
    >>> [r.shortcode for r in store.list()]
    ['ags5vy']
    >>> store.remove(record.id)
    >>> store.list()
    []
"""

from abc import ABC, abstractmethod

from slink.models import ShortLinkRecord


class HistoryBaseDAO(ABC):
    """Interface for shortening history DAOs.

    Methods:
        list() -> list[ShortLinkRecord]:
            Return all records, most recent first.
            Unreadable persisted data yields an empty list.

        add(original: str, short_url: str, shortcode: str, clicks: int) -> ShortLinkRecord:
            Create, prepend and persist a new record, evicting the oldest
            records beyond the capacity bound.

        remove(id: int) -> None:
            Delete the record with the given id. No-op if absent.

        clear() -> None:
            Delete all records.
    """

    @abstractmethod
    def list(self) -> list[ShortLinkRecord]:
        """Return all stored records in most-recent-first order

        Returns:
            list[ShortLinkRecord]: The records, possibly empty.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def add(self, original: str, short_url: str, shortcode: str, clicks: int = 0) -> ShortLinkRecord:
        """Create and persist a new record at the front of the history

        Args:
            original (str):
                The original URL.
            short_url (str):
                The public short URL.
            shortcode (str):
                The generated shortcode.
            clicks (int):
                Opaque, non-negative display counter.

        Returns:
            ShortLinkRecord: The newly created record.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def remove(self, id: int) -> None:
        """Delete the record with the given id, if present

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Delete every record

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
