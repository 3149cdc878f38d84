"""Abstract base class for slot storage data access objects (DAOs).

A slot is a single named unit of persisted storage holding one raw string
(the serialized history). This class is the storage port HistoryStore
depends on, so that the store can run against an in-memory fake, a local
file or a Redis key without changes.

Example:
    >>> from slink.dao.local import MemorySlotDAO
    >>> slot = MemorySlotDAO(key='slink_history')
    >>> slot.read() is None
    True
    >>> slot.write('[]')
    >>> slot.read()
    '[]'
    >>> slot.delete()
    >>> slot.read() is None
    True
"""

from abc import ABC, abstractmethod


class SlotBaseDAO(ABC):
    """Interface for slot storage DAOs.

    Attributes:
        key (str):
            Name of the slot.

    Methods:
        read() -> str | None:
            Return the raw slot content, or None if the slot is absent.
            Raises DataStoreError on connection or read failure and
            CorruptHistoryError on content that is not UTF-8 text.

        write(raw: str) -> None:
            Replace the slot content atomically.
            Raises DataStoreError on connection or write failure.

        delete() -> None:
            Remove the slot. No-op if the slot is absent.
            Raises DataStoreError on connection or write failure.

    Subclassing:
        Storage-specific implementations (e.g., FileSlotDAO or RedisSlotDAO)
        must extend this class and implement all abstract methods.
    """

    def __init__(self, key: str):
        if not isinstance(key, str):
            raise TypeError(f'Slot key must be of type string (given type: {type(key)}).')
        if not key:
            raise ValueError(f'Slot key must be a non-empty string (given value: {key!r}).')

        self.key = key

    @abstractmethod
    def read(self) -> str | None:
        """Return the raw slot content

        Returns:
            str | None: The stored string, or None if the slot is absent.

        Raises:
            CorruptHistoryError:
                If the stored bytes are not valid UTF-8 text.
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def write(self, raw: str) -> None:
        """Replace the slot content

        Readers observe either the previous or the new content, never a mix.

        Args:
            raw (str):
                The new slot content.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def delete(self) -> None:
        """Remove the slot entirely

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    def __repr__(self) -> str:
        return f'<{type(self).__name__} key={self.key!r}>'
