"""In-memory slot storage

Slots live in a plain dict, keyed by slot name. Several MemorySlotDAO
instances can share one dict to emulate device-wide storage within a
process (e.g. in tests, or for ephemeral sessions).

Example:
    >>> storage = {}
    >>> first = MemorySlotDAO(key='slink_history', storage=storage)
    >>> second = MemorySlotDAO(key='slink_history', storage=storage)
    >>> first.write('[]')
    >>> second.read()
    '[]'
"""

from slink.dao.base import SlotBaseDAO


class MemorySlotDAO(SlotBaseDAO):
    """Slot storage kept in a process-local dict."""

    def __init__(self, key: str, storage: dict[str, str] | None = None):
        super().__init__(key)
        self.storage = {} if storage is None else storage

    def read(self) -> str | None:
        return self.storage.get(self.key)

    def write(self, raw: str) -> None:
        self.storage[self.key] = raw

    def delete(self) -> None:
        self.storage.pop(self.key, None)
