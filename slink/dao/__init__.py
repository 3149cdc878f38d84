from slink.dao.base import SlotBaseDAO, HistoryBaseDAO
from slink.dao.history_store import HistoryStore


__all__ = [
    'SlotBaseDAO',
    'HistoryBaseDAO',
    'HistoryStore',
]
