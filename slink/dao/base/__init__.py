from slink.dao.base.slot_base_dao import SlotBaseDAO
from slink.dao.base.history_base_dao import HistoryBaseDAO


__all__ = [
    'SlotBaseDAO',
    'HistoryBaseDAO',
]
