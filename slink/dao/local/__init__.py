from slink.dao.local.memory_slot_dao import MemorySlotDAO
from slink.dao.local.file_slot_dao import FileSlotDAO


__all__ = [
    'MemorySlotDAO',
    'FileSlotDAO',
]
