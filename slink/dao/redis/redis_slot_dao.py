"""Data Access Object (DAO) implementation for history slots in Redis

The whole slot lives in one Redis string key, '<prefix>:history:<slot>'.
SET and DEL are atomic, so readers never observe a partial write.

Classes:
    RedisSlotDAO:
        Slot DAO persisting to a Redis datastore.

Example:
    >>> slot = RedisSlotDAO(key='slink_history', redis_host='localhost', prefix='slink:local')
    >>> slot.write('[]')
    >>> slot.read()
    '[]'
    >>> slot.slot_key
    'slink:local:history:slink_history'
"""

from beartype import beartype

from slink.dao.base import SlotBaseDAO
from slink.dao.exceptions import CorruptHistoryError
from slink.dao.redis.mixins import RedisClientMixin
from slink.dao.redis.helpers import handle_redis_connection_error


class RedisSlotDAO(RedisClientMixin, SlotBaseDAO):
    """Redis-based slot storage

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.
        slot_key (str):
            Fully qualified Redis key of this slot.
    """

    def __init__(self, key: str, **kwargs):
        super().__init__(key, **kwargs)
        self.slot_key = self.keys.history_slot_key(self.key)

    @handle_redis_connection_error
    def read(self) -> str | None:
        try:
            raw = self.redis.get(self.slot_key)
            if isinstance(raw, bytes):
                raw = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            # decode_responses=True clients fail inside GET itself
            raise CorruptHistoryError(f"History slot {self.slot_key!r} is not valid UTF-8 text.") from e
        return raw

    @handle_redis_connection_error
    @beartype
    def write(self, raw: str) -> None:
        self.redis.set(self.slot_key, raw)

    @handle_redis_connection_error
    def delete(self) -> None:
        self.redis.delete(self.slot_key)
