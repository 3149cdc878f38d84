from slink.dao.redis.redis_key_schema import RedisKeySchema
from slink.dao.redis.mixins import RedisClientMixin
from slink.dao.redis.redis_slot_dao import RedisSlotDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'RedisSlotDAO',
]
