"""Unit tests for the RedisKeySchema class in redis_key_schema.py.

Test coverage includes:

1. History slot key generation
2. Default and custom prefix behavior
3. Invalid prefix types
"""

import pytest

from slink.dao.redis.redis_key_schema import RedisKeySchema


@pytest.mark.parametrize(
    'prefix, slot, expected',
    [
        (None, 'slink_history', 'history:slink_history'),
        ('slink:local', 'slink_history', 'slink:local:history:slink_history'),
        ('secret', 'work', 'secret:history:work'),
    ],
)
def test_history_slot_key(prefix, slot, expected):
    assert RedisKeySchema(prefix=prefix).history_slot_key(slot) == expected


@pytest.mark.parametrize('prefix', [123, -1, 45.6, [], {}])
def test_invalid_prefix_type_raises_error(prefix):
    with pytest.raises(TypeError):
        RedisKeySchema(prefix=prefix)
