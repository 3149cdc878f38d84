"""Redis connection setup shared by the Redis-backed history slot

The mixin owns the client and the key schema, and refuses to hand out a DAO
whose Redis server does not answer PING. A history slot on an unreachable
server would otherwise fail only at the first read.

Classes:
    - RedisClientMixin: connects (or adopts a client), namespaces keys and checks the server.

Example:
    >>> class RedisSlotDAO(RedisClientMixin, SlotBaseDAO):
    ...     pass
    ...
    >>> slot = RedisSlotDAO(key='slink_history', redis_host='localhost', prefix='slink:local')
    >>> slot.keys.history_slot_key('slink_history')
    'slink:local:history:slink_history'
"""

from typing import Optional

import redis

from slink.dao.redis.redis_key_schema import RedisKeySchema
from slink.dao.redis.helpers import describe_connection
from slink.dao.exceptions import DataStoreError


class RedisClientMixin:
    """Client and key namespace for DAOs that keep history slots in Redis

    Attributes:
        redis (redis.Redis):
            Client holding the slot keys. Responses are decoded to str.

        keys (RedisKeySchema):
            Builds '<prefix>:history:<slot>' key names.

    Methods:
        _healthcheck(raise_error: bool = True) -> bool:
            PING the server. Raises DataStoreError, or returns False, when it is unreachable.
    """

    def __init__(
        self,
        *args,
        redis_host: Optional[str] = 'localhost',
        redis_port: Optional[int] = 6379,
        redis_db: Optional[int] = 0,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_client: Optional[redis.Redis] = None,
        prefix: Optional[str] = None,
        **kwargs,
    ):
        """Connect to the Redis server that stores the history slots

        `redis_*` arguments mirror the 'redis' section of `load_config()`.
        Everything else (the slot key) goes to the next class in the MRO.

        Args:
            redis_host, redis_port, redis_db (Optional[str | int]):
                Server address and database index. Ports and indexes read
                from the environment arrive as strings and are converted.

            redis_username, redis_password (Optional[str]):
                ACL credentials, if the server requires them.

            redis_client (Optional[redis.Redis]):
                Client to adopt instead of connecting (tests, shared pools).
                Connection arguments are ignored when it is given.

            prefix (Optional[str]):
                Key namespace, usually `app_prefix()`. None leaves keys bare.

        Raises:
            DataStoreError:
                If the server does not answer PING.
        """
        super().__init__(*args, **kwargs)

        if redis_client is None:
            # NOTE: responses are decoded, slots are always UTF-8 JSON text
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=True,
                username=redis_username,
                password=redis_password,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING the slot server

        Refused connections, failed authentication and timeouts all count
        as unreachable.

        Returns:
            bool: True once the server answered.
        """
        try:
            self.redis.ping()
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            if raise_error:
                raise DataStoreError(
                    f"Can't connect to Redis at {describe_connection(self.redis)}. Check the provided configuration parameters."
                ) from e
            return False
        return True
