import redis
from config.setting import settings
from util.error import handle_redis_error


class Redis:
    _instance = None
    redis_client = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Redis, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Initialize Redis client with connection pooling"""
        if not self.redis_client:
            self.redis_client = redis.Redis(
                host=settings.REDIS_HOST,
                port=settings.REDIS_PORT,
                db=settings.REDIS_DB,
                password=settings.REDIS_PASSWORD or None,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                retry_on_timeout=True,
                max_connections=20,
            )

    def increment(self, key: str, amount: int = 1) -> int:
        """Increment a key by amount"""
        with handle_redis_error(f"incrementing key {key}"):
            return self.redis_client.incr(key, amount)

    def expire(self, key: str, seconds: int) -> bool:
        """Set expiry on a key"""
        with handle_redis_error(f"setting expiry on key {key}"):
            return self.redis_client.expire(key, seconds)
