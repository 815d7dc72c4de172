import uuid
from contextlib import contextmanager

import redis

from app.domain.errors import CartLockedError
from app.utils.retry import redis_retry, lock_wait_retry
from app.utils.settings import REDIS_URL, CART_LOCK_TTL_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)

#LUA porownaj i usun, atomicity
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""

#redis wykonuje skrypt lua atomowo, nikt nie wcisnie sie miedzy GET a DEL
#wiec lock zwalnia tylko ten kto go zalozyl (token)


class LockService:
    """
    -blokada koszyka uzytkownika (add / remove / checkout)
    -zwalnianie locka tylko przez wlasciciela tokenu
    -atomowosc przy pomocy lua
    """

    def __init__(self, client: redis.Redis | None = None, url: str | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @staticmethod
    def cart_key(user_id: int) -> str:
        return f"cart:{user_id}:lock"

    @redis_retry()
    def acquire(self, key: str, token: str, ttl: int) -> bool:
        #SET cart:1:lock "<token>" NX EX 10
        return bool(
            self.redis.set(
                name=key,
                value=token,
                nx=True, #tylko jesli klucz nie istnieje
                ex=ttl, #wygasa sam, nawet jak proces padnie
            )
        )

    @redis_retry()
    def release(self, key: str, token: str) -> bool:
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)

    @lock_wait_retry()
    def _acquire_waiting(self, key: str, token: str, ttl: int) -> bool:
        return self.acquire(key, token, ttl)

    @contextmanager
    def hold_cart(self, user_id: int, ttl: int = CART_LOCK_TTL_SECONDS):
        """
        Trzyma lock koszyka na czas bloku.
        CartLockedError gdy nie udalo sie go zalozyc w limicie prob.
        """
        key = self.cart_key(user_id)
        token = uuid.uuid4().hex

        if not self._acquire_waiting(key, token, ttl):
            logger.warning(f"Could not acquire {key}")
            raise CartLockedError(user_id)

        logger.info(f"Acquired {key}")
        try:
            yield
        finally:
            if not self.release(key, token):
                #ttl minal zanim skonczylismy, lock mogl przejac ktos inny
                logger.warning(f"Lock {key} expired before release")
