# app/utils/retry.py
from tenacity import (
    retry,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
    wait_fixed,
)
import redis

from app.utils.settings import CART_LOCK_WAIT_ATTEMPTS, CART_LOCK_WAIT_SECONDS


def redis_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type(redis.RedisError),
    )


def lock_wait_retry():
    #ponawiaj dopoki lock zajety, po ostatniej probie zwroc False zamiast RetryError
    return retry(
        stop=stop_after_attempt(CART_LOCK_WAIT_ATTEMPTS),
        wait=wait_fixed(CART_LOCK_WAIT_SECONDS),
        retry=retry_if_result(lambda acquired: not acquired),
        retry_error_callback=lambda state: False,
    )
