"""Request rate limiting.

Limits are read from settings when a request is checked, so they follow the
environment the app was started with.
"""

from functools import lru_cache

from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address

from tome.config import RateLimitSettings, Settings


@lru_cache
def get_rate_limit_settings() -> RateLimitSettings:
    return Settings().rate_limit


def get_default_rate_limit() -> str:
    """Limit applied to every route."""
    return get_rate_limit_settings().default_limit


def get_create_rate_limit() -> str:
    """Stricter limit for posting comments."""
    return get_rate_limit_settings().create_limit


limiter = Limiter(key_func=get_remote_address, default_limits=[get_default_rate_limit])

rate_limit_handler = _rate_limit_exceeded_handler
