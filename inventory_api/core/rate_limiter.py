# inventory_api/core/rate_limiter.py

from slowapi import Limiter
from slowapi.util import get_remote_address

from inventory_api.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.DEFAULT_RATE_LIMIT],
    enabled=settings.RATE_LIMIT_ENABLED,
)
