"""Rate limiter configuration for write endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

# Rate limiter instance - shared across routers
limiter = Limiter(key_func=get_remote_address)
