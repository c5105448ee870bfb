from slowapi import Limiter
from slowapi.util import get_remote_address

# Shared limiter; applied per-route to the credential endpoints.
limiter = Limiter(key_func=get_remote_address)
