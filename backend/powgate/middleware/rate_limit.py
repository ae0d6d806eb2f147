from slowapi import Limiter
from starlette.requests import Request


def get_client_key(request: Request) -> str:
    """Extract the client IP, trusting X-Forwarded-For from our proxy.

    The service is expected to run behind a reverse proxy that sets
    X-Forwarded-For; the first entry is the original client. Exposed
    directly, any client can set the header and pick its own rate limit key.
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


limiter = Limiter(key_func=get_client_key)
