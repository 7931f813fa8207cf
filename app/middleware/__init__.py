"""HTTP middleware: timeout and request ID.

Applied in create_app(); order matters: Starlette wraps each added middleware
around the previous ones, so the last added is outermost.
"""

from app.middleware.request_id import RequestIDMiddleware
from app.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
