"""
Request-pipeline middleware built on the status-code registry.

    from httpcatalog.middleware import (
        MiddlewarePipeline, UnifiedMiddleware, HttpInterceptor, AuthMiddleware,
    )

    pipeline = MiddlewarePipeline().use(
        HttpInterceptor(),
        UnifiedMiddleware(allowed_origins=["example.com"], max_requests=100),
        AuthMiddleware(),
    )
    handler = pipeline.wrap(app)
"""

from .base import (
    FunctionMiddleware,
    Middleware,
    MiddlewarePipeline,
    NextHandler,
    function_middleware,
)
from .auth import AuthMiddleware
from .interceptor import HttpInterceptor
from .unified import UnifiedMiddleware

__all__ = [
    "Middleware",
    "MiddlewarePipeline",
    "NextHandler",
    "FunctionMiddleware",
    "function_middleware",
    "UnifiedMiddleware",
    "HttpInterceptor",
    "AuthMiddleware",
]
