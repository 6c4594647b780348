"""
=============================================================================
HTTPCATALOG - HTTP Status-Code Registry and Middleware
=============================================================================

A catalog of HTTP response codes, the IANA set plus vendor, CDN and
application extensions, with stable descriptions and a small set of
request-pipeline middleware built on top of it.

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    httpcatalog/
    ├── __init__.py          # This file - package exports
    ├── codes/               # The eight code families
    │   ├── entry.py         # Entry record + ResponseCode base enum
    │   ├── informational.py # 1xx
    │   ├── success.py       # 2xx
    │   ├── redirection.py   # 3xx
    │   ├── client.py        # 4xx
    │   ├── server.py        # 5xx
    │   ├── service.py       # 6xx service errors
    │   ├── crawler.py       # 7xx crawler errors
    │   └── local.py         # 9xx local API outcomes
    ├── registry.py          # Lookup by number, listings, JSON/XML output
    ├── responses.py         # Cookie/header envelopes, canned responses
    ├── errors.py            # Exception hierarchy
    ├── config.py            # MiddlewareConfig dataclass
    ├── http/                # Request/response models
    └── middleware/          # Pipeline, unified, interceptor, auth

=============================================================================
QUICK START
=============================================================================

    from httpcatalog import registry
    from httpcatalog.codes import ServiceError

    registry.from_code(404)             # ClientError.NOT_FOUND
    registry.description_of(200)        # "Request processed successfully..."
    registry.to_xml(410)                # "<response><code>410</code>..."
    registry.filter_range(100, 103)     # [(100, ...), (101, ...), ...]

    ServiceError.READING_ERROR.as_json()
    # {"standard_http_code": {"code": 500, "name": "Internal Server Error"},
    #  "internal_http_code": {"code": 611, "name": "Reading Error"},
    #  "description": "An error occurred while reading the response..."}

    from httpcatalog.middleware import (
        MiddlewarePipeline, HttpInterceptor, UnifiedMiddleware, AuthMiddleware,
    )

    handler = MiddlewarePipeline().use(
        HttpInterceptor(),
        UnifiedMiddleware(allowed_origins=["example.com"], max_requests=100),
    ).wrap(app)

=============================================================================
"""

__version__ = "1.0.0"

from . import registry
from .codes import (
    ClientError,
    CrawlerError,
    Entry,
    Informational,
    LocalApiError,
    Redirection,
    ResponseCode,
    ServerError,
    ServiceError,
    Success,
)
from .config import MiddlewareConfig
from .errors import (
    CatalogError,
    InternalMiddlewareError,
    InvalidRequestError,
    MiddlewareError,
    RateLimitedError,
    UnauthorizedError,
    UnknownCodeError,
)
from .registry import description_of, from_code

__all__ = [
    "__version__",
    "registry",
    "Entry",
    "ResponseCode",
    "Informational",
    "Success",
    "Redirection",
    "ClientError",
    "ServerError",
    "ServiceError",
    "CrawlerError",
    "LocalApiError",
    "from_code",
    "description_of",
    "MiddlewareConfig",
    "CatalogError",
    "UnknownCodeError",
    "MiddlewareError",
    "UnauthorizedError",
    "InvalidRequestError",
    "RateLimitedError",
    "InternalMiddlewareError",
]
