"""
Exceptions raised by the catalog and its middleware.

Middleware errors carry the HTTP status they map to, so the component
that catches them can turn them into a response without a lookup table.

    try:
        check(request)
    except MiddlewareError as e:
        return error_response(e.status_code, **e.to_dict())
"""

from typing import Dict, Optional


class CatalogError(Exception):
    """Base class for every error raised by httpcatalog."""


class UnknownCodeError(CatalogError, LookupError):
    """A numeric code is not registered in any family."""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Unknown status code: {code}")


# =============================================================================
# MIDDLEWARE ERRORS
# =============================================================================

class MiddlewareError(CatalogError):
    """
    A request rejected by a middleware stage.

    Attributes:
        status_code: HTTP status used for the rejection response
        label: Short machine-readable error name put in the body
        message: Human-readable diagnostic
    """

    status_code: int = 500
    label: str = "MiddlewareError"

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        self.message = message or self.label
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.label, "message": self.message}


class UnauthorizedError(MiddlewareError):
    """The request origin is not in the allowed set."""

    status_code = 401
    label = "Unauthorized"


class InvalidRequestError(MiddlewareError):
    """The admission predicate rejected the request."""

    status_code = 400
    label = "InvalidRequest"


class RateLimitedError(InvalidRequestError):
    """
    The client exceeded its request budget for the current window.

    Reported as 400 InvalidRequest; pass status_code=429 to use Too Many
    Requests instead.
    """

    def __init__(self, message: str = "Rate limit exceeded", retry_after: Optional[int] = None,
                 status_code: Optional[int] = None):
        self.retry_after = retry_after
        super().__init__(message, status_code)


class InternalMiddlewareError(MiddlewareError):
    """An invariant of the middleware itself was violated."""

    status_code = 500
    label = "InternalMiddlewareError"
