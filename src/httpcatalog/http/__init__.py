"""
HTTP request and response models used by the middleware.
"""

from .request import HTTPRequest
from .response import HTTPResponse, ResponseBuilder, error_response, ok

__all__ = [
    "HTTPRequest",
    "HTTPResponse",
    "ResponseBuilder",
    "ok",
    "error_response",
]
