"""
Token check on the `key` query parameter.

    key=validated   → downstream runs; X-HTTP-Status-Code mirrors its status
    key=expired     → 401, X-Auth-Error: Token Expired
    key=<other>     → 401, X-Auth-Error: Invalid Token
    (no key)        → 400, X-Auth-Error: Missing Token

Every response carries X-HTTP-Status-Code. The stage keeps no state and
can be shared across threads.
"""

import logging
from typing import Optional

from .base import Middleware, NextHandler
from ..http.request import HTTPRequest
from ..http.response import HTTPResponse, ResponseBuilder

logger = logging.getLogger("httpcatalog.access")

STATUS_CODE_HEADER = "X-HTTP-Status-Code"
AUTH_ERROR_HEADER = "X-Auth-Error"

VALIDATED_TOKEN = "validated"
EXPIRED_TOKEN = "expired"

AUTH_SUCCESS_BODY = "Authentication Successful"


class AuthMiddleware(Middleware):
    """
    Validates the `key` query parameter before the handler runs.

    An empty body from the downstream handler is replaced by
    "Authentication Successful" on the validated path.
    """

    def __init__(self, param: str = "key"):
        self.param = param

    def __call__(self, request: HTTPRequest, next: NextHandler) -> HTTPResponse:
        token: Optional[str] = request.get_query(self.param)

        if token is None:
            return self._reject(request, 400, "Missing Token", "Missing auth token")
        if token == EXPIRED_TOKEN:
            return self._reject(
                request, 401, "Token Expired",
                "Your authentication token has expired, please log in again",
            )
        if token != VALIDATED_TOKEN:
            return self._reject(request, 401, "Invalid Token", "Invalid Token")

        response = next(request)
        if not response.body:
            response.set_body(AUTH_SUCCESS_BODY)
            if response.get_header("Content-Type") is None:
                response.set_header("Content-Type", "text/plain; charset=utf-8")
        response.set_header(STATUS_CODE_HEADER, str(response.status))
        return response

    def _reject(self, request: HTTPRequest, status: int, reason: str, body: str) -> HTTPResponse:
        logger.info(f"Auth rejected ({reason}): {request.method} {request.path}")
        return (ResponseBuilder()
            .status(status)
            .header(STATUS_CODE_HEADER, str(status))
            .header(AUTH_ERROR_HEADER, reason)
            .text(body)
            .build())
