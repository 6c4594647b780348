"""
=============================================================================
HTTP INTERCEPTOR
=============================================================================

Annotates every downstream response with three headers:

    x-request-id           6f1c0f0e-0a4b-4c52-9d8e-1b7e0f3f2a11
    x-response-time-ms     12
    x-status-description   The server cannot find the requested resource...

The request id is a full UUID4 (122 random bits in the standard 36
character form). It lets a client quote one specific request when it
reports a problem, and lets log lines from this stage be correlated with
the host's own logs.

The description header is only added when the catalog knows the
response status.

=============================================================================
"""

import logging
import time
import uuid

from .base import Middleware, NextHandler
from ..http.request import HTTPRequest
from ..http.response import HTTPResponse
from ..registry import description_of

logger = logging.getLogger("httpcatalog.access")

REQUEST_ID_HEADER = "x-request-id"
RESPONSE_TIME_HEADER = "x-response-time-ms"
STATUS_DESCRIPTION_HEADER = "x-status-description"


def _header_safe(text: str) -> str:
    # Header values must stay on one line and be latin-1 encodable
    flat = " ".join(text.split())
    return flat.encode("latin-1", "replace").decode("latin-1")


class HttpInterceptor(Middleware):
    """
    Adds request id, timing and status description headers.

    Exceptions raised downstream are logged and re-raised unchanged.
    """

    def __init__(self, describe_status: bool = True):
        """
        Args:
            describe_status: Add x-status-description for known codes
        """
        self.describe_status = describe_status

    def __call__(self, request: HTTPRequest, next: NextHandler) -> HTTPResponse:
        request_id = str(uuid.uuid4())
        start_time = time.perf_counter()

        try:
            response = next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"[{request_id}] Request failed: {request.method} {request.path} "
                f"- {type(e).__name__}: {e} ({duration_ms:.2f}ms)"
            )
            raise

        elapsed_ms = int((time.perf_counter() - start_time) * 1000)

        response.set_header(REQUEST_ID_HEADER, request_id)
        response.set_header(RESPONSE_TIME_HEADER, str(elapsed_ms))

        if self.describe_status:
            description = description_of(response.status)
            if description is not None:
                response.set_header(STATUS_DESCRIPTION_HEADER, _header_safe(description))

        logger.debug(
            f"[{request_id}] {request.method} {request.path} "
            f"{response.status} {elapsed_ms}ms"
        )
        return response
