"""
=============================================================================
HTTP RESPONSE MODEL AND BUILDER
=============================================================================

Responses produced by handlers and middleware.

The status is a plain int so that any catalog code can be used, including
extension codes such as 3020.

=============================================================================
BUILDER PATTERN
=============================================================================

    response = (ResponseBuilder()
        .status(201)
        .header("Location", "/users/123")
        .json({"id": 123})
        .build())

=============================================================================
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from .. import registry


@dataclass
class HTTPResponse:
    """
    A response on its way back to the host server.

    Header names keep the case they were set with; get_header() looks
    them up case-insensitively.
    """

    status: int = 200
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body.decode("utf-8"))

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return default

    def set_header(self, name: str, value: str) -> "HTTPResponse":
        """
        Set a response header.

        Returns self for method chaining:
            response.set_header("X-One", "1").set_header("X-Two", "2")
        """
        self.headers[name] = value
        return self

    def set_body(self, body: Union[str, bytes]) -> "HTTPResponse":
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        return self


class ResponseBuilder:
    """
    Fluent builder for HTTPResponse.

    Every setter returns the builder, so calls chain; build() produces
    the response.
    """

    def __init__(self):
        self._status: int = 200
        self._headers: Dict[str, str] = {}
        self._body: bytes = b""

    def status(self, status: int) -> "ResponseBuilder":
        self._status = int(status)
        return self

    def header(self, name: str, value: str) -> "ResponseBuilder":
        self._headers[name] = value
        return self

    def headers(self, headers: Dict[str, str]) -> "ResponseBuilder":
        self._headers.update(headers)
        return self

    def content_type(self, content_type: str) -> "ResponseBuilder":
        self._headers["Content-Type"] = content_type
        return self

    def body(self, body: Union[str, bytes]) -> "ResponseBuilder":
        self._body = body.encode("utf-8") if isinstance(body, str) else body
        return self

    def text(self, text: str, content_type: str = "text/plain; charset=utf-8") -> "ResponseBuilder":
        self._body = text.encode("utf-8")
        self._headers["Content-Type"] = content_type
        return self

    def json(self, data: Any, pretty: bool = False) -> "ResponseBuilder":
        """
        Set a JSON body and its Content-Type.

        Args:
            data: Any JSON-serializable value
            pretty: Indent the output
        """
        indent = 2 if pretty else None
        self._body = json.dumps(data, indent=indent, ensure_ascii=False).encode("utf-8")
        self._headers["Content-Type"] = "application/json; charset=utf-8"
        return self

    def build(self) -> HTTPResponse:
        return HTTPResponse(
            status=self._status,
            headers=self._headers,
            body=self._body,
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================
#
# Quick one-liners for the responses middleware and handlers need most.
#
#     return ok({"message": "Success"})
#     return error_response(401, "Unauthorized", "Origin not allowed")
#
# =============================================================================

def ok(body: Union[str, bytes, dict, list] = "", content_type: Optional[str] = None) -> HTTPResponse:
    """
    Create a 200 OK response.

    dict/list bodies become JSON, str bodies plain text, bytes are sent
    as-is.
    """
    builder = ResponseBuilder().status(200)

    if isinstance(body, (dict, list)):
        builder.json(body)
    elif isinstance(body, str):
        builder.text(body, content_type or "text/plain; charset=utf-8")
    else:
        builder.body(body)
        if content_type:
            builder.content_type(content_type)

    return builder.build()


def error_response(status: int, error: str, message: Optional[str] = None) -> HTTPResponse:
    """
    JSON error response: {"error": ..., "message": ...}.

    The message defaults to the catalog description of the status.
    """
    if message is None:
        message = registry.description_of(status) or error
    return ResponseBuilder().status(status).json({"error": error, "message": message}).build()

