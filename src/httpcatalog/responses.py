"""
=============================================================================
RESPONSE ENVELOPES
=============================================================================

Small formatters that wrap a catalog code and a payload into JSON.

    with_cookie(Success.OK, ("session", "abc123"))
    → {"status":"OK","code":200,"description":"Request processed...",
       "cookie":{"key":"session","value":"abc123"}}

    with_headers(ClientError.BAD_REQUEST, {"X-Trace": "1"})
    → {"status":"Bad Request","code":400,"description":"...",
       "headers":{"X-Trace":"1"}}

Envelopes are returned as JSON strings, ready to be used as a body.

custom_response() and mock_response() build whole HTTPResponse objects
for handlers and tests.

=============================================================================
"""

import json
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from . import registry
from .codes import ClientError, ResponseCode, Success
from .http.response import HTTPResponse, ResponseBuilder

Cookie = Tuple[str, str]
CodeLike = Union[ResponseCode, int]


def _resolve(code: CodeLike) -> ResponseCode:
    if isinstance(code, ResponseCode):
        return code
    return registry.lookup(code)


def _envelope(member: ResponseCode, **extra: Any) -> Dict[str, Any]:
    document: Dict[str, Any] = {
        "status": member.standard_name,
        "code": member.code,
        "description": member.description,
    }
    document.update(extra)
    return document


def _dumps(document: Dict[str, Any]) -> str:
    return json.dumps(document, ensure_ascii=False, separators=(",", ":"))


# =============================================================================
# COOKIE AND HEADER ENVELOPES
# =============================================================================

def with_cookie(code: CodeLike, cookie: Cookie) -> str:
    """
    Envelope carrying a cookie.

    Args:
        code: Catalog member, or a registered numeric code
        cookie: (key, value)

    Raises:
        UnknownCodeError: If a numeric code is not registered
    """
    key, value = cookie
    return _dumps(_envelope(_resolve(code), cookie={"key": key, "value": value}))


def with_headers(code: CodeLike, headers: Mapping[str, str]) -> str:
    """Envelope carrying a header map."""
    return _dumps(_envelope(_resolve(code), headers=dict(headers)))


def ok_with_cookie(cookie: Cookie) -> str:
    return with_cookie(Success.OK, cookie)


def bad_request_with_cookie(cookie: Cookie) -> str:
    return with_cookie(ClientError.BAD_REQUEST, cookie)


def ok_with_headers(headers: Mapping[str, str]) -> str:
    return with_headers(Success.OK, headers)


def bad_request_with_headers(headers: Mapping[str, str]) -> str:
    return with_headers(ClientError.BAD_REQUEST, headers)


# =============================================================================
# WHOLE RESPONSES
# =============================================================================

def custom_response(
    code: int,
    name: str,
    data: Any = None,
    description: Optional[str] = None,
) -> HTTPResponse:
    """
    Build an HTTPResponse for an arbitrary code.

    Extension codes are sent with their standard (wire) status; codes
    the catalog does not know are sent as given.

    Args:
        code: Status code
        name: Label for the response
        data: JSON-serializable payload
        description: Defaults to the catalog description

    Returns:
        Response whose JSON body is {"code","name","data","description"}
    """
    member = registry.from_code(code)
    status = member.code if member is not None else code
    if description is None:
        description = member.description if member is not None else ""

    return (ResponseBuilder()
        .status(status)
        .json({"code": code, "name": name, "data": data, "description": description})
        .build())


class MockResponses(Enum):
    """Canned responses for tests and examples."""

    OK = 200
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500

    @property
    def member(self) -> ResponseCode:
        return registry.lookup(self.value)


def mock_response(kind: MockResponses, data: Any = None) -> HTTPResponse:
    """
    A JSON response for one of the MockResponses kinds.

    The body is the catalog envelope of the code, with `data` attached.
    """
    member = kind.member
    return (ResponseBuilder()
        .status(member.code)
        .json(_envelope(member, data=data))
        .build())


__all__ = [
    "with_cookie",
    "with_headers",
    "ok_with_cookie",
    "bad_request_with_cookie",
    "ok_with_headers",
    "bad_request_with_headers",
    "custom_response",
    "MockResponses",
    "mock_response",
]
