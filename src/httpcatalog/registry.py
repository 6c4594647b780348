"""
=============================================================================
UNIFIED STATUS-CODE REGISTRY
=============================================================================

One entry point over the eight code families, keyed by number.

=============================================================================
RESOLUTION ORDER
=============================================================================

Families overlap: 400 is both ClientError.BAD_REQUEST and the wire code of
every CrawlerError parsing failure. Lookups therefore walk the families in
a FIXED order and return the first hit:

    Informational → Success → Redirection → ClientError
        → ServerError → ServiceError → CrawlerError → LocalApiError

    from_code(400)   → ClientError.BAD_REQUEST     (not CrawlerError)
    from_code(611)   → ServiceError.READING_ERROR  (internal code)
    from_code(3020)  → CrawlerError.PROGRAMMABLE_REDIRECTION

Standard codes are tried first across every family. Only when no family
registers the number as a standard code is a second pass made on the
internal codes, so extension numbers (611, 741, 983, 3020 ...) resolve
too.

=============================================================================
OUTPUT SHAPES
=============================================================================

    to_json(410)  → {"code":410,"description":"The requested resource..."}
    to_xml(410)   → <response><code>410</code><description>...</description></response>
    enrich(404, "example.com", 12)
                  → {"code":404,"description":"...",
                     "metadata":{"status_family":"Client Error","is_error":true,
                                 "cors_origin":"example.com","elapsed_ms":12}}

Lookups never raise: an unknown code yields None (or an empty list).
lookup() is the strict variant for callers that prefer an exception.

=============================================================================
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type
from xml.sax.saxutils import escape

from .codes import (
    ClientError,
    CrawlerError,
    EntryTuple,
    Informational,
    LocalApiError,
    Redirection,
    ResponseCode,
    ServerError,
    ServiceError,
    Success,
)
from .errors import UnknownCodeError

logger = logging.getLogger(__name__)


# =============================================================================
# FAMILIES
# =============================================================================

FAMILY_ORDER: Tuple[Type[ResponseCode], ...] = (
    Informational,
    Success,
    Redirection,
    ClientError,
    ServerError,
    ServiceError,
    CrawlerError,
    LocalApiError,
)

# Short names accepted by list_family() next to the class names
FAMILY_ALIASES: Dict[str, Type[ResponseCode]] = {
    "Service": ServiceError,
    "Crawler": CrawlerError,
    "LocalApi": LocalApiError,
}

_FAMILIES_BY_NAME: Dict[str, Type[ResponseCode]] = {
    family.family_name(): family for family in FAMILY_ORDER
}
_FAMILIES_BY_NAME.update(FAMILY_ALIASES)

# (low, high, label) used by classify_family(); 800-899 is left out
_FAMILY_RANGES = (
    (100, 199, "Informational"),
    (200, 299, "Success"),
    (300, 399, "Redirection"),
    (400, 499, "Client Error"),
    (500, 599, "Server Error"),
    (600, 699, "Service Error"),
    (700, 799, "Crawler Error"),
    (900, 999, "Local API Error"),
)

STANDARD_CODE_RANGE = range(100, 600)

CodeDescription = Tuple[int, str]


def _dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def _now_rfc3339() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# LOOKUP
# =============================================================================

def from_code(code: int) -> Optional[ResponseCode]:
    """
    Resolve a numeric code to its family member.

    Args:
        code: Standard code, or an extension (internal) code

    Returns:
        The first member in registry order, or None if nothing matches
    """
    for family in FAMILY_ORDER:
        member = family.variant_of(code)
        if member is not None:
            return member

    for family in FAMILY_ORDER:
        member = family.from_internal_code(code)
        if member is not None:
            return member

    logger.debug(f"No family registers status code {code}")
    return None


def lookup(code: int) -> ResponseCode:
    """Like from_code(), but raises UnknownCodeError instead of returning None."""
    member = from_code(code)
    if member is None:
        raise UnknownCodeError(code)
    return member


def family_of(name: str) -> Optional[Type[ResponseCode]]:
    """Family class for a name such as "ClientError" or "Crawler"."""
    return _FAMILIES_BY_NAME.get(name)


def description_of(code: int) -> Optional[str]:
    member = from_code(code)
    return member.description if member is not None else None


def tuple_of(code: int) -> Optional[EntryTuple]:
    member = from_code(code)
    return member.as_tuple() if member is not None else None


def json_of(code: int) -> Optional[Dict[str, Any]]:
    member = from_code(code)
    return member.as_json() if member is not None else None


# =============================================================================
# CLASSIFICATION
# =============================================================================

def classify_family(code: int) -> str:
    """
    Human label of the range a number falls in.

    Examples:
        classify_family(404)  # "Client Error"
        classify_family(850)  # "Unknown"
    """
    for low, high, label in _FAMILY_RANGES:
        if low <= code <= high:
            return label
    return "Unknown"


def is_error(code: int) -> bool:
    """
    True when the code signals an error (standard code >= 400).

    Extension codes are judged by their wire status, so 901 "Approved"
    (reported as 200) is not an error while 611 "Reading Error"
    (reported as 500) is.
    """
    member = from_code(code)
    standard = member.code if member is not None else code
    return standard >= 400


def is_standard_code(code: int) -> bool:
    return code in STANDARD_CODE_RANGE


# =============================================================================
# RANGE AND FAMILY LISTINGS
# =============================================================================

def filter_range(low: int, high: int) -> List[CodeDescription]:
    """
    All registered standard codes in [low, high], inclusive.

    Families are scanned in registry order and members in declaration
    order. A standard code shared by several members is listed once,
    with the description of the first member seen.

    Example:
        filter_range(100, 103)
        # [(100, "The server has received..."), (101, ...), (102, ...), (103, ...)]
    """
    seen = set()
    result = []
    for family in FAMILY_ORDER:
        for member in family.iter():
            code = member.code
            if low <= code <= high and code not in seen:
                seen.add(code)
                result.append((code, member.description))
    return result


def list_family(name: str) -> List[CodeDescription]:
    """
    (code, description) for every member of a family.

    Unknown names give an empty list rather than an error.
    """
    family = family_of(name)
    if family is None:
        logger.debug(f"Unknown code family: {name!r}")
        return []
    return [(member.code, member.description) for member in family.iter()]


def populate_metadata(
    code: int,
    description: str,
    request_metadata: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Metadata block attached to a code in the *_with_metadata listings.

    Caller-supplied request metadata (URL, method, client ...) is merged
    in after the derived keys.
    """
    metadata: Dict[str, Any] = {
        "description": description,
        "is_error": is_error(code),
        "status_family": classify_family(code),
    }
    if request_metadata:
        metadata.update(request_metadata)
    return metadata


def filter_range_with_metadata(
    low: int,
    high: int,
    request_metadata: Optional[Dict[str, Any]] = None,
) -> List[Tuple[int, str, Dict[str, Any]]]:
    return [
        (code, description, populate_metadata(code, description, request_metadata))
        for code, description in filter_range(low, high)
    ]


def list_family_with_metadata(
    name: str,
    request_metadata: Optional[Dict[str, Any]] = None,
) -> List[Tuple[int, str, Dict[str, Any]]]:
    return [
        (code, description, populate_metadata(code, description, request_metadata))
        for code, description in list_family(name)
    ]


# =============================================================================
# SINGLE-CODE FORMATTERS
# =============================================================================

def to_json(code: int) -> Optional[str]:
    """{"code":N,"description":T} for a registered code, else None."""
    description = description_of(code)
    if description is None:
        return None
    return _dumps({"code": code, "description": description})


def to_xml(code: int) -> Optional[str]:
    """<response><code>N</code><description>T</description></response>, or None."""
    description = description_of(code)
    if description is None:
        return None
    return _xml_document(code, description)


def to_json_filtered(code: int) -> Optional[str]:
    """
    JSON form restricted to the standard range (100-599).

    The object carries "is_standard_code": true; codes outside the
    range give None even when they are registered.
    """
    if not is_standard_code(code):
        return None
    description = description_of(code)
    if description is None:
        return None
    return _dumps({"code": code, "description": description, "is_standard_code": True})


def to_xml_filtered(code: int) -> Optional[str]:
    if not is_standard_code(code):
        return None
    description = description_of(code)
    if description is None:
        return None
    return _xml_document(code, description, is_standard_code="true")


def to_json_with_metadata(code: int) -> Optional[str]:
    """JSON form with requested_at, status_family and is_error added."""
    description = description_of(code)
    if description is None:
        return None
    return _dumps({
        "code": code,
        "description": description,
        "metadata": {
            "requested_at": _now_rfc3339(),
            "status_family": classify_family(code),
            "is_error": is_error(code),
        },
    })


def to_xml_with_metadata(code: int) -> Optional[str]:
    description = description_of(code)
    if description is None:
        return None
    metadata = (
        f"<metadata>"
        f"<requested_at>{_now_rfc3339()}</requested_at>"
        f"<status_family>{escape(classify_family(code))}</status_family>"
        f"<is_error>{str(is_error(code)).lower()}</is_error>"
        f"</metadata>"
    )
    return (
        f"<response><code>{code}</code>"
        f"<description>{escape(description)}</description>"
        f"{metadata}</response>"
    )


def _xml_document(code: int, description: str, **extra: str) -> str:
    fields = "".join(f"<{key}>{escape(value)}</{key}>" for key, value in extra.items())
    return (
        f"<response><code>{code}</code>"
        f"<description>{escape(description)}</description>"
        f"{fields}</response>"
    )


# =============================================================================
# ENVELOPES
# =============================================================================

def _parse_data(data: Optional[str]) -> Any:
    if data is None:
        return None
    try:
        return json.loads(data)
    except ValueError:
        logger.debug("Envelope data is not valid JSON, substituting null")
        return None


def envelope(code: int, description: str, data: Optional[str] = None) -> str:
    """
    Wrap a code, its description and a JSON payload.

    Args:
        code: Status code to report
        description: Description text
        data: JSON document as a string; invalid JSON becomes null

    Returns:
        {"code":..,"description":..,"data":..} as a JSON string
    """
    return _dumps({"code": code, "description": description, "data": _parse_data(data)})


def envelope_with_data(code: int, description: str, data: Optional[str] = None) -> str:
    """
    Like envelope(), but a JSON object payload is merged into the top level.

    Non-object payloads fall back to the "data" key.
    """
    payload = _parse_data(data)
    if not isinstance(payload, dict):
        return envelope(code, description, data)
    document: Dict[str, Any] = {"code": code, "description": description}
    document.update(payload)
    return _dumps(document)


def envelope_xml(code: int, description: str, data: str = "") -> str:
    return (
        f"<response><code>{code}</code>"
        f"<description>{escape(description)}</description>"
        f"<data>{escape(data)}</data></response>"
    )


def enrich(
    code: int,
    cors_origin: Optional[str] = None,
    elapsed_ms: int = 0,
) -> Optional[str]:
    """
    Enriched JSON envelope with request and timing metadata.

    Args:
        code: Registered status code
        cors_origin: Origin the response is served to; omitted when None
        elapsed_ms: Processing time in milliseconds

    Returns:
        The JSON string, or None when the code is unknown
    """
    description = description_of(code)
    if description is None:
        return None

    metadata: Dict[str, Any] = {
        "status_family": classify_family(code),
        "is_error": is_error(code),
    }
    if cors_origin is not None:
        metadata["cors_origin"] = cors_origin
    metadata["elapsed_ms"] = int(elapsed_ms)

    return _dumps({"code": code, "description": description, "metadata": metadata})


# =============================================================================
# ORIGINS
# =============================================================================

def is_origin_allowed(origin: str, allowed: Iterable[str]) -> bool:
    """True when `allowed` contains "*" or the origin itself."""
    allowed = set(allowed)
    return "*" in allowed or origin in allowed
