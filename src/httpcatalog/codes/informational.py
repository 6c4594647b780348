"""
1xx INFORMATIONAL codes.

The request was received and the exchange continues. Codes 104-109 are
non-standard extensions that keep their own number.
"""

from .entry import Entry, ResponseCode


class Informational(ResponseCode):
    """Informational responses (1xx)."""

    CONTINUE_REQUEST = Entry(
        100, "Continue",
        "The server has received the initial part of the request, the headers, "
        "and asks the client to continue request, proceed to send the body of "
        "the request, a POST request",
        100, "Continue Request",
    )
    SWITCHING_PROTOCOLS = Entry(
        101, "Switching Protocols",
        "The server is complying with a request to switch protocols, used in "
        "WebSocket connections",
    )
    PROCESSING = Entry(
        102, "Processing",
        "Indicates the server is processing the request but has not yet "
        "finished, used to prevent timeout errors in asynchronous operations, "
        "webdav RFC 2518",
    )
    EARLY_HINTS = Entry(
        103, "Early Hints",
        "Experimental: The server provides preliminary hints to the client, "
        "such as preloading resources while the final response is being "
        "prepared",
    )

    # ─────────────────────────────────────────────────────────────────────
    # Extensions (104-109)
    # ─────────────────────────────────────────────────────────────────────
    CONNECTION_RESET_BY_PEER = Entry(
        104, "Connection Reset By Peer",
        "The connection was forcibly closed by a peer, possibly due to a "
        "protocol error, a timeout, or a network issue",
    )
    NAME_NOT_RESOLVED = Entry(
        105, "Name Not Resolved",
        "The server could not resolve the domain name provided in the request, "
        "indicating a DNS lookup failure, The requested hostname cannot be "
        "resolved to an IP address",
    )
    NO_RESPONSE = Entry(
        106, "No Response",
        "The server did not provide a response, possibly due to a timeout or a "
        "connection issue, The server didn't send any response within the "
        "timeout period. This status code is not specified in any RFCs, but it "
        "is used in some scenarios to indicate that the server closed the "
        "connection without sending any response",
    )
    RETRY_WITH = Entry(
        107, "Retry With",
        "The server indicates that the client should retry the request with "
        "appropriate changes or additional information, new or different "
        "credentials, use a different protocol or in a different location",
    )
    RESPONSE_IS_STALE = Entry(
        108, "Response Is Stale",
        "The response returned by the server is stale and should be "
        "revalidated, indicating that the cached response is outdated or "
        "expired",
    )
    REVALIDATION_FAILED = Entry(
        109, "Revalidation Failed",
        "The server attempted to validate a cached response but failed, "
        "indicating the cached response is invalid or expired",
    )
