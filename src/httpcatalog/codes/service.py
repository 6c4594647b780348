"""
6xx SERVICE ERROR codes.

Failures raised by HTTP client services (crawlers, scanners, network
probes) rather than by the origin server. None of them is registered, so
every entry maps onto a 4xx or 5xx wire status.
"""

from .entry import Entry, ResponseCode


class ServiceError(ResponseCode):
    """Service level errors (611-699)."""

    READING_ERROR = Entry(
        500, "Internal Server Error",
        "An error occurred while reading the response or data from the "
        "server",
        611, "Reading Error",
    )
    CONNECTION_ERROR = Entry(
        502, "Bad Gateway",
        "A connection issue occurred, preventing successful communication "
        "with the server",
        612, "Connection Error",
    )
    READING_TIME_EXPIRED = Entry(
        504, "Gateway Timeout",
        "The reading operation exceeded the allowed time limit, resulting "
        "in a timeout",
        613, "Reading Time Expired",
    )
    SSL_HANDSHAKE_FAILED = Entry(
        502, "Bad Gateway",
        "The SSL handshake failed, potentially due to invalid certificates "
        "or incompatible protocols",
        614, "SSL Handshake Failed",
    )
    ANOTHER_READING_ERROR = Entry(
        500, "Internal Server Error",
        "A generic error occurred while reading the response or data",
        615, "Another Reading Error",
    )
    FBA_ANOMALY = Entry(
        500, "Internal Server Error",
        "An anomaly was detected in the Full Body Analyzer process, likely "
        "due to unexpected input",
        616, "FBA Anomaly",
    )
    CODING_ERROR = Entry(
        500, "Internal Server Error",
        "An error in the implementation or logic caused the request to fail",
        617, "Coding Error",
    )
    REDIRECT_WITHOUT_REDIRECT_URL = Entry(
        500, "Internal Server Error",
        "The server issued a redirect response but did not provide a valid "
        "redirect URL",
        618, "Redirect Without Redirect URL",
    )
    DNS_LOOKUP_FAILED = Entry(
        502, "Bad Gateway",
        "The DNS lookup for the specified domain failed, indicating a "
        "potential network or configuration issue",
        680, "DNS Lookup Failed",
    )
    SYNTACTICALLY_INCORRECT_URL = Entry(
        400, "Bad Request",
        "The provided URL is syntactically incorrect and cannot be "
        "processed",
        690, "Syntactically Incorrect URL",
    )
    LOST_CONNECTION = Entry(
        502, "Bad Gateway",
        "The connection to the server was lost unexpectedly during "
        "communication",
        691, "Lost Connection",
    )
    WRITE_TIMEOUT = Entry(
        504, "Gateway Timeout",
        "The operation timed out while attempting to write data to the "
        "server",
        692, "Write Timeout",
    )
    SELECTION_FAILED = Entry(
        500, "Internal Server Error",
        "The requested operation failed during a selection or matching "
        "process",
        693, "Selection Failed",
    )
    WRITE_ERROR = Entry(
        500, "Internal Server Error",
        "An error occurred while attempting to write data to the "
        "destination",
        694, "Write Error",
    )
    INCOMPLETE_BLOCK_HEADER = Entry(
        500, "Internal Server Error",
        "A block header was incomplete or malformed, preventing further "
        "processing",
        695, "Incomplete Block Header",
    )
    UNEXPECTED_ERROR = Entry(
        500, "Internal Server Error",
        "An unexpected error occurred, often indicative of an unforeseen "
        "issue or bug",
        699, "Unexpected Error",
    )
