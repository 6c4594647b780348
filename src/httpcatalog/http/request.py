"""
=============================================================================
HTTP REQUEST MODEL
=============================================================================

The request object handed to middleware.

The catalog does not parse HTTP off the wire; the host server does that
and builds an HTTPRequest (or calls HTTPRequest.from_url) before running
the middleware pipeline.

    Host server                       Middleware pipeline
    ───────────                       ───────────────────
    parse socket bytes   ─────►   HTTPRequest(method="GET", path="/p",
                                              headers={"host": ...},
                                              query_params={"key": [...]},
                                              client_address=("10.0.0.1", 5123))

Header names are stored lowercase, since HTTP headers are
case-insensitive (RFC 7230).

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
from urllib.parse import parse_qs, unquote, urlparse

UNKNOWN_CLIENT = "unknown"


@dataclass
class HTTPRequest:
    """
    Represents an HTTP request as seen by the middleware.

    =========================================================================
    FIELD EXPLANATIONS
    =========================================================================

        method:         HTTP verb, uppercase ("GET", "POST", ...)

        path:           Request path without the query string

        headers:        Header name (lowercase) → value

        query_params:   Query parameter → list of values
                        "?a=1&a=2&b=3" → {"a": ["1", "2"], "b": ["3"]}

        body:           Raw request body

        client_address: (ip, port) of the peer. An empty ip means the host
                        could not resolve it; rate limiting then keys the
                        client as "unknown".

    =========================================================================
    """

    method: str
    path: str
    version: str = "HTTP/1.1"
    headers: Dict[str, str] = field(default_factory=dict)
    query_params: Dict[str, list[str]] = field(default_factory=dict)
    body: bytes = b""
    client_address: Tuple[str, int] = ("", 0)

    def __post_init__(self):
        self.method = self.method.upper()
        self.headers = {name.lower(): value for name, value in self.headers.items()}

    @classmethod
    def from_url(
        cls,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        client_address: Tuple[str, int] = ("", 0),
        body: bytes = b"",
    ) -> "HTTPRequest":
        """
        Build a request from a method and a URL (path plus query string).

        A host in an absolute URL becomes the Host header unless one is
        already given.

        Example:
            HTTPRequest.from_url("GET", "/p?key=validated")
            HTTPRequest.from_url("GET", "http://example.com/api")
        """
        parsed = urlparse(url)
        request_headers = dict(headers or {})
        if parsed.netloc and not any(k.lower() == "host" for k in request_headers):
            request_headers["host"] = parsed.netloc

        return cls(
            method=method,
            path=unquote(parsed.path) or "/",
            headers=request_headers,
            query_params=parse_qs(parsed.query, keep_blank_values=True),
            body=body,
            client_address=client_address,
        )

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def host(self) -> str:
        """The Host header value."""
        return self.headers.get("host", "")

    @property
    def origin(self) -> str:
        """
        Where the request comes from, for cross-origin checks.

        Browsers send an Origin header on cross-origin calls; other
        clients usually only send Host, which is used as the fallback.
        """
        return self.headers.get("origin") or self.host

    @property
    def client_ip(self) -> str:
        """Peer IP address, or "unknown" when the host could not resolve it."""
        ip = self.client_address[0] if self.client_address else ""
        return ip or UNKNOWN_CLIENT

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def get_header(self, name: str, default: str = "") -> str:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower(), default)

    def get_query(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        First value of a query parameter.

        Example:
            # URL: /p?key=validated&key=other
            request.get_query("key")  # "validated"
        """
        values = self.query_params.get(name, [])
        return values[0] if values else default
