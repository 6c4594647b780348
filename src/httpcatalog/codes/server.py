"""
5xx SERVER ERROR codes, including the CDN and hosting vendor codes
(Cloudflare 520-527, Qualys 529, Pantheon 530, ...).
"""

from .entry import Entry, ResponseCode


class ServerError(ResponseCode):
    """Server error responses (5xx)."""

    INTERNAL_SERVER_ERROR = Entry(
        500, "Internal Server Error",
        "The server encountered an unexpected condition that prevented it "
        "from fulfilling the request. This could be due to a "
        "misconfiguration, an unhandled exception, or resource exhaustion",
    )
    NOT_IMPLEMENTED = Entry(
        501, "Not Implemented",
        "The server does not support the functionality required to fulfill "
        "the request. This might be because the server does not recognize "
        "the request method or lacks the capability to process it",
    )
    BAD_GATEWAY = Entry(
        502, "Bad Gateway",
        "The server, while acting as a gateway or proxy, received an "
        "invalid response from an upstream server. This could be due to the "
        "upstream server being down or misconfigured",
    )
    SERVICE_UNAVAILABLE = Entry(
        503, "Service Unavailable",
        "The server is currently unable to handle the request due to "
        "temporary overloading or maintenance. This is usually a temporary "
        "state",
    )
    GATEWAY_TIMEOUT = Entry(
        504, "Gateway Timeout",
        "The server, while acting as a gateway or proxy, did not receive a "
        "timely response from the upstream server. This could be due to "
        "network congestion or the upstream server being overloaded",
    )
    HTTP_VERSION_NOT_SUPPORTED = Entry(
        505, "HTTP Version Not Supported",
        "The server does not support the HTTP protocol version used in the "
        "request. This prevents the server from processing the request",
    )
    VARIANT_ALSO_NEGOTIATES = Entry(
        506, "Variant Also Negotiates",
        "The server encountered a configuration error in transparent "
        "content negotiation. This resulted in a circular reference that "
        "prevents the server from serving the requested content",
    )
    INSUFFICIENT_STORAGE = Entry(
        507, "Insufficient Storage",
        "The server is unable to store the representation needed to "
        "complete the request. This could be due to storage limits being "
        "reached or allocation constraints",
    )
    LOOP_DETECTED = Entry(
        508, "Loop Detected",
        "The server detected an infinite loop while processing a request. "
        "This is often due to circular references or recursive function "
        "calls in WebDAV configurations, RFC 5842",
    )
    BANDWIDTH_LIMIT_EXCEEDED = Entry(
        509, "Bandwidth Limit Exceeded",
        "The server's bandwidth limit has been exceeded. This limit is "
        "typically set by the administrator and prevents further data "
        "transfer until the limit resets, often used by hosting providers "
        "to prevent abuse, apache, unofficial, Cpanel",
    )
    NOT_EXTENDED = Entry(
        510, "Not Extended",
        "The server requires further extensions to fulfill the request. "
        "This could mean additional client conditions or protocol "
        "extensions are necessary before the server can process the request",
    )
    NETWORK_AUTHENTICATION_REQUIRED = Entry(
        511, "Network Authentication Required",
        "The network connection requires authentication before accessing "
        "the requested resources. This is often used by captive portals to "
        "redirect users to a login page",
    )
    UNKNOWN_ERROR = Entry(
        520, "Unknown Error",
        "An unspecified error occurred, and the server was unable to "
        "provide more details. This is a catch-all for unexpected "
        "conditions",
    )
    WEB_SERVER_IS_DOWN = Entry(
        521, "Web Server Is Down",
        "Cloudflare, unofficial is currently unreachable, likely due to "
        "downtime or maintenance. This prevents the server from processing "
        "the request, and the client should try again later",
    )
    CONNECTION_TIMED_OUT = Entry(
        522, "Connection Timed Out",
        "The connection to the server timed out before a response could be "
        "received. This could be due to network issues or server overload",
    )
    ORIGIN_IS_UNREACHABLE = Entry(
        523, "Origin Is Unreachable",
        "The origin server could not be contacted. This might be due to "
        "network issues or misconfiguration",
    )
    TIMEOUT_OCCURRED = Entry(
        524, "Timeout Occurred",
        "The operation timed out while waiting for a response from the "
        "server. This could be due to network congestion or server overload",
    )
    SSL_HANDSHAKE_FAILED = Entry(
        525, "SSL Handshake Failed",
        "The SSL/TLS handshake failed, preventing a secure connection from "
        "being established. This could be due to certificate issues or "
        "network problems",
    )
    INVALID_SSL_CERTIFICATE = Entry(
        526, "Invalid SSL Certificate",
        "The SSL/TLS certificate provided by the server is invalid, "
        "expired, or does not match the requested domain. This prevents the "
        "secure connection from being established",
    )
    RAILGUN_ERROR = Entry(
        527, "Railgun Error",
        "An error occurred in the Railgun service, which accelerates "
        "connections between Cloudflare and the origin server. This may "
        "indicate a misconfiguration or temporary service unavailability",
    )
    SITE_IS_OVERLOADED = Entry(
        529, "Site Is Overloaded",
        "Indicates the Qualys server cannot process the request, likely due "
        "to high traffic or resource constraints. This is a Qualys-specific "
        "status code, unofficial",
    )
    SITE_IS_FROZEN = Entry(
        530, "Site Is Frozen",
        "Indicates the Pantheon server has been frozen due to inactivity, "
        "preventing further requests from being processed. This is a "
        "Pantheon-specific status code, unofficial",
    )
    ORIGIN_DNS_ERROR = Entry(
        531, "Origin DNS Error",
        "The origin server encountered a DNS resolution error while "
        "attempting to process the request. This typically occurs when the "
        "domain name cannot be resolved to an IP address, possibly due to a "
        "misconfiguration or network issue",
    )
    NO_SITE_DETECTED = Entry(
        561, "No Site Detected",
        "This error is specific to certain hosting environments. For AWS, "
        "it indicates an HTTP Authentication failure, whereas for Pantheon, "
        "it means there is a problem with the site configuration",
    )
    NETWORK_READ_TIMEOUT_ERROR = Entry(
        598, "Network Read Timeout Error",
        "This unofficial status code indicates that the HTTP requests "
        "executed by the code failed because no local network was found or "
        "the HTTP connections to the local network returned read timeouts",
    )
    NETWORK_CONNECT_TIMEOUT_ERROR = Entry(
        599, "Network Connect Timeout Error",
        "This unofficial status code indicates that the HTTP requests "
        "executed by the code failed because no local network was found or "
        "the HTTP connections to the local network timed out",
    )
