"""
4xx CLIENT ERROR codes.

Besides the IANA registry this family carries the unofficial codes issued
by well known servers and vendors (nginx 494-499, IIS 440/449, Laravel
419, Shopify 430, ...), each under the number its vendor uses.
"""

from .entry import Entry, ResponseCode


class ClientError(ResponseCode):
    """Client error responses (4xx)."""

    BAD_REQUEST = Entry(
        400, "Bad Request",
        "The server cannot process the request due to malformed syntax or "
        "invalid parameters in the client request",
    )
    UNAUTHORIZED = Entry(
        401, "Unauthorized",
        "The client must authenticate itself to get the requested resource, "
        "typically a 401 Unauthorized response",
    )
    PAYMENT_REQUIRED = Entry(
        402, "Payment Required",
        "Payment is required to access the requested resource, though this "
        "is not widely used in practice",
    )
    FORBIDDEN = Entry(
        403, "Forbidden",
        "The server understands the request but refuses to authorize it, "
        "indicating insufficient permissions",
    )
    NOT_FOUND = Entry(
        404, "Not Found",
        "The server cannot find the requested resource, indicating a "
        "non-existent or inaccessible URI",
    )
    METHOD_NOT_ALLOWED = Entry(
        405, "Method Not Allowed",
        "The HTTP method used in the request is not supported for the "
        "target resource",
    )
    NOT_ACCEPTABLE = Entry(
        406, "Not Acceptable",
        "The requested resource cannot be provided in a format acceptable "
        "according to the request's Accept headers",
    )
    PROXY_AUTHENTICATION_REQUIRED = Entry(
        407, "Proxy Authentication Required",
        "The client must authenticate with a proxy server before accessing "
        "the resource",
    )
    REQUEST_TIMEOUT = Entry(
        408, "Request Timeout",
        "The server timed out while waiting for the request from the "
        "client. This status code is used to inform the client that the "
        "server timed out.",
    )
    CONFLICT = Entry(
        409, "Conflict",
        "The request could not be completed due to a conflict with the "
        "current state of the target resource",
    )
    GONE = Entry(
        410, "Gone",
        "The requested resource is no longer available and has been "
        "permanently removed from the server and will not be available "
        "again",
    )
    LENGTH_REQUIRED = Entry(
        411, "Length Required",
        "The request does not include the required Content-Length header",
    )
    PRECONDITION_FAILED = Entry(
        412, "Precondition Failed",
        "One or more conditions in the request headers are not met by the "
        "server",
    )
    PAYLOAD_TOO_LARGE = Entry(
        413, "Payload Too Large",
        "The size of the request payload exceeds the server's capacity or "
        "configuration limits",
    )
    REQUEST_URI_TOO_LONG = Entry(
        414, "URI Too Long",
        "The URI of the request is too long for the server to process. This "
        "status code is used to inform the client that the request URI is "
        "too long",
    )
    UNSUPPORTED_MEDIA_TYPE = Entry(
        415, "Unsupported Media Type",
        "The media type of the request payload is not supported by the "
        "server or target resource",
    )
    REQUESTED_RANGE_UNSATISFIABLE = Entry(
        416, "Range Not Satisfiable",
        "The client requested a range that is not satisfiable for the "
        "target resource",
    )
    EXPECTATION_FAILED = Entry(
        417, "Expectation Failed",
        "The server cannot meet the requirements specified in the Expect "
        "header field of the request",
    )
    IM_A_TEAPOT = Entry(
        418, "I'm a Teapot",
        "A playful response indicating the server is a teapot and cannot "
        "brew coffee (RFC 2324)",
    )
    PAGE_EXPIRED = Entry(
        419, "Page Expired",
        "Issued by Laravel when a CSRF token is missing or expired, "
        "unofficial",
    )
    METHOD_FAILURE = Entry(
        420, "Method Failure",
        "The method specified in the request is known by the server but "
        "cannot be processed due to a failure in the server's "
        "implementation, Issued by Spring when a method has failed. Now "
        "deprecated and reserved for backward compatibility, unofficial",
    )
    MISDIRECTED_REQUEST = Entry(
        421, "Misdirected Request",
        "Used by Twitter to indicate that the client has sent too many "
        "requests in a given amount of time, unofficial",
    )
    UNPROCESSABLE_ENTITY = Entry(
        422, "Unprocessable Entity",
        "The request is well-formed but cannot be processed due to semantic "
        "errors, commonly used in APIs, use in WebDav RFC 4918",
    )
    LOCKED_TEMPORARILY_UNAVAILABLE = Entry(
        423, "Locked",
        "The resource is locked and cannot be accessed or modified, "
        "typically used in WebDav RFC 4918",
    )
    FAILED_DEPENDENCY = Entry(
        424, "Failed Dependency",
        "The request failed because it depended on another operation that "
        "failed, often used in WebDav RFC 4918",
    )
    TOO_EARLY = Entry(
        425, "Too Early",
        "The server is unwilling to process the request because it might be "
        "replayed",
    )
    UPGRADE_REQUIRED = Entry(
        426, "Upgrade Required",
        "The client must upgrade to a different protocol to continue with "
        "the request",
    )
    PRECONDITION_REQUIRED = Entry(
        428, "Precondition Required",
        "The server requires the request to include specific preconditions "
        "to proceed",
    )
    TOO_MANY_REQUESTS = Entry(
        429, "Too Many Requests",
        "The resource is rate-limited and the client has sent too many "
        "requests in the allotted time",
    )
    REQUEST_HEADER_FIELDS_TOO_LARGE = Entry(
        430, "Request Header Fields Too Large",
        "Issued by Shopify to indicate a rate-limit effect. This is used "
        "instead of 429, unofficial",
    )
    LOGIN_REQUIRED = Entry(
        432, "Login Required",
        "Authentication is required to access the requested resource, "
        "typically in web applications",
    )
    ORIGIN_ERROR = Entry(
        433, "Origin Error",
        "The request was rejected due to an issue with the origin server or "
        "client IP",
    )
    DESTINATION_ERROR = Entry(
        434, "Destination Error",
        "The request was rejected due to an issue with the destination "
        "server or target configuration",
    )
    TOO_LARGE = Entry(
        435, "Too Large",
        "The size of the requested resource or payload exceeds the "
        "allowable limit for the server",
    )
    SSL_CERTIFICATE_ERROR = Entry(
        436, "SSL Certificate Error",
        "An error occurred due to an invalid or untrusted SSL certificate",
    )
    SSL_CERTIFICATE_REQUIRED = Entry(
        437, "SSL Certificate Required",
        "The server requires a valid SSL certificate for the connection to "
        "proceed securely",
    )
    NO_CERTIFICATE = Entry(
        438, "No Certificate",
        "The client did not provide an SSL certificate required for secure "
        "communication",
    )
    LOGIN_TIMEOUT = Entry(
        440, "Login Timeout",
        "The client session timed out and must log in again, iis, "
        "unofficial",
    )
    OVER_DATA_QUOTA = Entry(
        441, "Over Data Quota",
        "The client has exceeded the allocated data quota for the requested "
        "operation",
    )
    NO_RESPONSE = Entry(
        444, "No Response",
        "The server closed the connection without sending any response, "
        "often used in scenarios where the server chooses to silently drop "
        "the request, nginx, unofficial",
    )
    RETRY_WITH = Entry(
        449, "Retry With",
        "The user has not provided the required information, iis, "
        "unofficial",
    )
    BLOCKED_BY_WINDOWS_PARENTAL_CONTROLS = Entry(
        450, "Blocked By Windows Parental Controls",
        "Issued by Microsoft when Windows Parental Controls are turned on "
        "and a resource is blocked, unofficial",
    )
    UNAVAILABLE_FOR_LEGAL_REASONS = Entry(
        451, "Unavailable For Legal Reasons",
        "The server is denying access to the resource due to legal reasons, "
        "such as censorship or compliance with local laws",
    )
    TOO_MANY_RECIPIENTS = Entry(
        452, "Too Many Recipients",
        "The server is unable to process the request because it contains "
        "too many recipients",
    )
    METHOD_NOT_VALID_IN_THIS_STATE = Entry(
        455, "Method Not Valid In This State",
        "The method specified in the request is not valid for the current "
        "state of the resource or server",
    )
    UNRECOVERABLE_ERROR = Entry(
        456, "Unrecoverable Error",
        "The server encountered a critical error that prevents it from "
        "continuing to process the request",
    )
    CLIENT_CLOSED_CONNEXION_PREMATURELY = Entry(
        460, "Client Closed Connexion Prematurely",
        "The client closed the connection before the server was able to "
        "send a response, often due to a timeout or network interruption",
    )
    TOO_MANY_FORWARDED_IP_ADDRESSES = Entry(
        463, "Too Many Forwarded IP Addresses",
        "The server rejected the request due to an excessive number of "
        "forwarded IP addresses in the request headers, potentially "
        "indicating a misconfiguration or a security concern",
    )
    INTERNET_SECURITY_ERROR = Entry(
        467, "Internet Security Error",
        "An internet security policy violation or configuration issue "
        "occurred, often related to SSL/TLS settings, certificates, or "
        "protocol mismatches",
    )
    TEMPORARY_UNAVAILABLE = Entry(
        480, "Temporary Unavailable",
        "The server is temporarily unavailable, usually due to maintenance "
        "or overload",
    )
    REQUEST_HEADER_TOO_LARGE = Entry(
        494, "Request Header Too Large",
        "The server is unable to process the request because the headers "
        "are too large, often due to a misconfiguration or an attack, "
        "nginx, unofficial",
    )
    CERT_ERROR = Entry(
        495, "Cert Error",
        "The SSL certificate presented by the client is invalid or cannot "
        "be verified by the server, preventing a secure connection from "
        "being established, nginx, unofficial",
    )
    NO_CERT = Entry(
        496, "No Cert",
        "A required client certificate wasn't provided, preventing the "
        "server from establishing a secure connection, nginx, unofficial",
    )
    HTTP_TO_HTTPS = Entry(
        497, "HTTP To HTTPS",
        "The client sent an unencrypted HTTP request to a server that "
        "requires HTTPS, and the server is redirecting the client to the "
        "HTTPS version of the resource, nginx, unofficial",
    )
    INVALID_TOKEN = Entry(
        498, "Invalid Token",
        "The provided token is invalid, expired, or malformed, and cannot "
        "be used for authentication or authorization, Issued by ArcGIS for "
        "Server, unofficial",
    )
    CLIENT_CLOSED_REQUEST = Entry(
        499, "Client Closed Request",
        "The client closed the connection before the server could provide a "
        "response, often due to client timeout or network interruption, "
        "nginx, unofficial",
    )
