"""
3xx REDIRECTION codes.

The registered redirects (300-308) followed by a block of extension codes
(310-356). Extensions keep their own number; 306 keeps the IANA name
"Unused" and carries "Switch Proxy" as its internal name.
"""

from .entry import Entry, ResponseCode


class Redirection(ResponseCode):
    """Redirection responses (3xx)."""

    MULTIPLE_CHOICES = Entry(
        300, "Multiple Choices",
        "The request has more than one possible response. The user-agent or "
        "user should choose one of them. There is no standardized way of "
        "choosing one of the responses, but HTML links to the possibilities "
        "are recommended so the user can pick manually",
    )
    MOVED_PERMANENTLY = Entry(
        301, "Moved Permanently",
        "The resource has been permanently moved to a new URI. Future "
        "requests should use the new URI. This status code is typically "
        "used for URL redirection",
    )
    FOUND = Entry(
        302, "Found",
        "The resource is temporarily available at a different URI. The "
        "client should continue using the original URI for future requests. "
        "This status code is often used for URL redirection",
    )
    SEE_OTHER = Entry(
        303, "See Other",
        "The response to the request can be found under another URI, and "
        "the client should use GET to retrieve it. This status code is used "
        "to direct the client to retrieve the resource from a different URI",
    )
    NOT_MODIFIED = Entry(
        304, "Not Modified",
        "The resource has not been modified since the version specified in "
        "the request headers. This status code is used for caching purposes "
        "to reduce unnecessary network traffic",
    )
    USE_PROXY = Entry(
        305, "Use Proxy",
        "The requested resource must be accessed through a specified proxy. "
        "This status code is used to inform the client that it should use a "
        "proxy server to access the resource",
    )
    SWITCH_PROXY = Entry(
        306, "Unused",
        "Originally 'Switch Proxy', no longer used.",
        306, "Switch Proxy",
    )
    TEMPORARY_REDIRECT = Entry(
        307, "Temporary Redirect",
        "The resource is temporarily located at a different URI. The client "
        "should use the same method to access it. This status code is used "
        "for temporary URL redirection",
    )
    PERMANENT_REDIRECT = Entry(
        308, "Permanent Redirect",
        "The resource has been permanently moved to a new URI. The client "
        "should update its references. This status code is used for "
        "permanent URL redirection",
    )
    TOO_MANY_REDIRECTS = Entry(
        310, "Too Many Redirects",
        "The client has been redirected too many times, possibly causing a "
        "redirection loop. This status code is used to prevent infinite "
        "redirection loops",
    )
    REDIRECT_METHOD = Entry(
        311, "Redirect Method",
        "The client should use a different method to access the resource. "
        "This status code is used to inform the client that it should use a "
        "different HTTP method, such as GET or POST",
    )
    UNASSIGNED = Entry(
        312, "Unassigned",
        "This code is currently unassigned and reserved for future use. It "
        "may be used for a new feature or status code in the future",
    )
    MOVED_PERMANENTLY_REDIRECTED = Entry(
        321, "Moved Permanently Redirected",
        "The requested resource has been permanently moved to a new URI, "
        "but the client should continue to use the original URI. This "
        "status code is used for special cases of permanent redirection",
    )
    MOVED_TEMPORARILY_REDIRECTED = Entry(
        322, "Moved Temporarily Redirected",
        "The requested resource is temporarily available at a new URI but "
        "the client should not update its original URI. This status code is "
        "used for special cases of temporary redirection",
    )
    SEE_OTHER_REDIRECTED = Entry(
        323, "See Other Redirected",
        "The requested resource can be accessed at a different URI using "
        "the GET method. This status code is used to direct the client to "
        "retrieve the resource from a different URI using GET",
    )
    NOT_MODIFIED_REDIRECTED = Entry(
        324, "Not Modified Redirected",
        "The requested resource has not been modified and can be retrieved "
        "from the cache. This status code is used for caching purposes to "
        "reduce unnecessary network traffic",
    )
    USE_PROXY_REDIRECTED = Entry(
        325, "Use Proxy Redirected",
        "The resource must be accessed through a proxy, and the proxy "
        "details are provided. This status code is used to inform the "
        "client that it should use a proxy server to access the resource",
    )
    UNUSED_REDIRECTED = Entry(
        326, "Unused Redirected",
        "This status code is reserved and not used anymore. It was "
        "previously used for a proposed feature that was never implemented",
    )
    TEMPORARY_REDIRECT_REDIRECTED = Entry(
        327, "Temporary Redirect Redirected",
        "The requested resource is temporarily located at a new URI. The "
        "client should not update its reference. This status code is used "
        "for special cases of temporary redirection",
    )
    PERMANENT_REDIRECTED = Entry(
        328, "Permanent Redirected",
        "The resource has been permanently moved to a new URI, and future "
        "requests should use the new URI. This status code is used for "
        "special cases of permanent redirection",
    )
    TOO_MANY_REDIRECTS_REDIRECTED = Entry(
        329, "Too Many Redirects Redirected",
        "The client has been redirected too many times during a redirection "
        "loop. This status code is used to prevent infinite redirection "
        "loops",
    )
    REDIRECT_METHOD_REDIRECTED = Entry(
        330, "Redirect Method Redirected",
        "The redirection requires the client to use a different request "
        "method. This status code is used to inform the client that it "
        "should use a different HTTP method, such as GET or POST",
    )
    USER_NAME_OK_PASSWORD_NEEDED = Entry(
        331, "User Name Ok Password Needed",
        "The username is valid, but the client must provide a password to "
        "proceed. This status code is used for authentication purposes",
    )
    NO_NEED_ACCOUNT_FOR_LOGIN = Entry(
        332, "No Need Account For Login",
        "The requested resource does not require a user account for access. "
        "This status code is used to inform the client that no login is "
        "necessary",
    )
    SESSION_KEY_NOT_PRESENT_IN_HEADER = Entry(
        333, "Session Key Not Present In Header",
        "The request is missing a session key in the header. This status "
        "code is used for session management purposes",
    )
    SESSION_KEY_PRESENT_AND_NOT_DECRYPTABLE_PARSABLE = Entry(
        334, "Session Key Present And Not Decryptable Parsable",
        "The session key provided in the request cannot be decrypted or "
        "parsed. This status code is used for session management purposes",
    )
    SERVER_IS_UNWILLING_TO_PROCESS_THE_REQUEST = Entry(
        335, "Server Is Unwilling To Process The Request",
        "The server refuses to process the request, often due to policy "
        "restrictions. This status code is used to inform the client that "
        "the server is unwilling to process the request",
    )
    CHALLENGE_RESPONSE_AUTHENTICATION_OK = Entry(
        336, "Challenge Response Authentication Ok",
        "Challenge-response authentication was successfully completed. This "
        "status code is used to inform the client that authentication was "
        "successful",
    )
    CHALLENGE_RESPONSE_AUTHENTICATION_FAILED = Entry(
        337, "Challenge Response Authentication Failed",
        "Challenge-response authentication failed due to invalid "
        "credentials or other issues. This status code is used to inform "
        "the client that authentication failed",
    )
    LENGTH_REQUIRED = Entry(
        342, "Length Required",
        "The request did not specify the length of its content, which is "
        "required by the server. This status code is used to inform the "
        "client that the length is required",
    )
    PRECONDITION_FAILED = Entry(
        343, "Precondition Failed",
        "The server does not meet the preconditions set by the client in "
        "its request. This status code is used to inform the client that "
        "the preconditions failed",
    )
    REQUEST_ENTITY_TOO_LARGE = Entry(
        344, "Request Entity Too Large",
        "The request is larger than the server is willing or able to "
        "process. This status code is used to inform the client that the "
        "request entity is too large",
    )
    UNSUPPORTED_MEDIA_TYPE = Entry(
        346, "Unsupported Media Type",
        "The media type of the request is not supported by the server. This "
        "status code is used to inform the client that the media type is "
        "unsupported",
    )
    REQUESTED_RANGE_NOT_SATISFIABLE = Entry(
        347, "Requested Range Not Satisfiable",
        "The server cannot supply the portion of the file requested by the "
        "client. This status code is used to inform the client that the "
        "requested range is not satisfiable",
    )
    EXPECTATION_FAILED = Entry(
        348, "Expectation Failed",
        "The server cannot meet the requirements specified in the Expect "
        "header of the request. This status code is used to inform the "
        "client that the expectation failed",
    )
    IM_A_TEAPOT = Entry(
        349, "I'm A Teapot",
        "A humorous response indicating the server is a teapot and refuses "
        "to brew coffee. This status code is used as an April Fools' joke",
    )
    ERROR_ACCESSING_URL = Entry(
        350, "Error Accessing URL",
        "The server encountered an error while attempting to access the "
        "specified URL. This status code is used to inform the client that "
        "there was an error accessing the URL",
    )
    TRIGGER_NOT_FOUND = Entry(
        351, "Trigger Not Found",
        "The requested redirection trigger could not be found on the "
        "server. This status code is used to inform the client that the "
        "trigger was not found",
    )
    ACCESS_DENIED = Entry(
        352, "Access Denied",
        "The server refuses to fulfill the request due to access "
        "restrictions. This status code is used to inform the client that "
        "access is denied",
    )
    CONDITION_FAILED = Entry(
        353, "Condition Failed",
        "A condition required to complete the redirection was not "
        "satisfied. This status code is used to inform the client that the "
        "condition failed",
    )
    MANDATORY_PARAMETER_IS_NULL = Entry(
        354, "Mandatory Parameter Is Null",
        "A required parameter for the request is missing or null. This "
        "status code is used to inform the client that a mandatory "
        "parameter is null",
    )
    THE_PARAMETER_DOES_NOT_EXIST = Entry(
        355, "The Parameter Does Not Exist",
        "A parameter specified in the request does not exist. This status "
        "code is used to inform the client that the parameter does not "
        "exist",
    )
    DATA_BLOB_SHOULD_NOT_BE_NULL_FOR_POST_METHOD = Entry(
        356, "Data BLOB Should Not Be Null For Post Method",
        "The data payload for a POST request must not be null. This status "
        "code is used to inform the client that the data BLOB should not be "
        "null for POST method",
    )
