"""
2xx SUCCESS codes.

The IANA set (200-208, 226) plus application extensions (210-299), each
registered under its own number.
"""

from .entry import Entry, ResponseCode


class Success(ResponseCode):
    """Successful responses (2xx)."""

    OK = Entry(
        200, "OK",
        "Request processed successfully. Response will depend on the "
        "request method used, and the result will be either a "
        "representation of the requested resource or an empty response",
    )
    CREATED = Entry(
        201, "Created",
        "Request processed successfully and document created, with a new "
        "resource created, and the URI of the new resource returned, if "
        "available",
    )
    ACCEPTED = Entry(
        202, "Accepted",
        "Request processed, but with no guarantee of results, and no "
        "indication of the final status of the request, which will be "
        "processed asynchronously, such as a request to create a new "
        "resource",
    )
    NON_AUTHORITATIVE_INFORMATION = Entry(
        203, "Non-Authoritative Information",
        "Information returned, but generated by an uncertified source, such "
        "as a proxy server, rather than the origin server, and may be "
        "incorrect, outdated, or otherwise unreliable",
    )
    NO_CONTENT = Entry(
        204, "No Content",
        "Request processed successfully but no information to return, and "
        "the response body is empty, useful as a header for a DELETE "
        "request, indicating that the resource has been deleted",
    )
    RESET_CONTENT = Entry(
        205, "Reset Content",
        "Request processed successfully, current page can be deleted, and "
        "the client should reset the document view, useful as a header for "
        "a form submission, indicating that the form has been processed "
        "successfully",
    )
    PARTIAL_CONTENT = Entry(
        206, "Partial Content",
        "Only part of the resource was transmitted, as the request used the "
        "Range header to retrieve a specific portion of the resource, and "
        "the response contains the requested range, or the server is unable "
        "to return the entire resource",
    )
    MULTI_STATUS = Entry(
        207, "Multi-Status",
        "Multiple status responses, with a separate response code for each "
        "part of the request, and the response body contains XML that "
        "describes the status of each part of the request, useful for "
        "WebDAV RFC 4918",
    )
    ALREADY_REPORTED = Entry(
        208, "Already Reported",
        "A WebDAV binding has been enumerated in a previous http code 207 "
        "and are not included here again, useful for WebDAV RFC 5842",
    )
    CONTENT_DIFFERENT = Entry(
        210, "Content Different",
        "The client-side copy of the resource differs from the server-side "
        "copy (content or properties), the content of the response has a "
        "different meaning depending on the media type that is returned, "
        "and the response body may contain a representation of the "
        "requested resource, or some instructions on how to process the "
        "request",
    )
    CONTENT_LOCATION = Entry(
        211, "Content Location",
        "The response provides a URL for accessing a resource that is the "
        "result of the requested action",
    )
    OBJECT_DATA = Entry(
        212, "Object Data",
        "The response contains the representation of an object’s data, "
        "and the response body contains the data of the object, such as a "
        "JSON object or XML document, and the response body may contain the "
        "requested resource",
    )
    MULTIPLE_RESOURCE_INSTANCES = Entry(
        213, "Multiple Resource Instances",
        "The response indicates multiple instances of the requested "
        "resource exist, each with its own set of properties, and the "
        "response body contains an array of resources, each with its own "
        "set of properties",
    )
    TRANSFORM_APPLIED = Entry(
        214, "Transform Applied",
        "The response represents the result of a transformation or "
        "conversion applied to the resource, and the response body contains "
        "the transformed resource, such as a transcoded media file, or a "
        "formatted document",
    )
    CONTENT_DELETED = Entry(
        215, "Content Deleted",
        "The requested resource has been deleted, and the response body "
        "contains the status of the deletion, and the response body may "
        "contain the requested resource",
    )
    IM_USED_POST_REQUEST = Entry(
        216, "IM Used Post Request",
        "The server has completed the resource request, responded to a POST "
        "request, and the response is a representation of the result of one "
        "or more instance manipulations applied to the current instance",
    )
    DELTA_ENCODING_APPLIED = Entry(
        217, "Delta Encoding Applied",
        "The response contains the result of a partial modification to the "
        "resource, and the response body contains the modified resource, "
        "such as a JSON patch document or a binary diff, the response is a "
        "delta encoding of the requested resource, containing only the "
        "changes between the current and previous versions",
    )
    THIS_IS_FINE = Entry(
        218, "This Is Fine",
        "Everything is fine, and the response body contains a humorous or "
        "playful message, indicating that the server is aware of the "
        "situation and is not concerned, The server is returning this "
        "response to indicate that everything is working as expected, even "
        "though the situation may be unusual or unexpected, apache, "
        "unofficial",
    )
    CONTENT_TRANSFERRED = Entry(
        219, "Content Transferred",
        "The response contains the transferred content, and the response "
        "body contains the content that was transferred, such as a file or "
        "document, and the response body may contain the requested "
        "resource, the response indicates that the content has been "
        "transferred successfully to another instance, thus ending the "
        "current instance",
    )
    LOAD_BALANCER_STARTED = Entry(
        220, "Load Balancer Started",
        "The server has started a load balancer, and the response body "
        "contains the status of the load balancer, indicating that the "
        "server has initiated a load balancer to distribute incoming "
        "requests across multiple servers, the server response is sent by a "
        "load balancer to notify the client that a new server load "
        "balancing process has started",
    )
    LOAD_BALANCER_ENDED = Entry(
        221, "Load Balancer Ended",
        "The server has stopped a load balancer, and the response body "
        "contains the status of the load balancer, indicating that the "
        "server has terminated a load balancer process, the server response "
        "is sent by a load balancer to notify the client that the server "
        "load balancing process has ended, the server response is sent by a "
        "load balancer to notify the client that the server load balancing "
        "process has ended",
    )
    AUTHENTICATION_SUCCESSFUL = Entry(
        222, "Authentication Successful",
        "The client authentication was successful, and the response body "
        "contains the authentication token or session information, "
        "indicating that the client has been successfully authenticated by "
        "the server, and the response body may contain the authentication "
        "token or session information",
    )
    IM_USED_GET_REQUEST = Entry(
        226, "IM Used",
        "The server has completed the resource request, responded to a GET "
        "request, and the response is a representation of the current "
        "instance, indicating that the server has completed the resource "
        "request and responded to a GET request, and the response body "
        "contains the current instance of the resource",
    )
    LOW_ON_STORAGE_SPACE = Entry(
        250, "Low On Storage Space",
        "The server is running low on storage space, and the response body "
        "contains the status of the storage space, indicating that the "
        "server is running low on storage space, and the response body may "
        "contain the status of the storage space, the server is temporarily "
        "unable to store the representation needed to complete the request.",
    )
    ENTITY_RECOGNIZED_NOT_PROCESSABLE = Entry(
        252, "Entity Recognized Not Processable",
        "The server has recognized the request but cannot process it, and "
        "the response body contains the status of the request, indicating "
        "that the server has recognized the request but cannot process it, "
        "and the response body may contain the status of the request, the "
        "server is unable to process the request due to constraints or "
        "limitations, the server cannot produce a response that satisfies "
        "the range specified in the request’s Range header field",
    )
    RESOURCE_ACCESSED_LOCKED = Entry(
        253, "Resource Accessed Locked",
        "The resource is locked and cannot be accessed or modified, and the "
        "response body contains the status of the resource, indicating that "
        "the resource is locked and cannot be accessed or modified, and the "
        "response body may contain the status of the resource, the server "
        "has locked the resource to prevent access or modification",
    )
    METHOD_NOT_FOUND = Entry(
        254, "Method Not Found",
        "The server does not recognize the request method or lacks the "
        "capability to fulfill it, and the response body contains the "
        "status of the request, indicating that the server does not "
        "recognize the request method or lacks the capability to fulfill "
        "it, and the response body may contain the status of the request, "
        "the server is unable to process the request due to an unsupported "
        "method",
    )
    EXTENDED_CODE = Entry(
        255, "Extended Code",
        "The server has returned an extended status code, and the response "
        "body contains the extended status code, indicating that the server "
        "has returned an extended status code, and the response body may "
        "contain the extended status code, the server has provided "
        "additional information or context in the response",
    )
    MISCELLANEOUS_PERSISTENT_WARNING_START = Entry(
        299, "Miscellaneous Persistent Warning Start",
        "The server has returned a miscellaneous persistent warning, and "
        "the response body contains the warning message, indicating that "
        "the server has returned a miscellaneous persistent warning, and "
        "the response body may contain the warning message, the server has "
        "encountered a warning condition that is not covered by other "
        "status codes",
    )
