"""
Crawler error codes (7xx, plus 2004, 3020 and 3021).

These describe why a crawler could not fetch or index a page. The wire
status is the registered code closest in meaning: parsing problems are
400, exclusions 403, robots.txt outages 503 and crawler redirects 302.
"""

from .entry import Entry, ResponseCode


class CrawlerError(ResponseCode):
    """Crawler outcomes."""

    PARSING_ERROR_UNFINISHED_HEADER = Entry(
        400, "Bad Request",
        "Parsing error: unfinished header.",
        700, "Parsing Error: Unfinished Header",
    )
    PARSING_ERROR_HEADER = Entry(
        400, "Bad Request",
        "Parsing error in the header.",
        710, "Parsing Error: Header",
    )
    PARSING_ERROR_MISSING_HTTP_CODE = Entry(
        400, "Bad Request",
        "Parsing error: missing HTTP code.",
        720, "Parsing Error: Missing HTTP Code",
    )
    PARSING_ERROR_BODY = Entry(
        400, "Bad Request",
        "Parsing error in the body.",
        730, "Parsing Error: Body",
    )
    EXCLUDED_BY_ROBOTS_TXT_FILE = Entry(
        403, "Forbidden",
        "Excluded by robots.txt file.",
        740, "Excluded by Robots.txt file",
    )
    ROBOTS_TEMPORARILY_UNAVAILABLE = Entry(
        503, "Service Unavailable",
        "Robots temporarily unavailable.",
        741, "Robots Temporarily Unavailable",
    )
    EXCLUDED_BY_DEFINITION_OF_EXPLORATION_SPACE = Entry(
        403, "Forbidden",
        "Excluded by definition of exploration space.",
        760, "Excluded by Definition of Exploration Space",
    )
    NOT_ALLOWED_BY_LOCAL_EXPLORATION_SPACE = Entry(
        403, "Forbidden",
        "Not allowed by local exploration space.",
        761, "Not Allowed by Local Exploration Space",
    )
    INCORRECT_PROTOCOL_OR_NON_STANDARD_SYSTEM_PORT = Entry(
        400, "Bad Request",
        "Incorrect protocol or non-standard port used.",
        770, "Incorrect Protocol or Non-Standard System Port",
    )
    EXCLUDED_BY_FILE_TYPE_EXCLUSIONS = Entry(
        403, "Forbidden",
        "Excluded by file type exclusions.",
        780, "Excluded by File Type Exclusions",
    )
    INVALID_CARD = Entry(
        400, "Bad Request",
        "Invalid card - Not a physical card?",
        781, "Invalid Card",
    )
    CANNOT_DISABLE_PHYSICAL_CARD = Entry(
        400, "Bad Request",
        "Cannot disable physical card or already requested print.",
        782, "Cannot Disable Physical Card",
    )
    INVALID_URL = Entry(
        400, "Bad Request",
        "Invalid URL encountered by crawler.",
        786, "Invalid URL",
    )
    NO_INDEX_META_TAG = Entry(
        400, "Bad Request",
        "No index meta tag found (non-standard).",
        2004, "No Index Meta Tag",
    )
    PROGRAMMABLE_REDIRECTION = Entry(
        302, "Found",
        "Programmable redirection used (non-standard).",
        3020, "Programmable Redirection",
    )
    REDIRECTED_TO_ANOTHER_URL = Entry(
        302, "Found",
        "Redirected to another URL (crawler-based).",
        3021, "Redirected to Another URL",
    )
