"""
9xx LOCAL API codes.

Application-domain outcomes (payments, cards, user accounts, profile
validation). The wire status is chosen by meaning: approvals are 200,
authentication problems 401, conflicts 409, validation failures 400.
"""

from .entry import Entry, ResponseCode


class LocalApiError(ResponseCode):
    """Local API outcomes (900-999)."""

    APPROVED_NO_ACTION_REQUIRED = Entry(
        200, "OK",
        "The operation was approved and no further action is needed",
        900, "Approved No Action Required",
    )
    APPROVED = Entry(
        200, "OK",
        "The operation was successfully approved",
        901, "Approved",
    )
    DUPLICATED_TRANSACTION_ID = Entry(
        409, "Conflict",
        "The transaction ID is a duplicate; the transaction has already "
        "been processed",
        902, "Duplicated Transaction Id",
    )
    VALIDATION_ERRORS_PROVIDED = Entry(
        400, "Bad Request",
        "Validation errors occurred. Please verify the provided values and "
        "try again",
        903, "Validation Errors Provided",
    )
    OPERATION_NOT_ALLOWED = Entry(
        403, "Forbidden",
        "The requested operation is not permitted",
        904, "Operation Not Allowed",
    )
    OPERATION_NOT_SUPPORTED = Entry(
        501, "Not Implemented",
        "The requested operation is not supported by the system",
        905, "Operation Not Supported",
    )
    TRANSACTION_TIMEOUT = Entry(
        408, "Request Timeout",
        "The transaction could not be completed due to a timeout (e.g., an "
        "authorization expired before capture)",
        906, "Transaction Timeout",
    )
    AUTHENTIFICATION_FAILED = Entry(
        401, "Unauthorized",
        "Authentication failed due to incorrect or missing credentials",
        907, "Authentification Failed",
    )
    DO_NOT_HONOR = Entry(
        402, "Payment Required",
        "General decline with no specific reason provided, or insufficient "
        "funds",
        908, "Do Not Honor",
    )
    INSUFFICIENT_FUNDS = Entry(
        402, "Payment Required",
        "The account does not have enough funds to complete the transaction",
        909, "Insufficient Funds",
    )
    INCORRECT_PIN = Entry(
        401, "Unauthorized",
        "The provided PIN is incorrect",
        910, "Incorrect PIN",
    )
    INVALID_TRANSACTION = Entry(
        400, "Bad Request",
        "The transaction request is invalid or unsupported",
        911, "Invalid Transaction",
    )
    INVALID_AMOUNT = Entry(
        400, "Bad Request",
        "The specified amount is invalid",
        912, "Invalid Amount",
    )
    INVALID_CARD_NUMBER = Entry(
        400, "Bad Request",
        "The card number (PAN) is invalid or the card type is not accepted",
        913, "Invalid Card Number",
    )
    INVALID_CVV = Entry(
        400, "Bad Request",
        "The provided CVV code is invalid",
        914, "Invalid CVV",
    )
    INVALID_CARD_HOLDER_NAME = Entry(
        400, "Bad Request",
        "The expiration date (MMYY) is invalid or in the past",
        915, "Invalid Card Holder Name",
    )
    INVALID_CARD_HOLDER_LAST_NAME = Entry(
        400, "Bad Request",
        "The cardholder's last name is invalid",
        916, "Invalid Card Holder Last Name",
    )
    INVALID_CARD_HOLDER_FIRST_NAME = Entry(
        400, "Bad Request",
        "The cardholder's first name is invalid",
        917, "Invalid Card Holder First Name",
    )
    INVALID_CARD_HOLDER_ID_NUMBER = Entry(
        400, "Bad Request",
        "The cardholder's ID number is invalid",
        918, "Invalid Card Holder Id Number",
    )
    INVALID_CARD_HOLDER_PHONE_NUMBER = Entry(
        400, "Bad Request",
        "The cardholder's phone number is invalid",
        919, "Invalid Card Holder Phone Number",
    )
    CARD_ALREADY_ACTIVE = Entry(
        409, "Conflict",
        "The card is already active and cannot be reactivated",
        920, "Card Already Active",
    )
    CARD_NOT_ACTIVE = Entry(
        400, "Bad Request",
        "The card is not active or cannot be found",
        921, "Card Not Active",
    )
    EXPIRED_CARD = Entry(
        400, "Bad Request",
        "The card has expired and cannot be used",
        922, "Expired Card",
    )
    LOST_CARD = Entry(
        403, "Forbidden",
        "The card has been reported lost and cannot be used",
        923, "Lost Card",
    )
    STOLEN_CARD = Entry(
        403, "Forbidden",
        "The card has been reported stolen and cannot be used",
        924, "Stolen Card",
    )
    INVALID_LAST_NAME = Entry(
        400, "Bad Request",
        "The last name provided is invalid",
        925, "Invalid Last Name",
    )
    INVALID_FIRST_NAME = Entry(
        400, "Bad Request",
        "The first name provided is invalid",
        926, "Invalid First Name",
    )
    INVALID_ID_NUMBER = Entry(
        400, "Bad Request",
        "The ID number provided is invalid",
        927, "Invalid Id Number",
    )
    INVALID_PHONE_NUMBER = Entry(
        400, "Bad Request",
        "The phone number provided is invalid",
        928, "Invalid Phone Number",
    )
    INVALID_EMAIL = Entry(
        400, "Bad Request",
        "The email address provided is invalid",
        929, "Invalid Email",
    )
    INVALID_INITIALS = Entry(
        400, "Bad Request",
        "The initials provided are invalid",
        930, "Invalid Initials",
    )
    INVALID_ADDRESS = Entry(
        400, "Bad Request",
        "The address provided is invalid",
        931, "Invalid Address",
    )
    INVALID_CITY = Entry(
        400, "Bad Request",
        "The city provided is invalid",
        932, "Invalid City",
    )
    INVALID_POSTAL_CODE = Entry(
        400, "Bad Request",
        "The postal code provided is invalid",
        933, "Invalid Postal Code",
    )
    INVALID_COUNTRY = Entry(
        400, "Bad Request",
        "The country provided is invalid",
        934, "Invalid Country",
    )
    INVALID_PASSWORD = Entry(
        400, "Bad Request",
        "The password provided is invalid",
        935, "Invalid Password",
    )
    INVALID_USERNAME = Entry(
        400, "Bad Request",
        "The username provided is invalid",
        936, "Invalid Username",
    )
    INVALID_ROLE = Entry(
        400, "Bad Request",
        "The role specified is invalid",
        937, "Invalid Role",
    )
    INVALID_STATUS = Entry(
        400, "Bad Request",
        "The status specified is invalid",
        938, "Invalid Status",
    )
    INVALID_DATE_OF_BIRTH = Entry(
        400, "Bad Request",
        "The date of birth provided is invalid",
        939, "Invalid Date Of Birth",
    )
    INVALID_MAJORITY = Entry(
        400, "Bad Request",
        "The majority information provided is invalid",
        940, "Invalid Majority",
    )
    INVALID_MARITAL_STATUS = Entry(
        400, "Bad Request",
        "The marital status provided is invalid",
        941, "Invalid Marital Status",
    )
    INVALID_NATIONALITY = Entry(
        400, "Bad Request",
        "The nationality provided is invalid",
        942, "Invalid Nationality",
    )
    INVALID_LANGUAGE = Entry(
        400, "Bad Request",
        "The language provided is invalid",
        943, "Invalid Language",
    )
    INVALID_CURRENCY = Entry(
        400, "Bad Request",
        "The currency provided is invalid",
        944, "Invalid Currency",
    )
    INVALID_TIME_ZONE = Entry(
        400, "Bad Request",
        "The time zone specified is invalid",
        945, "Invalid Time Zone",
    )
    INVALID_PROFILE_PICTURE = Entry(
        400, "Bad Request",
        "The profile picture is invalid or unsupported",
        946, "Invalid Profile Picture",
    )
    INVALID_COVER_PICTURE = Entry(
        400, "Bad Request",
        "The cover picture is invalid or unsupported",
        947, "Invalid Cover Picture",
    )
    INVALID_BIO = Entry(
        400, "Bad Request",
        "The bio provided is invalid",
        948, "Invalid Bio",
    )
    INVALID_WEBSITE = Entry(
        400, "Bad Request",
        "The website URL provided is invalid",
        949, "Invalid Website",
    )
    INVALID_FACEBOOK = Entry(
        400, "Bad Request",
        "The Facebook profile name provided is invalid",
        950, "Invalid Facebook",
    )
    INVALID_TWITTER = Entry(
        400, "Bad Request",
        "The Twitter profile name provided is invalid",
        951, "Invalid Twitter",
    )
    INVALID_INSTAGRAM = Entry(
        400, "Bad Request",
        "The Instagram profile name provided is invalid",
        952, "Invalid Instagram",
    )
    INVALID_LINKEDIN = Entry(
        400, "Bad Request",
        "The LinkedIn profile name provided is invalid",
        953, "Invalid LinkedIn",
    )
    INVALID_GITHUB = Entry(
        400, "Bad Request",
        "The GitHub profile name provided is invalid",
        954, "Invalid GitHub",
    )
    INVALID_GITLAB = Entry(
        400, "Bad Request",
        "The GitLab profile name provided is invalid",
        955, "Invalid GitLab",
    )
    INVALID_BITBUCKET = Entry(
        400, "Bad Request",
        "The Bitbucket profile name provided is invalid",
        956, "Invalid Bitbucket",
    )
    INVALID_GOOGLE = Entry(
        400, "Bad Request",
        "The Google profile name provided is invalid",
        957, "Invalid Google",
    )
    INVALID_YOUTUBE = Entry(
        400, "Bad Request",
        "The YouTube profile name provided is invalid",
        958, "Invalid YouTube",
    )
    INVALID_TWITCH = Entry(
        400, "Bad Request",
        "The Twitch profile name provided is invalid",
        959, "Invalid Twitch",
    )
    INVALID_DISCORD = Entry(
        400, "Bad Request",
        "The Discord profile name provided is invalid",
        960, "Invalid Discord",
    )
    INVALID_SLACK = Entry(
        400, "Bad Request",
        "The Slack profile name provided is invalid",
        961, "Invalid Slack",
    )
    INVALID_TELEGRAM = Entry(
        400, "Bad Request",
        "The Telegram profile name provided is invalid",
        962, "Invalid Telegram",
    )
    INVALID_WHATSAPP = Entry(
        400, "Bad Request",
        "The WhatsApp profile name provided is invalid",
        963, "Invalid WhatsApp",
    )
    INVALID_SKYPE = Entry(
        400, "Bad Request",
        "The Skype profile name or ID provided is invalid",
        964, "Invalid Skype",
    )
    INVALID_SNAPCHAT = Entry(
        400, "Bad Request",
        "The Snapchat profile name provided is invalid",
        965, "Invalid Snapchat",
    )
    INVALID_PINTEREST = Entry(
        400, "Bad Request",
        "The Pinterest profile name provided is invalid",
        966, "Invalid Pinterest",
    )
    INVALID_TUMBLR = Entry(
        400, "Bad Request",
        "The Tumblr profile name provided is invalid",
        967, "Invalid Tumblr",
    )
    INVALID_FLICKR = Entry(
        400, "Bad Request",
        "The Flickr profile name provided is invalid",
        968, "Invalid Flickr",
    )
    INVALID_VIMEO = Entry(
        400, "Bad Request",
        "The Vimeo profile name provided is invalid",
        969, "Invalid Vimeo",
    )
    INVALID_SOUNDCLOUD = Entry(
        400, "Bad Request",
        "The SoundCloud profile name provided is invalid",
        970, "Invalid SoundCloud",
    )
    INVALID_SPOTIFY = Entry(
        400, "Bad Request",
        "The Spotify profile name provided is invalid",
        971, "Invalid Spotify",
    )
    INVALID_TIKTOK = Entry(
        400, "Bad Request",
        "The TikTok profile name provided is invalid",
        972, "Invalid TikTok",
    )
    INVALID_VINE = Entry(
        400, "Bad Request",
        "The Vine profile name provided is invalid",
        973, "Invalid Vine",
    )
    INVALID_REDDIT = Entry(
        400, "Bad Request",
        "The reddit profile provided is invalid",
        974, "Invalid Reddit",
    )
    INVALID_EXPIRATION_DATE = Entry(
        400, "Bad Request",
        "The expiration date (MMYY) is invalid or in the past",
        975, "Invalid Expiration Date",
    )
    SESSION_KEY_NOT_PRESENT_IN_HEADER = Entry(
        401, "Unauthorized",
        "The session key is missing from the request header",
        976, "Session Key Not Present In Header",
    )
    SESSION_KEY_PRESENT_AND_NOT_DECRYPTABLE_PARSABLE = Entry(
        401, "Unauthorized",
        "The session key provided is invalid, corrupted, or unparsable",
        977, "Session Key Present And Not Decryptable Parsable",
    )
    REFERENCE_HAS_NO_LINKED_CARDS = Entry(
        404, "Not Found",
        "The reference provided does not have any linked cards",
        978, "Reference Has No Linked Cards",
    )
    CARD_ALREADY_LINKED_TO_A_DIFFERENT_REFERENCE = Entry(
        409, "Conflict",
        "The card is already linked to a different reference and cannot be "
        "re-linked",
        979, "Card Already Linked To A Different Reference",
    )
    EXCLUDED_BY_FILE_TYPE_EXCLUSIONS = Entry(
        415, "Unsupported Media Type",
        "The uploaded file type is not allowed",
        980, "Excluded By File Type Exclusions",
    )
    INVALID_CARD_INFORMATION = Entry(
        400, "Bad Request",
        "The card information provided is invalid",
        981, "Invalid Card Information",
    )
    CANNOT_DISABLE_PHYSICAL_CARD = Entry(
        403, "Forbidden",
        "The operation to disable a physical card is not allowed",
        982, "Cannot Disable Physical Card",
    )
    MISSING_TOKEN = Entry(
        401, "Unauthorized",
        "The token is missing from the request",
        983, "Missing Token",
    )
    USER_NOT_FOUND = Entry(
        404, "Not Found",
        "User not found",
        984, "User Not Found",
    )
    ALREADY_EXISTS = Entry(
        409, "Conflict",
        "User already exists",
        985, "Already Exists",
    )
    DATABASE_ERROR = Entry(
        500, "Internal Server Error",
        "Database error",
        986, "Database Error",
    )
    HASHING_ERROR = Entry(
        500, "Internal Server Error",
        "Password hashing error",
        987, "Hashing Error",
    )
    INVALID_LOGIN = Entry(
        401, "Unauthorized",
        "Invalid login",
        988, "Invalid Login",
    )
    INVALID_USER = Entry(
        400, "Bad Request",
        "Invalid user",
        989, "Invalid User",
    )
    INVALID_USER_ID = Entry(
        400, "Bad Request",
        "Invalid user ID",
        990, "Invalid User Id",
    )
    INVALID_USER_ROLE = Entry(
        400, "Bad Request",
        "Invalid user role",
        991, "Invalid User Role",
    )
    INVALID_CREDENTIALS = Entry(
        401, "Unauthorized",
        "Invalid credentials",
        992, "Invalid Credentials",
    )
    USER_ALREADY_EXISTS = Entry(
        409, "Conflict",
        "User already exists",
        993, "User Already Exists",
    )
    INVALID_PSEUDONYM = Entry(
        400, "Bad Request",
        "Invalid pseudonym",
        994, "Invalid Pseudonym",
    )
    INVALID_TAG = Entry(
        400, "Bad Request",
        "Invalid tag",
        995, "Invalid Tag",
    )
    INVALID_AUTHORIZATION_CODE = Entry(
        401, "Unauthorized",
        "Invalid authorization code",
        996, "Invalid Authorization Code",
    )
    REQUEST_DENIED = Entry(
        400, "Bad Request",
        "Unofficial HTTP status code LinkedIn that is returned by the "
        "server as a generic, or catch-all error code. The reason for the "
        "HTTP response varies based on the service or host",
        999, "Request Denied",
    )
