"""
Code families.

Eight closed enumerations partition the catalog by purpose. Each member
wraps an Entry record.
"""

from .entry import Entry, EntryTuple, ResponseCode
from .informational import Informational
from .success import Success
from .redirection import Redirection
from .client import ClientError
from .server import ServerError
from .service import ServiceError
from .crawler import CrawlerError
from .local import LocalApiError

__all__ = [
    "Entry",
    "EntryTuple",
    "ResponseCode",
    "Informational",
    "Success",
    "Redirection",
    "ClientError",
    "ServerError",
    "ServiceError",
    "CrawlerError",
    "LocalApiError",
]
