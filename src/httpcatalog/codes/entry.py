"""
=============================================================================
CATALOG ENTRIES AND THE CODE FAMILY BASE CLASS
=============================================================================

Every status code in the catalog is described by one immutable Entry.

=============================================================================
STANDARD VS INTERNAL CODES
=============================================================================

An entry carries two views of the same status:

    ┌──────────────────────────────────────────────────────────────────┐
    │  Entry(500, "Internal Server Error", "An error...", 611, ...)    │
    │        ───  ───────────────────────               ───           │
    │         │        │                                 │            │
    │         │        │                                 └── internal │
    │         │        └── standard name (goes on the wire)           │
    │         └── standard code (always 100-599)                      │
    └──────────────────────────────────────────────────────────────────┘

    The STANDARD code is what an HTTP client actually sees on the status
    line. The INTERNAL code is the richer, vendor or domain specific
    number (611 "Reading Error", 741, 3020 ...). Vendor codes that already
    fall in 100-599 (419 "Page Expired", 520 "Unknown Error") are their
    own standard code.

    When no extension applies, both views are the same:

        Entry(200, "OK", "Request processed successfully...")
        # internal_code == 200, internal_name == "OK"

=============================================================================
FAMILIES AS ENUMS
=============================================================================

Each family is an Enum whose member values are Entry records:

    class ServiceError(ResponseCode):
        READING_ERROR = Entry(500, "Internal Server Error", "...", 611, "Reading Error")

    ServiceError.READING_ERROR.code            # 500
    ServiceError.READING_ERROR.internal_code   # 611
    ServiceError.variant_of(500)               # ServiceError.READING_ERROR

Internal codes are unique inside a family, so two members never compare
equal and Enum never turns one of them into an alias of the other.

=============================================================================
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple, Type, TypeVar


#: (standard_code, standard_name, description, internal_code, internal_name)
EntryTuple = Tuple[int, str, str, int, str]

STANDARD_RANGE = range(100, 600)

C = TypeVar("C", bound="ResponseCode")


@dataclass(frozen=True)
class Entry:
    """
    The immutable record behind one status code.

    internal_code and internal_name default to the standard values when
    the entry is not an extension.
    """

    standard_code: int
    standard_name: str
    description: str
    internal_code: Optional[int] = field(default=None)
    internal_name: Optional[str] = field(default=None)

    def __post_init__(self):
        # frozen dataclass: defaults have to be written through object
        if self.internal_code is None:
            object.__setattr__(self, "internal_code", self.standard_code)
        if self.internal_name is None:
            object.__setattr__(self, "internal_name", self.standard_name)

        if self.standard_code not in STANDARD_RANGE:
            raise ValueError(
                f"Standard code {self.standard_code} outside 100-599"
            )
        if not self.standard_name:
            raise ValueError(f"Entry {self.internal_code} has no standard name")
        if not self.description:
            raise ValueError(f"Entry {self.internal_code} has no description")

    @property
    def is_extension(self) -> bool:
        """True when the internal view differs from the standard one."""
        return (
            self.internal_code != self.standard_code
            or self.internal_name != self.standard_name
        )

    def as_tuple(self) -> EntryTuple:
        return (
            self.standard_code,
            self.standard_name,
            self.description,
            self.internal_code,
            self.internal_name,
        )

    def as_json(self) -> Dict[str, Any]:
        """
        JSON-ready view of the entry.

        Extensions are split into a standard and an internal object;
        plain IANA entries use the collapsed form:

            {"code": 200, "name": "OK", "description": "..."}
        """
        if not self.is_extension:
            return {
                "code": self.standard_code,
                "name": self.standard_name,
                "description": self.description,
            }
        return {
            "standard_http_code": {
                "code": self.standard_code,
                "name": self.standard_name,
            },
            "internal_http_code": {
                "code": self.internal_code,
                "name": self.internal_name,
            },
            "description": self.description,
        }


class ResponseCode(Enum):
    """
    Base class of every code family.

    Subclasses declare members whose values are Entry records. The
    declaration order is significant: variant_of() and iter() both
    follow it.
    """

    # =========================================================================
    # MEMBER ACCESSORS
    # =========================================================================

    @property
    def entry(self) -> Entry:
        return self.value

    @property
    def code(self) -> int:
        """The standard (wire) status code."""
        return self.value.standard_code

    @property
    def standard_name(self) -> str:
        return self.value.standard_name

    @property
    def description(self) -> str:
        return self.value.description

    @property
    def internal_code(self) -> int:
        return self.value.internal_code

    @property
    def internal_name(self) -> str:
        return self.value.internal_name

    def as_tuple(self) -> EntryTuple:
        return self.value.as_tuple()

    def as_json(self) -> Dict[str, Any]:
        return self.value.as_json()

    def as_pair(self) -> Tuple[int, str]:
        """(standard_code, standard_name), the pair a status line needs."""
        return self.value.standard_code, self.value.standard_name

    def __str__(self) -> str:
        return f"{self.code} {self.standard_name}"

    # =========================================================================
    # FAMILY-LEVEL LOOKUPS
    # =========================================================================

    @classmethod
    def family_name(cls) -> str:
        return cls.__name__

    @classmethod
    def iter(cls: Type[C]) -> Iterator[C]:
        """Fresh iterator over the members, in declaration order."""
        return iter(cls)

    @classmethod
    def variant_of(cls: Type[C], code: int) -> Optional[C]:
        """
        Find the member whose standard code is `code`.

        Several members of a family may share a standard code (every
        CrawlerError parsing failure reports 400, for example). The first
        one declared wins.

        Returns:
            The matching member, or None
        """
        for member in cls:
            if member.value.standard_code == code:
                return member
        return None

    @classmethod
    def from_internal_code(cls: Type[C], code: int) -> Optional[C]:
        """Find the member whose internal code is `code`."""
        for member in cls:
            if member.value.internal_code == code:
                return member
        return None
