"""
Unit tests for the code families.
"""

import pytest

from httpcatalog.codes import (
    ClientError,
    CrawlerError,
    Entry,
    Informational,
    LocalApiError,
    Redirection,
    ServerError,
    ServiceError,
    Success,
)

FAMILIES = [
    Informational,
    Success,
    Redirection,
    ClientError,
    ServerError,
    ServiceError,
    CrawlerError,
    LocalApiError,
]


class TestEntry:
    """Tests for the Entry record."""

    def test_internal_defaults_to_standard(self):
        """Omitted internal fields mirror the standard ones."""
        entry = Entry(200, "OK", "Fine")
        assert entry.internal_code == 200
        assert entry.internal_name == "OK"
        assert not entry.is_extension

    def test_extension(self):
        """An entry with its own internal code is an extension."""
        entry = Entry(400, "Bad Request", "Expired", 419, "Page Expired")
        assert entry.is_extension
        assert entry.as_tuple() == (400, "Bad Request", "Expired", 419, "Page Expired")

    def test_standard_code_out_of_range(self):
        """Standard codes must be 100-599."""
        with pytest.raises(ValueError):
            Entry(611, "Reading Error", "Failed")

    def test_empty_name_or_description(self):
        """Names and descriptions are mandatory."""
        with pytest.raises(ValueError):
            Entry(200, "", "Fine")
        with pytest.raises(ValueError):
            Entry(200, "OK", "")

    def test_entry_is_frozen(self):
        """Entries cannot be modified."""
        entry = Entry(200, "OK", "Fine")
        with pytest.raises(AttributeError):
            entry.standard_code = 201


class TestFamilyMembers:
    """Tests for member accessors."""

    def test_code_is_standard_code(self):
        """code returns the standard (wire) code."""
        assert Success.OK.code == 200
        assert ServiceError.READING_ERROR.code == 500
        assert ServiceError.READING_ERROR.internal_code == 611

    def test_in_range_vendor_codes_keep_their_number(self):
        """Vendor codes inside 100-599 are registered under their own number."""
        assert ClientError.PAGE_EXPIRED.as_tuple() == (
            419, "Page Expired", ClientError.PAGE_EXPIRED.description, 419, "Page Expired",
        )
        assert ServerError.BANDWIDTH_LIMIT_EXCEEDED.code == 509
        assert Success.CONTENT_DIFFERENT.code == 210
        assert Informational.CONNECTION_RESET_BY_PEER.code == 104
        assert Redirection.TOO_MANY_REDIRECTS.code == 310
        assert not ClientError.PAGE_EXPIRED.entry.is_extension

    def test_description(self):
        assert Success.OK.description.startswith("Request processed successfully")

    def test_entry(self):
        assert Success.CREATED.entry == Entry(
            201, "Created", Success.CREATED.description
        )

    def test_crawler_tuple(self):
        """Crawler members keep their internal numbering."""
        assert CrawlerError.EXCLUDED_BY_ROBOTS_TXT_FILE.as_tuple() == (
            403, "Forbidden", "Excluded by robots.txt file.", 740, "Excluded by Robots.txt file",
        )

    def test_as_pair(self):
        assert CrawlerError.PROGRAMMABLE_REDIRECTION.as_pair() == (302, "Found")

    def test_str(self):
        assert str(ClientError.NOT_FOUND) == "404 Not Found"


class TestAsJson:
    """Tests for the JSON view of a member."""

    def test_collapsed_form(self):
        """Plain IANA entries use the short form."""
        assert ClientError.GONE.as_json() == {
            "code": 410,
            "name": "Gone",
            "description": ClientError.GONE.description,
        }

    def test_extended_form(self):
        """Extensions report both the standard and internal code."""
        data = CrawlerError.ROBOTS_TEMPORARILY_UNAVAILABLE.as_json()
        assert data["standard_http_code"] == {"code": 503, "name": "Service Unavailable"}
        assert data["internal_http_code"] == {"code": 741, "name": "Robots Temporarily Unavailable"}
        assert data["description"] == "Robots temporarily unavailable."

    def test_renamed_standard_code_uses_extended_form(self):
        """Same number but a different internal name is still an extension."""
        data = Informational.CONTINUE_REQUEST.as_json()
        assert data["standard_http_code"] == {"code": 100, "name": "Continue"}
        assert data["internal_http_code"] == {"code": 100, "name": "Continue Request"}


class TestFamilyLookups:
    """Tests for variant_of, from_internal_code and iter."""

    def test_variant_of(self):
        assert Informational.variant_of(102) is Informational.PROCESSING
        assert ClientError.variant_of(404) is ClientError.NOT_FOUND

    def test_variant_of_first_declared_wins(self):
        """Shared standard codes resolve to the first declaration."""
        assert Informational.variant_of(100) is Informational.CONTINUE_REQUEST
        assert CrawlerError.variant_of(400) is CrawlerError.PARSING_ERROR_UNFINISHED_HEADER
        assert Redirection.variant_of(300) is Redirection.MULTIPLE_CHOICES

    def test_variant_of_unknown(self):
        assert Success.variant_of(404) is None
        assert ServiceError.variant_of(611) is None

    def test_from_internal_code(self):
        assert ServiceError.from_internal_code(611) is ServiceError.READING_ERROR
        assert CrawlerError.from_internal_code(3020) is CrawlerError.PROGRAMMABLE_REDIRECTION
        assert LocalApiError.from_internal_code(999) is LocalApiError.REQUEST_DENIED
        assert Success.from_internal_code(611) is None

    def test_iter_is_repeatable(self):
        """Two iterations yield the same sequence."""
        first = list(Redirection.iter())
        second = list(Redirection.iter())
        assert first == second
        assert len(first) == 43
        assert first[0] is Redirection.MULTIPLE_CHOICES

    def test_in_range_codes_unique_per_family(self):
        """Only out-of-range extensions share a standard code."""
        for family in (Informational, Success, Redirection, ClientError, ServerError):
            codes = [member.code for member in family.iter()]
            assert len(codes) == len(set(codes))

    def test_family_name(self):
        assert ClientError.family_name() == "ClientError"
        assert LocalApiError.family_name() == "LocalApiError"


class TestCatalogInvariants:
    """Properties every entry of every family must satisfy."""

    @pytest.mark.parametrize("family", FAMILIES, ids=lambda f: f.__name__)
    def test_entries_are_well_formed(self, family):
        for member in family.iter():
            assert 100 <= member.code <= 599
            assert member.standard_name
            assert member.description

    @pytest.mark.parametrize("family", FAMILIES, ids=lambda f: f.__name__)
    def test_internal_codes_unique(self, family):
        codes = [member.internal_code for member in family.iter()]
        assert len(codes) == len(set(codes))

    @pytest.mark.parametrize("family", FAMILIES, ids=lambda f: f.__name__)
    def test_variant_of_round_trip(self, family):
        for member in family.iter():
            found = family.variant_of(member.code)
            assert found is not None
            assert found.code == member.code

    @pytest.mark.parametrize("family", FAMILIES, ids=lambda f: f.__name__)
    def test_from_internal_code_round_trip(self, family):
        for member in family.iter():
            assert family.from_internal_code(member.internal_code) is member

    def test_family_sizes(self):
        sizes = {family.__name__: len(list(family.iter())) for family in FAMILIES}
        assert sizes == {
            "Informational": 10,
            "Success": 29,
            "Redirection": 43,
            "ClientError": 56,
            "ServerError": 26,
            "ServiceError": 16,
            "CrawlerError": 16,
            "LocalApiError": 98,
        }
