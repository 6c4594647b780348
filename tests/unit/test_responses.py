"""
Unit tests for response envelopes and canned responses.
"""

import json

import pytest

from httpcatalog import responses
from httpcatalog.codes import ClientError, CrawlerError, Success
from httpcatalog.errors import UnknownCodeError
from httpcatalog.responses import MockResponses


class TestCookieEnvelopes:
    """Tests for with_cookie and its shortcuts."""

    def test_with_cookie_member(self):
        data = json.loads(responses.with_cookie(Success.OK, ("session", "abc123")))

        assert data == {
            "status": "OK",
            "code": 200,
            "description": Success.OK.description,
            "cookie": {"key": "session", "value": "abc123"},
        }

    def test_with_cookie_numeric(self):
        data = json.loads(responses.with_cookie(404, ("k", "v")))
        assert data["status"] == "Not Found"

    def test_with_cookie_unknown_code(self):
        with pytest.raises(UnknownCodeError):
            responses.with_cookie(850, ("k", "v"))

    def test_shortcuts(self):
        assert json.loads(responses.ok_with_cookie(("k", "v")))["code"] == 200
        assert json.loads(responses.bad_request_with_cookie(("k", "v")))["code"] == 400

    def test_compact_output(self):
        assert " " not in responses.ok_with_cookie(("k", "v")).split('"description"')[0]


class TestHeaderEnvelopes:
    def test_with_headers(self):
        data = json.loads(responses.with_headers(ClientError.BAD_REQUEST, {"X-Trace": "1"}))
        assert data["status"] == "Bad Request"
        assert data["headers"] == {"X-Trace": "1"}

    def test_shortcuts(self):
        assert json.loads(responses.ok_with_headers({}))["headers"] == {}
        assert json.loads(responses.bad_request_with_headers({"A": "b"}))["code"] == 400

    def test_extension_member_uses_standard_code(self):
        data = json.loads(responses.with_headers(CrawlerError.PROGRAMMABLE_REDIRECTION, {}))
        assert data["code"] == 302
        assert data["status"] == "Found"


class TestCustomResponse:
    """Tests for custom_response."""

    def test_extension_code_uses_wire_status(self):
        response = responses.custom_response(3020, "Programmable Redirection", {"to": "/next"})

        assert response.status == 302
        assert response.json() == {
            "code": 3020,
            "name": "Programmable Redirection",
            "data": {"to": "/next"},
            "description": "Programmable redirection used (non-standard).",
        }

    def test_explicit_description(self):
        response = responses.custom_response(200, "OK", description="all good")
        assert response.json()["description"] == "all good"
        assert response.json()["data"] is None

    def test_unknown_code_sent_as_given(self):
        response = responses.custom_response(850, "Custom")
        assert response.status == 850
        assert response.json()["description"] == ""


class TestMockResponses:
    @pytest.mark.parametrize("kind", list(MockResponses), ids=lambda k: k.name)
    def test_every_kind_resolves(self, kind):
        response = responses.mock_response(kind)
        assert response.status == kind.value

    def test_not_found(self):
        response = responses.mock_response(MockResponses.NOT_FOUND, data={"id": 7})

        body = response.json()
        assert response.status == 404
        assert body["status"] == "Not Found"
        assert body["data"] == {"id": 7}
