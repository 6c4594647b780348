"""
Unit tests for the HTTP request model.
"""

from httpcatalog.http.request import HTTPRequest


class TestFromUrl:
    """Tests for HTTPRequest.from_url."""

    def test_path_and_query(self):
        request = HTTPRequest.from_url("get", "/p?key=validated&tag=a&tag=b")

        assert request.method == "GET"
        assert request.path == "/p"
        assert request.get_query("key") == "validated"
        assert request.query_params["tag"] == ["a", "b"]

    def test_missing_query(self):
        request = HTTPRequest.from_url("GET", "/p")
        assert request.get_query("key") is None
        assert request.get_query("key", "fallback") == "fallback"

    def test_blank_query_value(self):
        request = HTTPRequest.from_url("GET", "/p?key=")
        assert request.get_query("key") == ""

    def test_absolute_url_sets_host(self):
        request = HTTPRequest.from_url("GET", "http://example.com/api")
        assert request.host == "example.com"
        assert request.path == "/api"

    def test_explicit_host_wins(self):
        request = HTTPRequest.from_url("GET", "http://example.com/api", headers={"Host": "other.test"})
        assert request.host == "other.test"

    def test_url_decoding(self):
        request = HTTPRequest.from_url("GET", "/hello%20world")
        assert request.path == "/hello world"

    def test_empty_path(self):
        request = HTTPRequest.from_url("GET", "http://example.com")
        assert request.path == "/"


class TestHeaders:
    """Tests for header access."""

    def test_headers_are_lowercased(self):
        request = HTTPRequest("GET", "/", headers={"Content-Type": "text/plain"})
        assert request.headers == {"content-type": "text/plain"}
        assert request.get_header("CONTENT-TYPE") == "text/plain"

    def test_missing_header_default(self):
        request = HTTPRequest("GET", "/")
        assert request.get_header("X-Missing") == ""
        assert request.get_header("X-Missing", "none") == "none"

    def test_origin_prefers_origin_header(self):
        request = HTTPRequest("GET", "/", headers={"Host": "api.test", "Origin": "https://app.test"})
        assert request.origin == "https://app.test"

    def test_origin_falls_back_to_host(self):
        request = HTTPRequest("GET", "/", headers={"Host": "example.com"})
        assert request.origin == "example.com"


class TestClientIp:
    def test_resolved_ip(self):
        request = HTTPRequest("GET", "/", client_address=("10.0.0.7", 4000))
        assert request.client_ip == "10.0.0.7"

    def test_unresolved_ip(self):
        request = HTTPRequest("GET", "/")
        assert request.client_ip == "unknown"
