"""
Unit tests for the token check middleware.
"""

from httpcatalog.http import HTTPResponse, ok
from httpcatalog.middleware import AuthMiddleware
from httpcatalog.middleware.auth import AUTH_ERROR_HEADER, STATUS_CODE_HEADER


class TestAuthMiddleware:
    """Tests for each token outcome."""

    def test_validated_fills_empty_body(self, make_request, empty_app):
        response = AuthMiddleware()(make_request("/p?key=validated"), empty_app)

        assert response.status == 200
        assert response.text == "Authentication Successful"
        assert response.get_header(STATUS_CODE_HEADER) == "200"
        assert response.get_header(AUTH_ERROR_HEADER) is None

    def test_validated_keeps_downstream_body(self, make_request, app):
        response = AuthMiddleware()(make_request("/p?key=validated"), app)

        assert response.json() == {"path": "/p"}
        assert response.get_header(STATUS_CODE_HEADER) == "200"

    def test_validated_mirrors_downstream_status(self, make_request):
        response = AuthMiddleware()(
            make_request("/p?key=validated"),
            lambda req: HTTPResponse(status=201, body=b"made"),
        )
        assert response.get_header(STATUS_CODE_HEADER) == "201"

    def test_expired(self, make_request, app):
        response = AuthMiddleware()(make_request("/p?key=expired"), app)

        assert response.status == 401
        assert response.get_header(AUTH_ERROR_HEADER) == "Token Expired"
        assert response.get_header(STATUS_CODE_HEADER) == "401"
        assert response.text == "Your authentication token has expired, please log in again"

    def test_missing(self, make_request, app):
        response = AuthMiddleware()(make_request("/p"), app)

        assert response.status == 400
        assert response.get_header(AUTH_ERROR_HEADER) == "Missing Token"
        assert response.get_header(STATUS_CODE_HEADER) == "400"
        assert response.text == "Missing auth token"

    def test_invalid(self, make_request, app):
        response = AuthMiddleware()(make_request("/p?key=forged"), app)

        assert response.status == 401
        assert response.get_header(AUTH_ERROR_HEADER) == "Invalid Token"

    def test_blank_token_is_invalid(self, make_request, app):
        response = AuthMiddleware()(make_request("/p?key="), app)
        assert response.status == 401

    def test_handler_not_called_on_rejection(self, make_request):
        calls = []

        def handler(request):
            calls.append(request)
            return ok("never")

        AuthMiddleware()(make_request("/p?key=expired"), handler)

        assert calls == []

    def test_custom_parameter(self, make_request, app):
        middleware = AuthMiddleware(param="token")
        assert middleware(make_request("/p?token=validated"), app).status == 200
        assert middleware(make_request("/p?key=validated"), app).status == 400
