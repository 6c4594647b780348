"""
Unit tests for middleware composition.
"""

from httpcatalog.http import HTTPResponse
from httpcatalog.middleware import (
    AuthMiddleware,
    FunctionMiddleware,
    HttpInterceptor,
    MiddlewarePipeline,
    UnifiedMiddleware,
    function_middleware,
)


def _recorder(label, calls):
    def record(request, next):
        calls.append(f"{label}:in")
        response = next(request)
        calls.append(f"{label}:out")
        return response

    return FunctionMiddleware(record, name=label)


class TestMiddlewarePipeline:
    """Tests for MiddlewarePipeline ordering."""

    def test_first_added_is_outermost(self, make_request, app):
        calls = []
        pipeline = MiddlewarePipeline().use(_recorder("a", calls), _recorder("b", calls))

        pipeline.handle(make_request(), app)

        assert calls == ["a:in", "b:in", "b:out", "a:out"]

    def test_empty_pipeline_calls_handler(self, make_request, app):
        pipeline = MiddlewarePipeline()
        assert len(pipeline) == 0
        assert pipeline.handle(make_request("/x"), app).json() == {"path": "/x"}

    def test_short_circuit(self, make_request, app):
        def deny(request, next):
            return HTTPResponse(status=403)

        calls = []
        pipeline = MiddlewarePipeline().use(FunctionMiddleware(deny), _recorder("inner", calls))

        assert pipeline.handle(make_request(), app).status == 403
        assert calls == []

    def test_iteration_and_names(self):
        pipeline = MiddlewarePipeline().add(HttpInterceptor()).add(AuthMiddleware())
        assert [mw.name for mw in pipeline] == ["HttpInterceptor", "AuthMiddleware"]

    def test_function_middleware_decorator(self, make_request, app):
        @function_middleware
        def tag(request, next):
            response = next(request)
            response.set_header("X-Tag", "1")
            return response

        response = MiddlewarePipeline().add(tag).handle(make_request(), app)

        assert tag.name == "tag"
        assert response.get_header("X-Tag") == "1"


class TestFullStack:
    """The three stages composed the way a host would compose them."""

    def _pipeline(self):
        return MiddlewarePipeline().use(
            HttpInterceptor(),
            UnifiedMiddleware(allowed_origins=["example.com"], max_requests=2),
            AuthMiddleware(),
        )

    def test_authorized_request(self, make_request, empty_app):
        response = self._pipeline().handle(make_request("/p?key=validated"), empty_app)

        assert response.status == 200
        assert response.text == "Authentication Successful"
        assert response.get_header("x-request-id") is not None

    def test_rejections_are_annotated(self, make_request, empty_app):
        handler = self._pipeline().wrap(empty_app)

        response = handler(make_request("/p?key=validated", host="evil.test"))

        assert response.status == 401
        assert response.get_header("x-status-description") is not None

    def test_rate_limit_before_auth(self, make_request, empty_app):
        handler = self._pipeline().wrap(empty_app)

        statuses = [handler(make_request("/p")).status for _ in range(3)]

        assert statuses == [400, 400, 400]
        assert handler(make_request("/p?key=validated")).json()["error"] == "InvalidRequest"
