"""
Unit tests for the unified origin / admission / rate-limit middleware.
"""

import threading

import pytest

from httpcatalog.config import MiddlewareConfig
from httpcatalog.http import HTTPResponse
from httpcatalog.middleware import UnifiedMiddleware


class TestRateLimit:
    """Tests for the fixed-window counter."""

    def test_third_request_rejected(self, make_request, app):
        """Two requests fit the budget, the third is an invalid request."""
        middleware = UnifiedMiddleware(allowed_origins=["example.com"], max_requests=2, window_duration=60.0)

        statuses = [middleware(make_request("/p"), app).status for _ in range(3)]

        assert statuses == [200, 200, 400]

    def test_rejection_body(self, make_request, app, clock):
        middleware = UnifiedMiddleware(max_requests=1, window_duration=10.0, clock=clock)
        middleware(make_request(), app)

        response = middleware(make_request(), app)

        assert response.json()["error"] == "InvalidRequest"
        assert response.get_header("Retry-After") == "11"

    def test_window_resets(self, make_request, app, clock):
        middleware = UnifiedMiddleware(max_requests=2, window_duration=10.0, clock=clock)

        assert middleware(make_request(), app).status == 200
        clock.advance(1.0)
        assert middleware(make_request(), app).status == 200
        clock.advance(1.0)
        assert middleware(make_request(), app).status == 400

        clock.advance(8.5)
        assert middleware(make_request(), app).status == 200
        assert middleware.window_for("127.0.0.1") == (1, clock.now)

    def test_clients_counted_separately(self, make_request, app):
        middleware = UnifiedMiddleware(max_requests=1)

        assert middleware(make_request(client_ip="10.0.0.1"), app).status == 200
        assert middleware(make_request(client_ip="10.0.0.2"), app).status == 200
        assert middleware(make_request(client_ip="10.0.0.1"), app).status == 400

    def test_unresolved_client_is_unknown(self, make_request, app, clock):
        middleware = UnifiedMiddleware(clock=clock)

        middleware(make_request(client_ip=""), app)

        assert middleware.window_for("unknown") == (1, clock.now)

    def test_custom_key_func(self, make_request, app):
        middleware = UnifiedMiddleware(max_requests=1, key_func=lambda req: req.get_header("x-api-key"))

        assert middleware(make_request(headers={"X-Api-Key": "a"}), app).status == 200
        assert middleware(make_request(headers={"X-Api-Key": "b"}), app).status == 200
        assert middleware(make_request(headers={"X-Api-Key": "a"}), app).status == 400

    def test_key_func_failure_is_internal_error(self, make_request, app):
        def broken(request):
            raise KeyError("no identity")

        middleware = UnifiedMiddleware(key_func=broken)

        response = middleware(make_request(), app)

        assert response.status == 500
        assert response.json()["error"] == "InternalMiddlewareError"

    def test_concurrent_requests_count_exactly(self, make_request, app):
        """Exactly max_requests of a burst get through."""
        middleware = UnifiedMiddleware(max_requests=10, window_duration=60.0)
        statuses = []
        statuses_lock = threading.Lock()

        def send():
            status = middleware(make_request(), app).status
            with statuses_lock:
                statuses.append(status)

        threads = [threading.Thread(target=send) for _ in range(50)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert statuses.count(200) == 10
        assert statuses.count(400) == 40
        assert middleware.window_for("127.0.0.1")[0] == 50


class TestOriginPolicy:
    """Tests for the cross-origin check."""

    def test_disallowed_host(self, make_request, app):
        middleware = UnifiedMiddleware(allowed_origins=["example.com"])

        response = middleware(make_request(host="evil.test"), app)

        assert response.status == 401
        assert response.json()["error"] == "Unauthorized"

    def test_wildcard(self, make_request, app):
        middleware = UnifiedMiddleware(allowed_origins=["*"])
        assert middleware(make_request(host="anything.test"), app).status == 200

    def test_origin_header_with_scheme(self, make_request, app):
        middleware = UnifiedMiddleware(allowed_origins=["example.com"])

        request = make_request(host="api.internal", headers={"Origin": "https://example.com"})

        assert middleware(request, app).status == 200

    def test_missing_origin_and_host(self, make_request, app):
        middleware = UnifiedMiddleware(allowed_origins=["example.com"])
        assert middleware(make_request(host=""), app).status == 401

    def test_rejected_origin_is_not_counted(self, make_request, app):
        middleware = UnifiedMiddleware(allowed_origins=["example.com"])
        middleware(make_request(host="evil.test"), app)
        assert len(middleware) == 0


class TestAdmission:
    def test_admit_false(self, make_request, app):
        middleware = UnifiedMiddleware(admit=lambda req: req.method != "TRACE")

        response = middleware(make_request(method="TRACE"), app)

        assert response.status == 400
        assert response.json()["error"] == "InvalidRequest"

    def test_admit_true(self, make_request, app):
        middleware = UnifiedMiddleware(admit=lambda req: True)
        assert middleware(make_request("/p"), app).json() == {"path": "/p"}

    def test_failing_admit_is_internal_error(self, make_request, app):
        """A raising admission predicate is turned into a 500 rejection."""
        def admit(request):
            raise RuntimeError("boom")

        middleware = UnifiedMiddleware(admit=admit)

        response = middleware(make_request(), app)

        assert response.status == 500
        assert response.json()["error"] == "InternalMiddlewareError"
        assert len(middleware) == 0

    def test_failing_exempt_is_internal_error(self, make_request, app):
        def exempt(request):
            raise KeyError("path")

        calls = []

        def handler(request):
            calls.append(request)
            return app(request)

        response = UnifiedMiddleware(exempt=exempt)(make_request(), handler)

        assert response.status == 500
        assert response.json()["error"] == "InternalMiddlewareError"
        assert calls == []

    def test_exempt_skips_every_check(self, make_request, app):
        middleware = UnifiedMiddleware(
            allowed_origins=["example.com"],
            max_requests=1,
            exempt=lambda req: req.path == "/health",
        )

        for _ in range(3):
            assert middleware(make_request("/health", host="evil.test"), app).status == 200
        assert len(middleware) == 0


class TestDownstream:
    def test_response_returned_unmodified(self, make_request):
        downstream = HTTPResponse(status=204, headers={"X-Mine": "1"})
        middleware = UnifiedMiddleware()

        assert middleware(make_request(), lambda req: downstream) is downstream

    def test_downstream_exception_propagates(self, make_request):
        def failing(request):
            raise RuntimeError("boom")

        middleware = UnifiedMiddleware()

        with pytest.raises(RuntimeError, match="boom"):
            middleware(make_request(), failing)


class TestStateManagement:
    def test_cleanup_evicts_expired_windows(self, make_request, app, clock):
        middleware = UnifiedMiddleware(window_duration=10.0, cleanup_interval=30.0, clock=clock)
        middleware(make_request(client_ip="10.0.0.1"), app)
        assert len(middleware) == 1

        clock.advance(31.0)
        middleware(make_request(client_ip="10.0.0.2"), app)

        assert middleware.window_for("10.0.0.1") is None
        assert len(middleware) == 1

    def test_reset_single_client(self, make_request, app):
        middleware = UnifiedMiddleware(max_requests=1)
        middleware(make_request(), app)
        assert middleware(make_request(), app).status == 400

        middleware.reset("127.0.0.1")

        assert middleware(make_request(), app).status == 200

    def test_reset_all(self, make_request, app):
        middleware = UnifiedMiddleware()
        middleware(make_request(client_ip="10.0.0.1"), app)
        middleware(make_request(client_ip="10.0.0.2"), app)

        middleware.reset()

        assert len(middleware) == 0


class TestConstruction:
    @pytest.mark.parametrize("kwargs", [
        {"max_requests": 0},
        {"window_duration": 0},
        {"window_duration": -1.0},
    ])
    def test_invalid_arguments(self, kwargs):
        with pytest.raises(ValueError):
            UnifiedMiddleware(**kwargs)

    def test_from_config(self, make_request, app):
        config = MiddlewareConfig(allowed_origins=["example.com"], max_requests=2, window_duration=60.0)
        middleware = UnifiedMiddleware.from_config(config)

        assert middleware.max_requests == 2
        assert middleware.allowed_origins == frozenset({"example.com"})
        assert [middleware(make_request(), app).status for _ in range(3)] == [200, 200, 400]

    def test_from_invalid_config(self):
        with pytest.raises(ValueError):
            UnifiedMiddleware.from_config(MiddlewareConfig(max_requests=0))
