"""
=============================================================================
UNIFIED MIDDLEWARE: ORIGIN POLICY + ADMISSION + RATE LIMIT
=============================================================================

One stage that runs three checks in a fixed order before the request
reaches the application:

    request
       │
       ▼
    exempt(request)? ──yes──► downstream (no checks, no counting)
       │ no
       ▼
    origin allowed?  ──no───► 401 {"error": "Unauthorized", ...}
       │ yes
       ▼
    admit(request)?  ──no───► 400 {"error": "InvalidRequest", ...}
       │ yes
       ▼
    within budget?   ──no───► 400 {"error": "InvalidRequest", ...}
       │ yes
       ▼
    downstream response, returned unmodified

=============================================================================
FIXED-WINDOW RATE LIMITING
=============================================================================

Each client (keyed by IP address, "unknown" when unresolved) owns a
(count, window_start) pair:

    max_requests=2, window_duration=10s

    t=0.0   new client        → (1, 0.0)  allowed
    t=1.0   same window       → (2, 0.0)  allowed
    t=2.0   same window       → (3, 0.0)  REJECTED (3 > 2)
    t=10.5  window expired    → (1, 10.5) allowed

The table is shared by every request handled by this instance. It is
guarded by a lock that covers only the lookup and the counter update;
the downstream call always happens outside the lock.

Windows that expired long ago are swept every cleanup_interval seconds
so that one-off clients do not accumulate forever.

=============================================================================
"""

import logging
import threading
import time
from typing import Callable, Dict, Iterable, Optional, Tuple
from urllib.parse import urlparse

from .base import Middleware, NextHandler
from ..config import MiddlewareConfig
from ..errors import (
    InternalMiddlewareError,
    InvalidRequestError,
    MiddlewareError,
    RateLimitedError,
    UnauthorizedError,
)
from ..http.request import HTTPRequest
from ..http.response import HTTPResponse, error_response
from ..registry import is_origin_allowed

logger = logging.getLogger("httpcatalog.access")

RequestPredicate = Callable[[HTTPRequest], bool]

# client key → (count, window_start)
WindowState = Tuple[int, float]


def _admit_all(request: HTTPRequest) -> bool:
    return True


class UnifiedMiddleware(Middleware):
    """
    Cross-origin check, admission predicate and per-client rate limit.

    Usage:
        pipeline.add(UnifiedMiddleware(
            allowed_origins=["example.com"],
            max_requests=100,
            window_duration=60.0,
            admit=lambda req: req.method != "TRACE",
            exempt=lambda req: req.path == "/health",
        ))

    Rejections never raise to the host: they become JSON responses with
    the status of the matching MiddlewareError. A caller-supplied
    predicate or key function that raises gives a 500 response.
    Exceptions raised by the downstream handler are not caught.
    """

    def __init__(
        self,
        allowed_origins: Iterable[str] = ("*",),
        max_requests: int = 100,
        window_duration: float = 60.0,
        admit: Optional[RequestPredicate] = None,
        exempt: Optional[RequestPredicate] = None,
        key_func: Optional[Callable[[HTTPRequest], str]] = None,
        cleanup_interval: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            allowed_origins: Accepted origins; "*" accepts any
            max_requests: Requests allowed per client per window
            window_duration: Window length in seconds
            admit: Predicate a request must satisfy; defaults to accept-all
            exempt: Predicate for requests that skip every check
            key_func: Client identity; defaults to the peer IP address
            cleanup_interval: Seconds between sweeps of expired windows
            clock: Monotonic time source, in seconds
        """
        if max_requests < 1:
            raise ValueError(f"max_requests must be >= 1, got {max_requests}")
        if window_duration <= 0:
            raise ValueError(f"window_duration must be > 0, got {window_duration}")

        self.allowed_origins = frozenset(allowed_origins)
        self.max_requests = max_requests
        self.window_duration = window_duration
        self.admit = admit or _admit_all
        self.exempt = exempt
        self.key_func = key_func or self._default_key_func
        self.cleanup_interval = cleanup_interval
        self._clock = clock

        self._windows: Dict[str, WindowState] = {}
        self._lock = threading.Lock()
        self._last_cleanup = clock()

    @classmethod
    def from_config(
        cls,
        config: MiddlewareConfig,
        admit: Optional[RequestPredicate] = None,
        exempt: Optional[RequestPredicate] = None,
    ) -> "UnifiedMiddleware":
        """Build the middleware from a validated MiddlewareConfig."""
        config.validate()
        return cls(
            allowed_origins=config.allowed_origins,
            max_requests=config.max_requests,
            window_duration=config.window_duration,
            admit=admit,
            exempt=exempt,
            cleanup_interval=config.cleanup_interval,
        )

    @staticmethod
    def _default_key_func(request: HTTPRequest) -> str:
        return request.client_ip

    # =========================================================================
    # REQUEST PROCESSING
    # =========================================================================

    def __call__(self, request: HTTPRequest, next: NextHandler) -> HTTPResponse:
        try:
            if not self._is_exempt(request):
                self._check_origin(request)
                self._check_admission(request)
                self._check_rate(request)
        except MiddlewareError as e:
            return self._reject(request, e)

        return next(request)

    def _is_exempt(self, request: HTTPRequest) -> bool:
        if self.exempt is None or not self._evaluate("exempt", self.exempt, request):
            return False
        logger.debug(f"Exempt request: {request.method} {request.path}")
        return True

    def _evaluate(self, label: str, predicate: RequestPredicate, request: HTTPRequest) -> bool:
        """Run a caller-supplied predicate; a failure becomes a 500 rejection."""
        try:
            return bool(predicate(request))
        except Exception as e:
            logger.error(f"{label} predicate failed: {type(e).__name__}: {e}")
            raise InternalMiddlewareError(f"Could not evaluate {label} predicate") from e

    def _check_origin(self, request: HTTPRequest) -> None:
        origin = request.origin
        if self._origin_allowed(origin):
            return
        logger.info(f"Origin not allowed: {origin or '-'} ({request.method} {request.path})")
        raise UnauthorizedError(f"Origin not allowed: {origin or 'none'}")

    def _origin_allowed(self, origin: str) -> bool:
        if is_origin_allowed(origin, self.allowed_origins):
            return True
        # "https://example.com" also matches an allowed "example.com"
        hostname = urlparse(origin).netloc if "://" in origin else ""
        return bool(hostname) and hostname in self.allowed_origins

    def _check_admission(self, request: HTTPRequest) -> None:
        if not self._evaluate("admit", self.admit, request):
            logger.info(f"Request not admitted: {request.method} {request.path}")
            raise InvalidRequestError("Request rejected by admission policy")

    def _check_rate(self, request: HTTPRequest) -> None:
        try:
            key = self.key_func(request)
        except Exception as e:
            logger.error(f"Rate limit key function failed: {type(e).__name__}: {e}")
            raise InternalMiddlewareError("Could not identify client") from e

        now = self._clock()
        with self._lock:
            if now - self._last_cleanup > self.cleanup_interval:
                self._cleanup(now)

            count, window_start = self._windows.get(key, (0, now))
            if now - window_start > self.window_duration:
                count, window_start = 1, now
            else:
                count += 1
            self._windows[key] = (count, window_start)

        if count > self.max_requests:
            retry_after = max(0, int(window_start + self.window_duration - now) + 1)
            logger.warning(
                f"Rate limit exceeded for {key}: {count}/{self.max_requests} "
                f"in {self.window_duration}s window"
            )
            raise RateLimitedError(
                f"Rate limit exceeded. Try again in {retry_after} seconds.",
                retry_after=retry_after,
            )

    def _reject(self, request: HTTPRequest, error: MiddlewareError) -> HTTPResponse:
        response = error_response(error.status_code, **error.to_dict())
        if isinstance(error, RateLimitedError) and error.retry_after is not None:
            response.set_header("Retry-After", str(error.retry_after))
        if isinstance(error, InternalMiddlewareError):
            logger.error(f"Internal middleware error on {request.method} {request.path}: {error}")
        return response

    # =========================================================================
    # STATE MANAGEMENT
    # =========================================================================

    def _cleanup(self, now: float) -> None:
        """Drop windows that have expired. Caller holds the lock."""
        expired = [
            key for key, (_, start) in self._windows.items()
            if now - start > self.window_duration
        ]
        for key in expired:
            del self._windows[key]
        self._last_cleanup = now
        if expired:
            logger.debug(f"Evicted {len(expired)} expired rate-limit windows")

    def window_for(self, key: str) -> Optional[WindowState]:
        """Current (count, window_start) of a client, if tracked."""
        with self._lock:
            return self._windows.get(key)

    def reset(self, key: Optional[str] = None) -> None:
        """
        Forget rate-limit state.

        Args:
            key: Client to reset; None clears every client
        """
        with self._lock:
            if key is None:
                self._windows.clear()
            else:
                self._windows.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)
