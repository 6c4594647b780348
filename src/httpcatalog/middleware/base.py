"""
=============================================================================
MIDDLEWARE CONTRACT AND PIPELINE
=============================================================================

Every middleware stage in httpcatalog is a callable

    (request: HTTPRequest, next: NextHandler) -> HTTPResponse

It may inspect the request, short-circuit with its own response, or call
next(request) and post-process what comes back. A host server adapts its
own request type to HTTPRequest, runs the pipeline, and writes the
resulting HTTPResponse.

=============================================================================
COMPOSITION
=============================================================================

    pipeline = MiddlewarePipeline()
    pipeline.add(HttpInterceptor())        # outermost: sees every response
    pipeline.add(UnifiedMiddleware(...))   # origin → admit → rate limit
    pipeline.add(AuthMiddleware())         # ?key=... token check

    handler = pipeline.wrap(app)

        ┌────────────────────────────────────────────────┐
        │ HttpInterceptor                                │
        │   ┌────────────────────────────────────────┐   │
        │   │ UnifiedMiddleware                      │   │
        │   │   ┌────────────────────────────────┐   │   │
        │   │   │ AuthMiddleware                 │   │   │
        │   │   │   ┌────────────────────────┐   │   │   │
        │   │   │   │          app           │   │   │   │
        │   │   │   └────────────────────────┘   │   │   │
        │   │   └────────────────────────────────┘   │   │
        │   └────────────────────────────────────────┘   │
        └────────────────────────────────────────────────┘

The stages are independent; any order works. Placing the interceptor
outermost means rejections from the inner stages are annotated too.

=============================================================================
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Optional

from ..http.request import HTTPRequest
from ..http.response import HTTPResponse

logger = logging.getLogger(__name__)


# The next middleware, or the final handler
NextHandler = Callable[[HTTPRequest], HTTPResponse]


class Middleware(ABC):
    """
    Abstract base class for middleware stages.

    Subclasses implement __call__. Calling next(request) continues the
    chain; returning without calling it short-circuits the request.
    """

    @abstractmethod
    def __call__(self, request: HTTPRequest, next: NextHandler) -> HTTPResponse:
        """
        Process the request.

        Args:
            request: The incoming request
            next: The rest of the chain

        Returns:
            The response from next(), possibly modified, or a rejection
        """

    @property
    def name(self) -> str:
        """Middleware name for logging."""
        return self.__class__.__name__


class MiddlewarePipeline:
    """
    Chains middleware around a final handler.

    The first middleware added is the outermost one: it sees the request
    first and the response last.
    """

    def __init__(self):
        self._middleware: List[Middleware] = []

    def add(self, middleware: Middleware) -> "MiddlewarePipeline":
        """Append a stage. Returns self for chaining."""
        self._middleware.append(middleware)
        logger.debug(f"Added middleware: {middleware.name}")
        return self

    def use(self, *middleware: Middleware) -> "MiddlewarePipeline":
        """
        Append several stages at once.

        Example:
            pipeline.use(HttpInterceptor(), AuthMiddleware())
        """
        for mw in middleware:
            self.add(mw)
        return self

    def wrap(self, handler: NextHandler) -> NextHandler:
        """
        Wrap a handler with every stage of the pipeline.

        Stages are wrapped in reverse so that [A, B, C] gives
        A(B(C(handler))).
        """
        current = handler
        for middleware in reversed(self._middleware):
            current = self._bind(middleware, current)
        return current

    def handle(self, request: HTTPRequest, handler: NextHandler) -> HTTPResponse:
        """Run one request through the pipeline and the handler."""
        return self.wrap(handler)(request)

    @staticmethod
    def _bind(middleware: Middleware, next_handler: NextHandler) -> NextHandler:
        def wrapped(request: HTTPRequest) -> HTTPResponse:
            return middleware(request, next_handler)

        return wrapped

    def __len__(self) -> int:
        return len(self._middleware)

    def __iter__(self) -> Iterator[Middleware]:
        return iter(self._middleware)


# =============================================================================
# FUNCTION MIDDLEWARE
# =============================================================================

class FunctionMiddleware(Middleware):
    """
    Adapts a plain (request, next) -> response function to a stage.

        def tag(request, next):
            response = next(request)
            response.set_header("X-Tag", "1")
            return response

        pipeline.add(FunctionMiddleware(tag))
    """

    def __init__(
        self,
        func: Callable[[HTTPRequest, NextHandler], HTTPResponse],
        name: Optional[str] = None,
    ):
        self._func = func
        self._name = name or func.__name__

    def __call__(self, request: HTTPRequest, next: NextHandler) -> HTTPResponse:
        return self._func(request, next)

    @property
    def name(self) -> str:
        return self._name


def function_middleware(
    func: Callable[[HTTPRequest, NextHandler], HTTPResponse]
) -> FunctionMiddleware:
    """Decorator form of FunctionMiddleware."""
    return FunctionMiddleware(func)
