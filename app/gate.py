# =============================================================================
# app/gate.py - Request Gate
# =============================================================================
# An ordered chain of request interceptors that runs before any route
# handler. Each interceptor looks at the request and returns a GateResult:
#
#   GateResult.proceed()          -> hand the request to the next stage
#   GateResult.respond(response)  -> stop here and send this response
#
# Stages run in registration order and the first "respond" wins, so a
# rejected request never reaches a handler or the database.
#
# Usage:
#   gate = RequestGate()
#   gate.use(log_request)
#   gate.use(AuthInterceptor(), routes=["*"], exclude=["/health"])
#   app.middleware("http")(gate)
# =============================================================================

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from fnmatch import fnmatchcase

from fastapi import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

ALL_ROUTES = "*"


@dataclass(frozen=True)
class GateResult:
    """Outcome of one interceptor: continue, or respond and stop the chain."""

    response: Response | None = None

    @classmethod
    def proceed(cls) -> GateResult:
        return cls()

    @classmethod
    def respond(cls, response: Response) -> GateResult:
        return cls(response=response)

    @property
    def should_continue(self) -> bool:
        return self.response is None


Interceptor = Callable[[Request], GateResult]


@dataclass(frozen=True)
class GateStage:
    """An interceptor plus the path patterns it applies to."""

    interceptor: Interceptor
    routes: tuple[str, ...] = (ALL_ROUTES,)
    exclude: tuple[str, ...] = ()
    name: str = ""

    def applies_to(self, path: str) -> bool:
        """True when the path matches a route pattern and no exclusion."""
        if any(fnmatchcase(path, pattern) for pattern in self.exclude):
            return False
        return any(
            pattern == ALL_ROUTES or fnmatchcase(path, pattern)
            for pattern in self.routes
        )


@dataclass
class RequestGate:
    """
    Ordered, short-circuiting interceptor chain.

    Installed as a single HTTP middleware so the relative order of the
    stages is fixed by registration, not by how the framework stacks
    middleware.
    """

    stages: list[GateStage] = field(default_factory=list)

    def use(
        self,
        interceptor: Interceptor,
        routes: Sequence[str] = (ALL_ROUTES,),
        exclude: Sequence[str] = (),
    ) -> RequestGate:
        """Append an interceptor. Returns the gate so calls can be chained."""
        name = getattr(interceptor, "__name__", type(interceptor).__name__)
        self.stages.append(
            GateStage(
                interceptor=interceptor,
                routes=tuple(routes),
                exclude=tuple(exclude),
                name=name,
            )
        )
        return self

    def run(self, request: Request) -> GateResult:
        """Run every applicable stage in order; stop at the first response."""
        path = request.url.path
        for stage in self.stages:
            if not stage.applies_to(path):
                continue
            result = stage.interceptor(request)
            if not result.should_continue:
                logger.debug(f"Request {request.method} {path} stopped by {stage.name}")
                return result
        return GateResult.proceed()

    async def __call__(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        result = self.run(request)
        if result.response is not None:
            return result.response
        return await call_next(request)


# =============================================================================
# Built-in Interceptors
# =============================================================================

def log_request(request: Request) -> GateResult:
    """Log the method and URL of every incoming request. Never blocks."""
    logger.info(f"Incoming Request: {request.method}, {request.url}")
    return GateResult.proceed()
