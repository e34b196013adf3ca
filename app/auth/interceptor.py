# =============================================================================
# app/auth/interceptor.py - Authorization Gate Stage
# =============================================================================
# Rejects requests that do not carry a credential token in the configured
# header. Token checking itself is delegated to a TokenVerifier so a real
# scheme can be plugged in without touching the gate.
# =============================================================================

import logging
from collections.abc import Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.gate import GateResult

logger = logging.getLogger(__name__)

# Returns True when the token is acceptable
TokenVerifier = Callable[[str], bool]

UNAUTHORIZED_BODY = {"message": "Unauthorized"}


def accept_any_token(token: str) -> bool:
    """
    Accept any non-empty token.

    Placeholder verifier: no signature or expiry checks are performed.
    """
    return bool(token)


class AuthInterceptor:
    """
    Gate stage that requires a credential header.

    Missing, blank, or rejected tokens produce a 403 with
    {"message": "Unauthorized"} and the chain stops there.

    Example:
        gate.use(AuthInterceptor(header="Authorization", verifier=my_verifier))
    """

    def __init__(
        self,
        header: str = "Authorization",
        verifier: TokenVerifier = accept_any_token,
    ):
        self.header = header
        self.verifier = verifier

    def __call__(self, request: Request) -> GateResult:
        token = request.headers.get(self.header, "").strip()

        if not token:
            logger.warning(f"Missing {self.header} header on {request.method} {request.url.path}")
            return GateResult.respond(self._reject())

        if not self.verifier(token):
            logger.warning(f"Rejected token on {request.method} {request.url.path}")
            return GateResult.respond(self._reject())

        return GateResult.proceed()

    @staticmethod
    def _reject() -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content=UNAUTHORIZED_BODY,
        )
