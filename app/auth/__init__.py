# =============================================================================
# app/auth/__init__.py - Authorization Module
# =============================================================================
# Provides the authorization stage of the request gate.
#
# Usage:
#   from app.auth import AuthInterceptor
#
#   gate.use(AuthInterceptor(header="Authorization"))
# =============================================================================

from app.auth.interceptor import (
    AuthInterceptor,
    TokenVerifier,
    UNAUTHORIZED_BODY,
    accept_any_token,
)

__all__ = [
    "AuthInterceptor",
    "TokenVerifier",
    "UNAUTHORIZED_BODY",
    "accept_any_token",
]
