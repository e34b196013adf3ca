# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, entry point, error handler registration
# - config.py: Environment file resolution and settings validation
# - gate.py: Ordered request interceptors (logging, authorization)
# - auth/: Authorization gate stage
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# database work to the core/ package.
# =============================================================================
