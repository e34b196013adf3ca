# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - products.py: Product CRUD endpoints
# - users.py: User creation endpoint
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import products
from . import users

__all__ = [
    "health",
    "products",
    "users",
]
