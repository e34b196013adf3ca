# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Product Catalog API:
# - test_config.py: Environment file resolution and settings validation
# - test_gate.py: Request gate ordering and the authorization stage
# - test_products.py / test_users.py: Endpoint tests through the full app
# - test_product_service.py: Service tests against an in-memory collection
# - test_models.py: Pydantic model validation
# - test_health.py / test_main.py: Health endpoints, lifespan and startup
#
# Run tests with: pytest
# =============================================================================
