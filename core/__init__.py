# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the domain logic behind the HTTP layer:
# - models/: Pydantic schemas for request validation and responses
# - services/: Single-document MongoDB operations per resource
#
# Routes validate input and map outcomes to HTTP; services do the
# database work and raise domain errors on absence.
# =============================================================================
