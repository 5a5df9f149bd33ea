"""Basecoat models"""

from basecoat.models.base_models import DetailedHealthResponse, ErrorResponse, HealthResponse

__all__ = [
    "DetailedHealthResponse",
    "ErrorResponse",
    "HealthResponse",
]
