# API schemas
from app.models.schemas import (
    ProfileReference,
    TrustAssessment,
)

__all__ = [
    "ProfileReference",
    "TrustAssessment",
]
