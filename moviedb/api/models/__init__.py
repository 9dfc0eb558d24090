"""
Pydantic schemas for API request/response validation.
"""

from moviedb.api.models.movie import (
    MovieCreate,
    MovieUpdate,
    MovieResponse,
    MovieEnvelope,
    ErrorEnvelope,
)

__all__ = [
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    "MovieEnvelope",
    "ErrorEnvelope",
]
