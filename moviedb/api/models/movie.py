"""
Pydantic schemas for Movie API.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class MovieCreate(BaseModel):
    """Request body for creating a movie. Every field is required."""

    name: str = Field(..., min_length=1, max_length=255)
    genre: str = Field(..., min_length=1, max_length=255)
    rating: float
    explicit: bool


class MovieUpdate(BaseModel):
    """Request body for updating a movie (any subset of fields)."""

    name: str | None = Field(None, min_length=1, max_length=255)
    genre: str | None = Field(None, min_length=1, max_length=255)
    rating: float | None = None
    explicit: bool | None = None

    @field_validator("name", "genre", "rating", "explicit", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Only runs for fields present in the body
        if value is None:
            raise ValueError("may not be null")
        return value


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: int
    name: str
    genre: str
    rating: float
    explicit: bool

    class Config:
        from_attributes = True


class MovieEnvelope(BaseModel):
    """Success envelope wrapping one or more movies."""

    status: Literal["success"] = "success"
    data: list[MovieResponse]


class ErrorEnvelope(BaseModel):
    """Error envelope returned for every failed request."""

    status: Literal["error"] = "error"
    message: str
