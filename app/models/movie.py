from pydantic import BaseModel, Field, field_validator
from typing import List
from datetime import date, datetime


class MovieBase(BaseModel):
    """Public movie fields, as submitted and as returned"""
    title: str = Field(..., description="The title of the movie")
    description: str = Field(..., description="Short description of the movie")
    releaseDate: date = Field(..., description="Calendar date the movie was released")
    genre: List[str] = Field(..., description="Names of the genres the movie belongs to")

    @field_validator("releaseDate", mode="before")
    def truncate_datetime(cls, v):
        # Stored as a BSON datetime at midnight
        if isinstance(v, datetime):
            return v.date()
        return v


class MovieCreate(MovieBase):
    """Movie request body, used for OpenAPI documentation"""

    class Config:
        json_schema_extra = {
            "example": {
                "title": "New Movie",
                "description": "New Movie Description",
                "releaseDate": "2023-01-01",
                "genre": ["Comedy"],
            }
        }


class MovieResponse(MovieBase):
    """Movie returned in API responses, without identifiers or version markers"""

    class Config:
        json_schema_extra = {
            "example": {
                "title": "Movie 1",
                "description": "Description 1",
                "releaseDate": "2022-01-01",
                "genre": ["Action", "Drama"],
            }
        }
