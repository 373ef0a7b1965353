from pydantic import BaseModel, Field


class GenreBase(BaseModel):
    """Public genre fields"""
    name: str = Field(..., description="Name of the genre")


class GenreCreate(GenreBase):
    """Genre request body, used for OpenAPI documentation"""

    class Config:
        json_schema_extra = {"example": {"name": "Comedy"}}


class GenreResponse(GenreBase):
    """Genre returned in API responses"""

    class Config:
        json_schema_extra = {"example": {"name": "Action"}}
