from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str


class UserResponse(BaseModel):
    id: str
    name: str


class ErrorResponse(BaseModel):
    """Body of every failed request"""
    error: str
