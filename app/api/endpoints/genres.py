from fastapi import APIRouter, Body, Depends, Path
from typing import Any, List
from ...models.genre import GenreCreate, GenreResponse
from ...models.common import MessageResponse, ErrorResponse
from ...services.genre_service import GenreService
from ..deps import get_genre_service

router = APIRouter()

GENRE_EXAMPLE = GenreCreate.model_config["json_schema_extra"]["example"]

SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Internal Server Error"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Name field is required"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Not found"}}


@router.get("", response_model=List[GenreResponse], responses=SERVER_ERROR)
async def get_all_genres(service: GenreService = Depends(get_genre_service)):
    """
    Get all genres
    """
    return await service.list_genres()


@router.post(
    "",
    status_code=201,
    response_model=GenreResponse,
    responses={**BAD_REQUEST, **SERVER_ERROR},
)
async def create_genre(
    payload: Any = Body(None, examples=[GENRE_EXAMPLE]),
    service: GenreService = Depends(get_genre_service),
):
    """
    Add a new genre
    """
    return await service.create_genre(payload)


@router.put(
    "/{genre_id}",
    response_model=GenreResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
)
async def update_genre(
    genre_id: str = Path(..., description="ID of the genre to be updated"),
    payload: Any = Body(None, examples=[GENRE_EXAMPLE]),
    service: GenreService = Depends(get_genre_service),
):
    """
    Update a genre by ID
    """
    return await service.update_genre(genre_id, payload)


@router.delete(
    "/{genre_id}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
)
async def delete_genre(
    genre_id: str = Path(..., description="ID of the genre to be deleted"),
    service: GenreService = Depends(get_genre_service),
):
    """
    Delete a genre by ID
    """
    return await service.delete_genre(genre_id)
