from fastapi import APIRouter, Body, Depends, Path
from typing import Any, List
from ...models.movie import MovieCreate, MovieResponse
from ...models.common import MessageResponse, ErrorResponse
from ...services.movie_service import MovieService
from ..deps import get_movie_service

router = APIRouter()

MOVIE_EXAMPLE = MovieCreate.model_config["json_schema_extra"]["example"]

SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Internal Server Error"}}
INVALID_MOVIE = {
    400: {"model": ErrorResponse, "description": "Title field is required"},
    422: {"model": ErrorResponse, "description": "Invalid release date"},
}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Not found"}}


@router.get("", response_model=List[MovieResponse], responses=SERVER_ERROR)
async def get_all_movies(service: MovieService = Depends(get_movie_service)):
    """
    Get all movies
    """
    return await service.list_movies()


@router.post(
    "",
    status_code=201,
    response_model=MovieResponse,
    responses={**INVALID_MOVIE, **SERVER_ERROR},
)
async def create_movie(
    payload: Any = Body(None, examples=[MOVIE_EXAMPLE]),
    service: MovieService = Depends(get_movie_service),
):
    """
    Add a new movie
    """
    return await service.create_movie(payload)


@router.put(
    "/{movie_id}",
    response_model=MovieResponse,
    responses={**INVALID_MOVIE, **NOT_FOUND, **SERVER_ERROR},
)
async def update_movie(
    movie_id: str = Path(..., description="ID of the movie to be updated"),
    payload: Any = Body(None, examples=[MOVIE_EXAMPLE]),
    service: MovieService = Depends(get_movie_service),
):
    """
    Update a movie by ID
    """
    return await service.update_movie(movie_id, payload)


@router.delete(
    "/{movie_id}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
)
async def delete_movie(
    movie_id: str = Path(..., description="ID of the movie to be deleted"),
    service: MovieService = Depends(get_movie_service),
):
    """
    Delete a movie by ID
    """
    return await service.delete_movie(movie_id)


@router.get("/genre/{genre_name}", response_model=List[MovieResponse], responses=SERVER_ERROR)
async def get_movies_by_genre(
    genre_name: str = Path(..., description="The name of the genre to search for movies"),
    service: MovieService = Depends(get_movie_service),
):
    """
    Get movies by genre
    """
    return await service.list_movies_by_genre(genre_name)
