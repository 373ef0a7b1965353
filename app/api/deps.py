from ..services.genre_service import GenreService
from ..services.movie_service import MovieService


def get_genre_service() -> GenreService:
    """
    Dependency for getting the genre service
    """
    return GenreService()


def get_movie_service() -> MovieService:
    """
    Dependency for getting the movie service
    """
    return MovieService()
