from typing import List, Dict, Any
from loguru import logger
from ..core.exceptions import HttpError, NotFoundError, ServerError
from ..data_access.mongo_client import BaseRepository, MovieRepository
from ..models.movie import MovieResponse
from ..utils.validators import validate_movie


class MovieService:
    def __init__(self, movie_repo: BaseRepository = None):
        self.movie_repo = movie_repo or MovieRepository()

    async def list_movies(self) -> List[MovieResponse]:
        """
        Get all movies in store order; an empty collection gives an empty list
        """
        try:
            movies = await self.movie_repo.list()
            return [MovieResponse(**movie) for movie in movies]
        except Exception as e:
            logger.error(f"Error listing movies: {e}")
            raise ServerError() from e

    async def list_movies_by_genre(self, genre_name: str) -> List[MovieResponse]:
        """
        Get movies tagged with exactly this genre name

        Args:
            genre_name: Genre to match against each movie's genre list

        Returns:
            Matching movies, possibly none
        """
        try:
            movies = await self.movie_repo.find_by_field("genre", genre_name)
            return [MovieResponse(**movie) for movie in movies]
        except Exception as e:
            logger.error(f"Error listing movies for genre '{genre_name}': {e}")
            raise ServerError() from e

    async def create_movie(self, payload: Any) -> MovieResponse:
        """
        Validate and store a new movie

        Args:
            payload: Raw request body

        Returns:
            The stored movie's public fields

        Raises:
            ValidationError: Before anything is stored
            ServerError: When the store fails
        """
        fields = validate_movie(payload)
        try:
            saved = await self.movie_repo.create(fields)
            logger.info(f"Created movie '{saved['title']}'")
            return MovieResponse(
                title=saved["title"],
                description=saved["description"],
                releaseDate=saved["releaseDate"],
                genre=saved["genre"],
            )
        except Exception as e:
            logger.error(f"Error creating movie: {e}")
            raise ServerError() from e

    async def update_movie(self, movie_id: str, payload: Any) -> MovieResponse:
        """
        Validate and replace the fields of an existing movie

        Raises:
            ValidationError: Before anything is stored
            NotFoundError: When no movie has this id
            ServerError: When the store fails
        """
        fields = validate_movie(payload)
        try:
            updated = await self.movie_repo.update_by_id(movie_id, fields)
            if updated is None:
                raise NotFoundError()
            return MovieResponse(**updated)
        except HttpError:
            raise
        except Exception as e:
            logger.error(f"Error updating movie {movie_id}: {e}")
            raise ServerError() from e

    async def delete_movie(self, movie_id: str) -> Dict[str, str]:
        try:
            deleted = await self.movie_repo.delete_by_id(movie_id)
            if deleted is None:
                raise NotFoundError()
            logger.info(f"Deleted movie {movie_id}")
            return {"message": "Movie deleted successfully"}
        except HttpError:
            raise
        except Exception as e:
            logger.error(f"Error deleting movie {movie_id}: {e}")
            raise ServerError() from e
