from typing import List, Dict, Any
from loguru import logger
from ..core.exceptions import HttpError, NotFoundError, ServerError
from ..data_access.mongo_client import BaseRepository, GenreRepository
from ..models.genre import GenreResponse
from ..utils.validators import validate_genre


class GenreService:
    def __init__(self, genre_repo: BaseRepository = None):
        self.genre_repo = genre_repo or GenreRepository()

    async def list_genres(self) -> List[GenreResponse]:
        """
        Get all genres in store order; an empty collection gives an empty list
        """
        try:
            genres = await self.genre_repo.list()
            return [GenreResponse(**genre) for genre in genres]
        except Exception as e:
            logger.error(f"Error listing genres: {e}")
            raise ServerError() from e

    async def create_genre(self, payload: Any) -> GenreResponse:
        """
        Validate and store a new genre

        Raises:
            ValidationError: Before anything is stored
            ServerError: When the store fails
        """
        fields = validate_genre(payload)
        try:
            saved = await self.genre_repo.create(fields)
            logger.info(f"Created genre '{saved['name']}'")
            return GenreResponse(name=saved["name"])
        except Exception as e:
            logger.error(f"Error creating genre: {e}")
            raise ServerError() from e

    async def update_genre(self, genre_id: str, payload: Any) -> GenreResponse:
        """
        Validate and apply a new name to an existing genre

        Raises:
            ValidationError: Before anything is stored
            NotFoundError: When no genre has this id
            ServerError: When the store fails
        """
        fields = validate_genre(payload)
        try:
            updated = await self.genre_repo.update_by_id(genre_id, fields)
            if updated is None:
                raise NotFoundError()
            return GenreResponse(**updated)
        except HttpError:
            raise
        except Exception as e:
            logger.error(f"Error updating genre {genre_id}: {e}")
            raise ServerError() from e

    async def delete_genre(self, genre_id: str) -> Dict[str, str]:
        try:
            deleted = await self.genre_repo.delete_by_id(genre_id)
            if deleted is None:
                raise NotFoundError()
            logger.info(f"Deleted genre {genre_id}")
            return {"message": "Genre deleted successfully"}
        except HttpError:
            raise
        except Exception as e:
            logger.error(f"Error deleting genre {genre_id}: {e}")
            raise ServerError() from e
