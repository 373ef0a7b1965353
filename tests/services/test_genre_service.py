import pytest
from unittest.mock import AsyncMock
from app.core.exceptions import NotFoundError, ServerError, ValidationError
from app.services.genre_service import GenreService


@pytest.fixture
def genre_service():
    # Create a service with a mocked repository
    return GenreService(genre_repo=AsyncMock())


@pytest.mark.asyncio
async def test_list_genres(genre_service):
    genre_service.genre_repo.list.return_value = [{"name": "Action"}, {"name": "Drama"}]

    result = await genre_service.list_genres()

    assert [genre.name for genre in result] == ["Action", "Drama"]


@pytest.mark.asyncio
async def test_list_genres_empty(genre_service):
    genre_service.genre_repo.list.return_value = []
    assert await genre_service.list_genres() == []


@pytest.mark.asyncio
async def test_list_genres_store_failure(genre_service):
    genre_service.genre_repo.list.side_effect = ConnectionError("connection refused")

    with pytest.raises(ServerError):
        await genre_service.list_genres()


@pytest.mark.asyncio
async def test_create_genre(genre_service):
    genre_service.genre_repo.create.return_value = {"name": "Comedy"}

    result = await genre_service.create_genre({"name": "Comedy"})

    assert result.name == "Comedy"
    genre_service.genre_repo.create.assert_called_once_with({"name": "Comedy"})


@pytest.mark.asyncio
async def test_create_genre_invalid_payload_skips_store(genre_service):
    with pytest.raises(ValidationError) as exc_info:
        await genre_service.create_genre({"name": " "})

    assert exc_info.value.code == 400
    genre_service.genre_repo.create.assert_not_called()


@pytest.mark.asyncio
async def test_update_genre(genre_service):
    genre_service.genre_repo.update_by_id.return_value = {"name": "Updated Genre"}

    result = await genre_service.update_genre("genreId", {"name": "Updated Genre"})

    assert result.name == "Updated Genre"
    genre_service.genre_repo.update_by_id.assert_called_once_with("genreId", {"name": "Updated Genre"})


@pytest.mark.asyncio
async def test_update_genre_not_found(genre_service):
    genre_service.genre_repo.update_by_id.return_value = None

    with pytest.raises(NotFoundError):
        await genre_service.update_genre("missing", {"name": "Drama"})


@pytest.mark.asyncio
async def test_update_genre_invalid_payload_skips_store(genre_service):
    with pytest.raises(ValidationError):
        await genre_service.update_genre("genreId", {})

    genre_service.genre_repo.update_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_delete_genre(genre_service):
    genre_service.genre_repo.delete_by_id.return_value = {"name": "Drama"}

    result = await genre_service.delete_genre("genreId")

    assert result == {"message": "Genre deleted successfully"}


@pytest.mark.asyncio
async def test_delete_genre_not_found(genre_service):
    genre_service.genre_repo.delete_by_id.return_value = None

    with pytest.raises(NotFoundError):
        await genre_service.delete_genre("missing")


@pytest.mark.asyncio
async def test_delete_genre_store_failure(genre_service):
    genre_service.genre_repo.delete_by_id.side_effect = RuntimeError("boom")

    with pytest.raises(ServerError) as exc_info:
        await genre_service.delete_genre("genreId")

    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_delete_genre_with_empty_public_document(genre_service):
    genre_service.genre_repo.delete_by_id.return_value = {}

    assert await genre_service.delete_genre("genreId") == {"message": "Genre deleted successfully"}
