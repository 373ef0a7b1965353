import pytest
from httpx import AsyncClient, ASGITransport
from bson import ObjectId
from copy import deepcopy
from app.main import app
from app.api.deps import get_genre_service, get_movie_service
from app.data_access.mongo_client import to_public
from app.services.genre_service import GenreService
from app.services.movie_service import MovieService


class InMemoryRepository:
    """Stand-in for BaseRepository that keeps documents in a dict"""

    def __init__(self):
        self.documents = {}
        self.calls = []

    def _matches(self, document, query):
        for field, value in (query or {}).items():
            stored = document.get(field)
            # MongoDB matches a scalar against any element of an array field
            if isinstance(stored, list) and not isinstance(value, list):
                if value not in stored:
                    return False
            elif stored != value:
                return False
        return True

    def insert(self, document):
        """Seed a document directly and return its id"""
        document_id = str(ObjectId())
        self.documents[document_id] = {"_id": ObjectId(document_id), "__v": 0, **deepcopy(document)}
        return document_id

    async def list(self, query=None):
        self.calls.append("list")
        return [to_public(doc) for doc in self.documents.values() if self._matches(doc, query)]

    async def create(self, document):
        self.calls.append("create")
        document_id = self.insert(document)
        return to_public(self.documents[document_id])

    async def update_by_id(self, document_id, fields):
        self.calls.append("update_by_id")
        if document_id not in self.documents:
            return None
        self.documents[document_id].update(deepcopy(fields))
        return to_public(self.documents[document_id])

    async def delete_by_id(self, document_id):
        self.calls.append("delete_by_id")
        document = self.documents.pop(document_id, None)
        return to_public(document) if document else None

    async def find_by_field(self, field, value):
        self.calls.append("find_by_field")
        return await self.list({field: value})


@pytest.fixture
def genre_repo():
    return InMemoryRepository()


@pytest.fixture
def movie_repo():
    return InMemoryRepository()


@pytest.fixture
def override_services(genre_repo, movie_repo):
    """Point the API at services backed by the in-memory repositories"""
    app.dependency_overrides[get_genre_service] = lambda: GenreService(genre_repo)
    app.dependency_overrides[get_movie_service] = lambda: MovieService(movie_repo)
    yield
    app.dependency_overrides.pop(get_genre_service)
    app.dependency_overrides.pop(get_movie_service)


# Test client
@pytest.fixture
async def test_client(override_services):
    """Return an AsyncClient for testing the API."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
