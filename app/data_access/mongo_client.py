from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from bson import ObjectId
from typing import List, Dict, Any, Optional
from datetime import datetime, timezone
from ..core.database import get_database
from ..core.config import settings
from loguru import logger

# Internal identifiers, version and bookkeeping fields never leave the store
PRIVATE_FIELDS = ("_id", "__v", "createdAt", "updatedAt")
PUBLIC_PROJECTION = {field: 0 for field in PRIVATE_FIELDS}


def to_public(document: Dict[str, Any]) -> Dict[str, Any]:
    """Drop identifier and bookkeeping fields from a document"""
    return {k: v for k, v in document.items() if k not in PRIVATE_FIELDS}


class BaseRepository:
    """
    Persistence capability for one MongoDB collection.

    Services receive a repository instead of reaching for the global client,
    so tests can hand them an in-memory fake with the same methods.
    """

    def __init__(self, collection_name: str):
        self.collection_name = collection_name

    async def get_collection(self) -> AsyncIOMotorCollection:
        """Get the MongoDB collection"""
        db = get_database()
        return db[self.collection_name]

    async def list(self, query: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Get all documents matching query, in store order"""
        try:
            collection = await self.get_collection()
            cursor = collection.find(query or {}, PUBLIC_PROJECTION)
            return await cursor.to_list(length=None)
        except Exception as e:
            logger.error(f"Error in {self.__class__.__name__}.list: {e}")
            raise

    async def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document and return its public fields"""
        try:
            collection = await self.get_collection()
            now = datetime.now(timezone.utc)
            stored = {**document, "createdAt": now, "updatedAt": now}
            result = await collection.insert_one(stored)
            logger.debug(f"Inserted {self.collection_name} document {result.inserted_id}")
            return to_public(stored)
        except Exception as e:
            logger.error(f"Error in {self.__class__.__name__}.create: {e}")
            raise

    async def update_by_id(self, document_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Replace fields of the document with the given id

        Returns:
            The updated public document, None if no document has this id
        """
        # A malformed id cannot match any document
        if not ObjectId.is_valid(document_id):
            return None
        try:
            collection = await self.get_collection()
            return await collection.find_one_and_update(
                {"_id": ObjectId(document_id)},
                {"$set": {**fields, "updatedAt": datetime.now(timezone.utc)}},
                projection=PUBLIC_PROJECTION,
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            logger.error(f"Error in {self.__class__.__name__}.update_by_id: {e}")
            raise

    async def delete_by_id(self, document_id: str) -> Optional[Dict[str, Any]]:
        """
        Remove the document with the given id

        Returns:
            The removed public document, None if no document has this id
        """
        if not ObjectId.is_valid(document_id):
            return None
        try:
            collection = await self.get_collection()
            return await collection.find_one_and_delete(
                {"_id": ObjectId(document_id)},
                projection=PUBLIC_PROJECTION,
            )
        except Exception as e:
            logger.error(f"Error in {self.__class__.__name__}.delete_by_id: {e}")
            raise

    async def find_by_field(self, field: str, value: Any) -> List[Dict[str, Any]]:
        """Get documents whose field equals value (any element, for array fields)"""
        return await self.list({field: value})


class GenreRepository(BaseRepository):
    """Repository for genre documents"""

    def __init__(self):
        super().__init__(settings.GENRES_COLLECTION)


class MovieRepository(BaseRepository):
    """Repository for movie documents"""

    def __init__(self):
        super().__init__(settings.MOVIES_COLLECTION)
