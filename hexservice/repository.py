"""MongoDB storage for example records."""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pymongo import DESCENDING, IndexModel
from pymongo.errors import PyMongoError

from .entities import Example
from .ports import ExampleRepo, RepositoryError

logger = logging.getLogger(__name__)

COLLECTION_NAME = "examples"


class MongoExampleRepository(ExampleRepo):
    """Example repository backed by a MongoDB collection."""

    def __init__(self, collection: Any) -> None:
        self.collection = collection

    def __repr__(self) -> str:
        return f"MongoExampleRepository(collection={self.collection!r})"

    @classmethod
    async def create(cls, database: Any) -> MongoExampleRepository:
        """Open the examples collection of ``database`` and ensure its indexes."""
        repo = cls(database[COLLECTION_NAME])
        await repo.create_indexes()
        return repo

    async def create_indexes(self) -> None:
        """Create the descending timestamp indexes."""
        indexes = [
            IndexModel([("created_at", DESCENDING)], name="created_at_idx"),
            IndexModel([("updated_at", DESCENDING)], name="updated_at_idx"),
        ]
        try:
            await self.collection.create_indexes(indexes)
        except PyMongoError as exc:
            raise RepositoryError(f"Failed to create indexes: {exc}") from exc

    async def all(self) -> list[Example]:
        """Return every stored example."""
        logger.debug("loading all examples")
        try:
            cursor = self.collection.find({})
        except PyMongoError as exc:
            raise RepositoryError(f"Failed to get events: {exc}") from exc
        try:
            documents = [document async for document in cursor]
        except PyMongoError as exc:
            raise RepositoryError(str(exc)) from exc
        try:
            return [Example.from_document(document) for document in documents]
        except ValueError as exc:
            raise RepositoryError(str(exc)) from exc

    async def insert(self, example: Example) -> Example:
        """Store a copy of ``example`` with a fresh id and timestamps."""
        now = datetime.now(timezone.utc)
        stored = dataclasses.replace(
            example, id=ObjectId(), created_at=now, updated_at=now
        )
        logger.debug("inserting example %s", stored.name)
        try:
            result = await self.collection.insert_one(stored.to_document())
        except PyMongoError as exc:
            raise RepositoryError(str(exc)) from exc
        inserted_id = result.inserted_id
        if not isinstance(inserted_id, ObjectId):
            raise RepositoryError(f"inserted id {inserted_id!r} is not an ObjectId")
        stored.id = inserted_id
        return stored