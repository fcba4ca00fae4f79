"""Connections to third-party services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymongo import AsyncMongoClient
from redis.asyncio import Redis
from redis.exceptions import RedisError


@dataclass
class MongoProvider:
    """A verified connection to one MongoDB database."""

    client: Any
    database: Any

    @classmethod
    async def connect(cls, url: str, database_name: str) -> MongoProvider:
        """Connect to ``url`` and ping ``database_name``; raises PyMongoError."""
        client: AsyncMongoClient = AsyncMongoClient(url)
        database = client[database_name]
        try:
            await database.command("ping")
        except BaseException:
            await client.close()
            raise
        return cls(client=client, database=database)


@dataclass
class RedisProvider:
    """A verified connection to a Redis server."""

    connection: Redis

    @classmethod
    async def connect(cls, url: str) -> RedisProvider:
        """Connect to ``url`` and ping the server; raises RedisError."""
        try:
            connection = Redis.from_url(url)
        except ValueError as exc:
            raise RedisError(str(exc)) from exc
        try:
            await connection.ping()
        except BaseException:
            await connection.aclose()
            raise
        return cls(connection=connection)