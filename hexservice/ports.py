"""Interfaces the domain expects from storage."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .entities import Example


class RepositoryError(Exception):
    """Raised when a repository cannot complete an operation."""


class ExampleRepo(ABC):
    """Storage for example records."""

    @abstractmethod
    async def all(self) -> list[Example]:
        """Return every stored example."""

    @abstractmethod
    async def insert(self, example: Example) -> Example:
        """Store an example and return it as stored."""