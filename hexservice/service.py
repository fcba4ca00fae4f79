"""Application service for example records."""

from __future__ import annotations

import logging
import random
from http import HTTPStatus

from .entities import Example
from .errors import HttpError
from .ports import ExampleRepo, RepositoryError

logger = logging.getLogger(__name__)


class ExampleService:
    """Use cases over the example repository."""

    def __init__(self, repo: ExampleRepo) -> None:
        self.repo = repo

    def __repr__(self) -> str:
        return f"ExampleService(repo={self.repo!r})"

    async def get_examples(self) -> list[Example]:
        """Return every stored example."""
        logger.debug("listing examples")
        try:
            return await self.repo.all()
        except RepositoryError as exc:
            raise HttpError(HTTPStatus.BAD_GATEWAY, str(exc)) from exc

    async def add_random_example(self) -> Example:
        """Store a new example with a random name."""
        example = Example(name=f"example-{random.getrandbits(32)}")
        logger.debug("adding example %s", example.name)
        try:
            return await self.repo.insert(example)
        except RepositoryError as exc:
            raise HttpError(HTTPStatus.BAD_GATEWAY, str(exc)) from exc