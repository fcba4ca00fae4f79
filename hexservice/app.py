"""Service entry point: wires dependencies and serves HTTP."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from pymongo.errors import PyMongoError

from . import envs
from .envs import ConfigError, EnvConfig
from .http import AppContext, HttpProvider, create_app
from .logs import init_logger
from .ports import RepositoryError
from .providers import MongoProvider
from .repository import MongoExampleRepository
from .service import ExampleService

logger = logging.getLogger(__name__)


async def build_context(config: EnvConfig) -> AppContext:
    """Connect to the database and assemble the application services."""
    mongo = await MongoProvider.connect(config.mongo_uri, config.mongo_db)
    repo = await MongoExampleRepository.create(mongo.database)
    return AppContext(example_service=ExampleService(repo))


async def _serve(config: EnvConfig) -> None:
    context = await build_context(config)
    server = HttpProvider(config.port, create_app(context))
    await server.run()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the service until it stops; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="hexservice", description="Serve the example HTTP API."
    )
    parser.parse_args(argv)

    try:
        config = envs.get()
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    init_logger(config.project_id)

    try:
        asyncio.run(_serve(config))
    except (PyMongoError, RepositoryError) as exc:
        logger.error("service stopped: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())