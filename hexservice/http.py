"""HTTP routes, handlers and server."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .dto import ExampleDto
from .errors import HttpError
from .service import ExampleService

logger = logging.getLogger(__name__)

EXAMPLE_PREFIX = "/api/v1/example"
HOST = "0.0.0.0"


@dataclass(frozen=True)
class AppContext:
    """Services shared by all request handlers."""

    example_service: ExampleService


def create_app(context: AppContext) -> FastAPI:
    """Build the application with its routes, CORS policy and error handling."""
    app = FastAPI()
    app.state.context = context
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    @app.exception_handler(HttpError)
    async def _http_error(request: Request, exc: HttpError) -> JSONResponse:
        return JSONResponse(status_code=int(exc.status), content=exc.body())

    @app.get(EXAMPLE_PREFIX)
    async def get_examples() -> JSONResponse:
        examples = await context.example_service.get_examples()
        return JSONResponse(
            [ExampleDto.from_example(example).to_dict() for example in examples]
        )

    @app.post(f"{EXAMPLE_PREFIX}/random")
    async def add_random_example() -> JSONResponse:
        example = await context.example_service.add_random_example()
        return JSONResponse(ExampleDto.from_example(example).to_dict())

    return app


class HttpProvider:
    """Serves an application on all interfaces at a given port."""

    def __init__(self, port: int, app: FastAPI) -> None:
        self.port = port
        self.app = app
        self.addr = f"{HOST}:{port}"
        self._server = uvicorn.Server(
            uvicorn.Config(app, host=HOST, port=port, log_config=None)
        )

    async def run(self) -> None:
        """Serve requests until the server is stopped."""
        logger.info("Listening on %s", self.addr)
        await self._server.serve()