from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core import config, db
from core.logging_config import setup_logging
from motors import router as motors_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Config or connection failures abort startup; uvicorn exits.
    config.require_env_file()
    settings = config.database_settings()
    app.state.pool = await db.init_pool(settings)
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


async def _plain_http_error(_: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def _invalid_input(_: Request, exc: RequestValidationError) -> PlainTextResponse:
    logger.debug("Rejected request body: %s", exc.errors())
    return PlainTextResponse("Invalid input", status_code=status.HTTP_400_BAD_REQUEST)


def create_app() -> FastAPI:
    # Seeds LOG_LEVEL and CORS_ORIGIN; a missing file is reported by the lifespan.
    config.load_env_file()
    setup_logging(config.log_level())

    app = FastAPI(title="motor-registry", lifespan=lifespan)

    # Allow the local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.cors_origin()],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.add_exception_handler(StarletteHTTPException, _plain_http_error)
    app.add_exception_handler(RequestValidationError, _invalid_input)

    app.include_router(motors_router.router, tags=["motors"])

    return app


app = create_app()


def run() -> None:
    port = config.listen_port()
    logger.info("Server running on :%s", port)
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    run()
