"""
Users API — CRUD over a single user entity.

create_app() assembles the FastAPI application: logging, tracing
middleware, error handlers and routers. ``app`` is built at import time
so uvicorn can discover it, e.g.::

    uvicorn users_api.main:app
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from .config import APP_VERSION
from .database import create_tables
from .exceptions import UsersApiError
from .logging_config import setup_logging
from .middleware import request_id_middleware, request_logging_middleware
from .routers import users


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    logger.info("tables_ready")
    yield


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(title="Users API", version=APP_VERSION, lifespan=lifespan)

    # Last added runs first: the request id must exist before the logger reads it
    app.middleware("http")(request_logging_middleware)
    app.middleware("http")(request_id_middleware)

    @app.exception_handler(UsersApiError)
    async def users_api_error_handler(request: Request, exc: UsersApiError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    app.include_router(users.router)

    @app.get("/health")
    def health():
        return {"status": "ok", "version": APP_VERSION}

    return app


app = create_app()
