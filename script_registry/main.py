import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from script_registry import __version__
from script_registry.api import create_api_router
from script_registry.core.config import Settings, get_settings
from script_registry.core.container import ApplicationContainer
from script_registry.core.logging import configure_logging
from script_registry.modules.common.exceptions import StoreError, StoreTimeoutError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    await container.startup()
    logger.info("Script registry started (environment=%s)", container.settings.environment)
    yield
    await container.shutdown()


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())[1:]) or "body"
        message = f"Invalid value for {field}: {first.get('msg', 'invalid')}"
    else:
        message = "Invalid request"
    logger.info("Rejected request on %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def _store_timeout_handler(request: Request, exc: StoreTimeoutError) -> JSONResponse:
    logger.error("Store timeout on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_504_GATEWAY_TIMEOUT, content={"error": "Store operation timed out"})


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Internal store error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Shell automation scripts and the customers they apply to",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = ApplicationContainer.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StoreTimeoutError, _store_timeout_handler)
    app.add_exception_handler(StoreError, _store_error_handler)
    app.include_router(create_api_router(settings.api_prefix))
    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "script_registry.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
