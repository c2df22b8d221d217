import sys
from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from app.api import ping, status
from app.core.container import Container
from app.core.exceptions import CanaryException, canary_exception_handler
from app.core.logging import configure_logging
from app.core.middleware import AccessLogMiddleware
from app.core.settings import Settings

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.container.settings()
    store = app.container.ping_store()
    logger.info("canary.started", capacity=store.capacity, ip=settings.IP, port=settings.PORT)

    yield

    logger.info("canary.stopped", pings=len(store))


def create_app(container: Optional[Container] = None) -> FastAPI:
    app = FastAPI(
        title="presence canary",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    container = container or Container()
    app.container = container
    container.wire(modules=[ping, status])

    app.add_exception_handler(CanaryException, canary_exception_handler)
    app.add_middleware(AccessLogMiddleware)

    # GET и POST ловят любой путь, так что порядок роутеров не важен
    app.include_router(status.router)
    app.include_router(ping.router)
    return app


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        invalid = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        logger.error("canary.config_invalid", fields=invalid)
        message = f"Invalid configuration: {', '.join(invalid)}"
        if "OPERATOR_TOKEN" in invalid:
            message += " (is OPERATOR_TOKEN defined?)"
        sys.exit(message)


def run() -> None:
    settings = load_settings()
    configure_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)

    container = Container()
    container.settings.override(settings)
    app = create_app(container)

    print(f"Listening at http://{settings.IP}:{settings.PORT} ...", flush=True)
    uvicorn.run(app, host=settings.IP, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
