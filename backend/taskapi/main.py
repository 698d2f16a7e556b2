from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import Engine

from .api.v1 import health, tasks
from .core.config import Settings, get_settings
from .core.errors import InvalidPayloadError
from .core.logging_setup import configure_logging
from .db.repository import TaskRepository
from .db.session import connect, init_db
from .services.tasks import TaskService

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    if engine is None:
        engine = connect(settings)
    init_db(engine)

    app = FastAPI(title=settings.APP_NAME)
    app.state.task_service = TaskService(TaskRepository(engine))
    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(tasks.router, prefix=settings.API_PREFIX)

    @app.exception_handler(RequestValidationError)
    async def invalid_payload(_: Request, exc: RequestValidationError) -> PlainTextResponse:
        logger.info("payload rejected", errors=len(exc.errors()))
        return PlainTextResponse(f"{InvalidPayloadError()}\n", status_code=400)

    @app.exception_handler(Exception)
    async def unhandled(_: Request, exc: Exception) -> PlainTextResponse:
        logger.exception("unhandled exception", error=str(exc))
        return PlainTextResponse("internal server error\n", status_code=500)

    return app


def serve() -> None:
    settings = get_settings()
    uvicorn.run("taskapi.main:create_app", factory=True, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    serve()
