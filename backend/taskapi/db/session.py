from typing import Union

import structlog
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, text

from ..core.config import Settings
from ..core.errors import StorageError

logger = structlog.get_logger(__name__)


def make_engine(url: Union[str, URL], echo: bool = False) -> Engine:
    url = make_url(url)
    kwargs: dict = {"echo": echo}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # one shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def ping(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def connect(settings: Settings) -> Engine:
    engine = make_engine(settings.sqlalchemy_url(), echo=settings.DB_ECHO)
    try:
        ping(engine)
    except SQLAlchemyError as exc:
        engine.dispose()
        raise StorageError(f"could not ping the database: {exc}") from exc
    logger.info("database ready", backend=engine.url.get_backend_name(), database=engine.url.database)
    return engine


def init_db(engine: Engine) -> None:
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(engine)
