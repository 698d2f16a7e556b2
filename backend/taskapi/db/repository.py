from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, List, Optional

import structlog
from sqlalchemy import delete, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.errors import StorageError
from .models import Task

logger = structlog.get_logger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskRepository:
    """SQL-backed task storage over the ``tasks`` table.

    The engine is shared by the whole process; each call opens its own short
    session and runs a single statement. Driver faults surface as StorageError.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @contextmanager
    def _session(self, op: str) -> Iterator[Session]:
        try:
            with Session(self.engine) as session:
                yield session
        except SQLAlchemyError as exc:
            logger.error("storage fault", op=op, error=str(exc))
            raise StorageError(str(exc)) from exc

    def create_task(self, task: Task) -> None:
        task.id = None
        task.created_at = utcnow()
        task.updated_at = task.created_at
        with self._session("create") as session:
            session.add(task)
            session.commit()
            session.refresh(task)

    def get_task(self, task_id: int) -> Optional[Task]:
        with self._session("get") as session:
            return session.get(Task, task_id)

    def update_task(self, task: Task) -> None:
        task.updated_at = utcnow()
        values = {
            "title": task.title,
            "description": task.description,
            "status": task.status,
            "updated_at": task.updated_at,
        }
        # an omitted created_at keeps the stored one
        if task.created_at is not None:
            values["created_at"] = task.created_at
        stmt = update(Task).where(Task.id == task.id).values(**values)
        with self._session("update") as session:
            session.exec(stmt)
            session.commit()

    def delete_task(self, task_id: int) -> None:
        with self._session("delete") as session:
            session.exec(delete(Task).where(Task.id == task_id))
            session.commit()

    def list_tasks(self) -> List[Task]:
        with self._session("list") as session:
            return list(session.exec(select(Task)).all())
