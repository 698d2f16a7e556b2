from typing import List

import structlog

from ..core.errors import (
    EmptyStatusError,
    EmptyTitleError,
    InvalidIdError,
    InvalidStatusError,
    TaskNotFoundError,
)
from ..core.ports import TaskRepo
from ..db.models import VALID_STATUSES, Task

logger = structlog.get_logger(__name__)


def validate_status(status: str) -> None:
    if status not in VALID_STATUSES:
        raise InvalidStatusError()


def validate_task(task: Task) -> None:
    # order matters: title, then empty status, then unknown status
    if not task.title:
        raise EmptyTitleError()
    if not task.status:
        raise EmptyStatusError()
    validate_status(task.status)


def validate_id(task_id: int) -> None:
    if task_id < 0:
        raise InvalidIdError()


class TaskService:
    """Business rules in front of a TaskRepo.

    Validation failures are raised before the repository is touched; an
    absent row from the repository becomes TaskNotFoundError here.
    """

    def __init__(self, repo: TaskRepo) -> None:
        self.repo = repo

    def create_task(self, task: Task) -> None:
        self._check(task, "create")
        self.repo.create_task(task)

    def update_task(self, task: Task) -> None:
        self._check(task, "update")
        self.repo.update_task(task)

    def delete_task(self, task_id: int) -> None:
        validate_id(task_id)
        self.repo.delete_task(task_id)

    def get_task(self, task_id: int) -> Task:
        validate_id(task_id)
        task = self.repo.get_task(task_id)
        if task is None:
            raise TaskNotFoundError()
        return task

    def list_tasks(self) -> List[Task]:
        tasks = self.repo.list_tasks()
        if tasks is None:
            return []
        return tasks

    def _check(self, task: Task, op: str) -> None:
        try:
            validate_task(task)
        except (EmptyTitleError, EmptyStatusError, InvalidStatusError) as exc:
            logger.info("task rejected", op=op, task_id=task.id, reason=str(exc))
            raise
