"""
Ports used by the request pipeline.

Each layer depends on the Protocol of the layer below, so tests can swap
the SQL repository (or the whole service) for an in-memory fake.
"""

from typing import List, Optional, Protocol

from ..db.models import Task


class TaskRepo(Protocol):
    """Storage contract. A missing row is ``None``, never an error."""

    def create_task(self, task: Task) -> None: ...

    def get_task(self, task_id: int) -> Optional[Task]: ...

    def update_task(self, task: Task) -> None: ...

    def delete_task(self, task_id: int) -> None: ...

    def list_tasks(self) -> List[Task]: ...


class TaskOperations(Protocol):
    """Business contract consumed by the HTTP handlers."""

    def create_task(self, task: Task) -> None: ...

    def get_task(self, task_id: int) -> Task: ...

    def update_task(self, task: Task) -> None: ...

    def delete_task(self, task_id: int) -> None: ...

    def list_tasks(self) -> List[Task]: ...
