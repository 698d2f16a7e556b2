# tests/test_service.py

from __future__ import annotations

import pytest

from taskapi.core.errors import (
    EmptyStatusError,
    EmptyTitleError,
    InvalidIdError,
    InvalidStatusError,
    StorageError,
    TaskNotFoundError,
)
from taskapi.db.models import Task, TaskStatus


@pytest.mark.parametrize("op", ["create_task", "update_task"])
@pytest.mark.parametrize(
    "fields, error",
    [
        ({"title": "", "status": "Pending"}, EmptyTitleError),
        ({"title": "", "status": ""}, EmptyTitleError),
        ({"title": "", "status": "bogus"}, EmptyTitleError),
        ({"title": "t", "status": ""}, EmptyStatusError),
        ({"title": "t", "status": "Done"}, InvalidStatusError),
        ({"title": "t", "status": "pending"}, InvalidStatusError),
    ],
)
def test_validation_precedence(service, fake_repo, op, fields, error) -> None:
    with pytest.raises(error):
        getattr(service, op)(Task(id=1, **fields))
    assert fake_repo.calls == []


@pytest.mark.parametrize("status", [s.value for s in TaskStatus])
def test_create_accepts_every_known_status(service, fake_repo, status) -> None:
    task = Task(title="t", status=status)
    service.create_task(task)
    assert fake_repo.calls == [("create", task)]


def test_update_does_not_check_existence(service, fake_repo) -> None:
    task = Task(id=0, title="t", status="InProgress")
    service.update_task(task)
    assert fake_repo.calls == [("update", task)]


@pytest.mark.parametrize("op", ["get_task", "delete_task"])
@pytest.mark.parametrize("task_id", [-1, -999999])
def test_negative_id_rejected_before_storage(service, fake_repo, op, task_id) -> None:
    with pytest.raises(InvalidIdError):
        getattr(service, op)(task_id)
    assert fake_repo.calls == []


def test_delete_passes_zero_id_through(service, fake_repo) -> None:
    service.delete_task(0)
    assert fake_repo.calls == [("delete", 0)]


def test_get_missing_becomes_not_found(service) -> None:
    with pytest.raises(TaskNotFoundError):
        service.get_task(42)


def test_get_returns_task(service, fake_repo) -> None:
    task = Task(title="t", status="Pending")
    service.create_task(task)
    assert service.get_task(task.id) is task


def test_get_propagates_storage_error(service, fake_repo, monkeypatch) -> None:
    def boom(_):
        raise StorageError("connection refused")

    monkeypatch.setattr(fake_repo, "get_task", boom)
    with pytest.raises(StorageError, match="connection refused"):
        service.get_task(1)


def test_list_normalizes_none_to_empty(service, fake_repo) -> None:
    fake_repo.list_result = None
    assert service.list_tasks() == []


def test_list_returns_repo_rows(service, fake_repo) -> None:
    service.create_task(Task(title="a", status="Pending"))
    service.create_task(Task(title="b", status="Completed"))
    assert [t.title for t in service.list_tasks()] == ["a", "b"]
