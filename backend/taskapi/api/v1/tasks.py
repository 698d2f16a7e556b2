import re
from typing import List

import structlog
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from ...core.errors import (
    EmptyIdError,
    InvalidIdError,
    InvalidPayloadError,
    TaskAPIError,
    TaskNotFoundError,
    ValidationError,
)
from ...core.ports import TaskOperations
from ...db.models import INT64_MAX, INT64_MIN
from ...schemas.tasks import TaskIn, TaskOut

logger = structlog.get_logger(__name__)

router = APIRouter()

_ID_RE = re.compile(r"[+-]?[0-9]+")


def get_task_service(request: Request) -> TaskOperations:
    return request.app.state.task_service


def parse_id(raw: str) -> int:
    if raw == "":
        raise EmptyIdError()
    if not _ID_RE.fullmatch(raw):
        raise InvalidIdError()
    task_id = int(raw)
    if not INT64_MIN <= task_id <= INT64_MAX:
        raise InvalidIdError()
    return task_id


def status_for(exc: TaskAPIError) -> int:
    if isinstance(exc, TaskNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (ValidationError, InvalidPayloadError)):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(exc: TaskAPIError) -> PlainTextResponse:
    code = status_for(exc)
    if code >= 500:
        logger.warning("request failed", error=str(exc), error_type=type(exc).__name__)
    return PlainTextResponse(f"{exc}\n", status_code=code)


@router.post("/tasks", status_code=status.HTTP_201_CREATED)
def create(body: TaskIn, service: TaskOperations = Depends(get_task_service)):
    task = body.to_task()
    try:
        service.create_task(task)
    except TaskAPIError as e:
        return error_response(e)
    headers = {"Location": f"/tasks/{task.id}"} if task.id is not None else None
    return Response(status_code=status.HTTP_201_CREATED, headers=headers)


@router.get("/tasks/{task_id}", response_model=TaskOut)
def get(task_id: str, service: TaskOperations = Depends(get_task_service)):
    try:
        return service.get_task(parse_id(task_id))
    except TaskAPIError as e:
        return error_response(e)


@router.put("/tasks/{task_id}")
def update(task_id: str, body: TaskIn, service: TaskOperations = Depends(get_task_service)):
    try:
        task = body.to_task()
        task.id = parse_id(task_id)
        service.update_task(task)
    except TaskAPIError as e:
        return error_response(e)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove(task_id: str, service: TaskOperations = Depends(get_task_service)):
    try:
        service.delete_task(parse_id(task_id))
    except TaskAPIError as e:
        return error_response(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/tasks", response_model=List[TaskOut])
def list_all(service: TaskOperations = Depends(get_task_service)):
    try:
        return service.list_tasks()
    except TaskAPIError as e:
        return error_response(e)
