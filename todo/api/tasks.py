from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel
from typing import List, Optional

from todo.dependencies import get_task_service
from todo.models.task import (
    Task,
    TaskAttributes,
    TaskAttributesInsert,
    TaskAttributesPatch,
    TaskId,
    TaskStatus,
    format_task_id,
    format_task_status,
    parse_task_id,
    parse_task_status,
)
from todo.services.task_service import NoEntityError, TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


# Request/Response models
class TaskCreateRequest(BaseModel):
    details: Optional[str] = None


class TaskUpdateRequest(BaseModel):
    details: Optional[str] = None
    status: Optional[str] = None


class TaskPatchRequest(BaseModel):
    details: Optional[str] = None
    status: Optional[str] = None


class TaskResponse(BaseModel):
    id: str
    details: Optional[str] = None
    status: str


class TaskAttributesResponse(BaseModel):
    details: Optional[str] = None
    status: str


class TaskIdResponse(BaseModel):
    id: str


# CRUD Endpoints
@router.get("", response_model=List[TaskResponse])
async def retrieve_all(service: TaskService = Depends(get_task_service)):
    """List all tasks"""
    tasks = await service.select_all()

    return [to_task_response(task) for task in tasks]


@router.get("/{task_id}", response_model=TaskAttributesResponse)
async def retrieve_by_id(task_id: str, service: TaskService = Depends(get_task_service)):
    """Get the attributes of a single task"""
    parsed_id = to_task_id(task_id)

    task = await service.select(parsed_id)

    if task is None:
        raise NoEntityError(parsed_id)

    return to_task_attributes_response(task)


@router.post("", response_model=TaskIdResponse, status_code=201)
async def create(request: TaskCreateRequest, service: TaskService = Depends(get_task_service)):
    """Create a new task; it always starts out active"""
    attributes = to_task_attributes_insert(request)

    created_id = await service.insert(attributes)

    return to_task_id_response(created_id)


@router.put("/{task_id}", response_model=TaskAttributesResponse)
async def update(
    task_id: str,
    request: TaskUpdateRequest,
    service: TaskService = Depends(get_task_service),
):
    """Replace the attributes of a task"""
    parsed_id = to_task_id(task_id)
    attributes = to_task_attributes(request)

    updated_task = await service.update(parsed_id, attributes)

    return to_task_attributes_response(updated_task)


@router.patch("/{task_id}", response_model=TaskAttributesResponse)
async def patch(
    task_id: str,
    request: TaskPatchRequest,
    service: TaskService = Depends(get_task_service),
):
    """Update only the supplied attributes of a task"""
    parsed_id = to_task_id(task_id)
    attributes = to_task_attributes_patch(request)

    updated_task = await service.patch(parsed_id, attributes)

    return to_task_attributes_response(updated_task)


@router.delete("/{task_id}", response_class=Response)
async def delete(task_id: str, service: TaskService = Depends(get_task_service)):
    """Delete a task"""
    parsed_id = to_task_id(task_id)

    await service.delete(parsed_id)

    return Response(status_code=200)


# Mapping between wire shapes and domain shapes
def to_task_id(task_id: str) -> TaskId:
    return parse_task_id(task_id)


def to_task_attributes_insert(request: TaskCreateRequest) -> TaskAttributesInsert:
    # Status is never taken from the client
    return TaskAttributesInsert(details=request.details, status=TaskStatus.ACTIVE)


def to_task_attributes(request: TaskUpdateRequest) -> TaskAttributes:
    # An unrecognised status parses to None: no status change
    return TaskAttributes(
        details=request.details,
        status=parse_task_status(request.status),
    )


def to_task_attributes_patch(request: TaskPatchRequest) -> TaskAttributesPatch:
    # An unrecognised status parses to None: no status change
    return TaskAttributesPatch(
        details=request.details,
        status=parse_task_status(request.status),
    )


def to_task_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=format_task_id(task.id),
        details=task.details,
        status=format_task_status(task.status),
    )


def to_task_attributes_response(task: Task) -> TaskAttributesResponse:
    return TaskAttributesResponse(
        details=task.details,
        status=format_task_status(task.status),
    )


def to_task_id_response(task_id: TaskId) -> TaskIdResponse:
    return TaskIdResponse(id=format_task_id(task_id))
