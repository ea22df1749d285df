"""Task domain model"""
import re
from enum import Enum
from typing import NewType, Optional
from uuid import UUID

from pydantic import BaseModel

TaskId = NewType("TaskId", UUID)

# 8-4-4-4-12 hex digits, either case
_TASK_ID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


class MalformedTaskIdError(ValueError):
    """Raised when a string is not a hyphenated UUID"""

    def __init__(self, value: str):
        super().__init__(f"Malformed task id: {value!r}")
        self.value = value


class TaskStatus(str, Enum):
    """Task lifecycle status; the wire form is the lowercase member name"""
    ACTIVE = "active"
    DONE = "done"


class TaskAttributes(BaseModel):
    """Full-replace attributes of a task.

    ``status`` is None when the client sent a status that did not parse,
    which means "leave the stored status as is".
    """
    details: Optional[str] = None
    status: Optional[TaskStatus] = None


class TaskAttributesInsert(BaseModel):
    """Attributes accepted at creation"""
    details: Optional[str] = None
    status: TaskStatus = TaskStatus.ACTIVE


class TaskAttributesPatch(BaseModel):
    """Partial update - None fields are left unchanged"""
    details: Optional[str] = None
    status: Optional[TaskStatus] = None


class Task(BaseModel):
    """Complete task as owned by the task service"""
    id: TaskId
    details: Optional[str] = None
    status: TaskStatus


def parse_task_id(value: str) -> TaskId:
    """
    Parse the canonical hyphenated string form of a task id.

    Args:
        value: e.g. ``"3f2b9c1e-8d4a-4e5f-9a7b-1c2d3e4f5a6b"``

    Returns:
        The parsed TaskId

    Raises:
        MalformedTaskIdError: If the value is not a hyphenated UUID
    """
    if not isinstance(value, str) or not _TASK_ID_PATTERN.fullmatch(value):
        raise MalformedTaskIdError(value)
    return TaskId(UUID(value))


def format_task_id(task_id: TaskId) -> str:
    return str(task_id)


def parse_task_status(value: Optional[str]) -> Optional[TaskStatus]:
    """
    Lenient status parse.

    Upper-cases the wire string and matches it against the member names.
    A missing or unrecognised value yields None instead of an error, and
    callers treat None as "no status change requested".
    """
    if value is None:
        return None
    return TaskStatus.__members__.get(value.upper())


def format_task_status(status: TaskStatus) -> str:
    return status.name.lower()
