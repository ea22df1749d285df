"""Domain models for the application"""
from .task import (
    MalformedTaskIdError,
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

__all__ = [
    'Task', 'TaskId', 'TaskStatus',
    'TaskAttributes', 'TaskAttributesInsert', 'TaskAttributesPatch',
    'MalformedTaskIdError',
    'parse_task_id', 'format_task_id',
    'parse_task_status', 'format_task_status',
]
