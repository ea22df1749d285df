"""
In-memory Task Service

Dict-backed implementation of the task service contract. Used as the default
collaborator when the app runs without a backing store, and in tests.
"""

import logging
import uuid
from typing import Dict, List, Optional

from todo.models.task import (
    Task,
    TaskAttributes,
    TaskAttributesInsert,
    TaskAttributesPatch,
    TaskId,
)
from todo.services.task_service import NoEntityError

logger = logging.getLogger(__name__)


class InMemoryTaskService:
    """Task service keeping tasks in insertion order"""

    def __init__(self, tasks: Optional[List[Task]] = None):
        self._tasks: Dict[TaskId, Task] = {}
        for task in tasks or []:
            self._tasks[task.id] = task

    async def select_all(self) -> List[Task]:
        return list(self._tasks.values())

    async def select(self, task_id: TaskId) -> Optional[Task]:
        return self._tasks.get(task_id)

    async def insert(self, attributes: TaskAttributesInsert) -> TaskId:
        """
        Store a new task.

        Args:
            attributes: Details and initial status of the task

        Returns:
            The id assigned to the new task
        """
        task_id = TaskId(uuid.uuid4())
        self._tasks[task_id] = Task(
            id=task_id,
            details=attributes.details,
            status=attributes.status,
        )
        logger.info(f"Created task {task_id}")
        return task_id

    async def update(self, task_id: TaskId, attributes: TaskAttributes) -> Task:
        """
        Replace the details of a task, and its status when one is given.

        Raises:
            NoEntityError: If no task has this id
        """
        existing = self._get_existing(task_id)

        task = existing.model_copy(update={
            "details": attributes.details,
            "status": attributes.status if attributes.status is not None else existing.status,
        })
        self._tasks[task_id] = task
        logger.info(f"Updated task {task_id}")
        return task

    async def patch(self, task_id: TaskId, attributes: TaskAttributesPatch) -> Task:
        """
        Update only the fields that are set on the patch.

        Raises:
            NoEntityError: If no task has this id
        """
        existing = self._get_existing(task_id)

        # Only provided fields (non-None values)
        update_fields = attributes.model_dump(exclude_none=True)
        task = existing.model_copy(update=update_fields)
        self._tasks[task_id] = task
        logger.info(f"Patched task {task_id} fields={sorted(update_fields)}")
        return task

    async def delete(self, task_id: TaskId) -> None:
        self._get_existing(task_id)
        del self._tasks[task_id]
        logger.info(f"Deleted task {task_id}")

    def _get_existing(self, task_id: TaskId) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise NoEntityError(task_id)
        return task
