"""
Task Service contract

The controller only depends on this protocol. Implementations own storage,
identity assignment and consistency of concurrent requests.
"""

from typing import List, Optional, Protocol

from todo.models.task import (
    Task,
    TaskAttributes,
    TaskAttributesInsert,
    TaskAttributesPatch,
    TaskId,
)


class NoEntityError(Exception):
    """Raised when an operation targets an id with no stored task"""

    def __init__(self, task_id: TaskId):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class TaskService(Protocol):
    async def select_all(self) -> List[Task]:
        ...

    async def select(self, task_id: TaskId) -> Optional[Task]:
        ...

    async def insert(self, attributes: TaskAttributesInsert) -> TaskId:
        ...

    async def update(self, task_id: TaskId, attributes: TaskAttributes) -> Task:
        """Replace the attributes of a task. Raises NoEntityError if absent."""
        ...

    async def patch(self, task_id: TaskId, attributes: TaskAttributesPatch) -> Task:
        """Update only the supplied attributes. Raises NoEntityError if absent."""
        ...

    async def delete(self, task_id: TaskId) -> None:
        """Remove a task. Raises NoEntityError if absent."""
        ...
