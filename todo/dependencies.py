"""FastAPI dependencies"""

from todo.services.memory_task_service import InMemoryTaskService
from todo.services.task_service import TaskService

# Process-wide default collaborator
_task_service: TaskService = InMemoryTaskService()


def get_task_service() -> TaskService:
    """
    Dependency function for FastAPI routes.

    Usage:
        @router.get("/example")
        async def example(service: TaskService = Depends(get_task_service)):
            ...

    Override with ``app.dependency_overrides[get_task_service]`` to plug in
    another implementation.
    """
    return _task_service
