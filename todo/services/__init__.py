"""Task service contract and implementations"""
from .task_service import NoEntityError, TaskService
from .memory_task_service import InMemoryTaskService

__all__ = ["NoEntityError", "TaskService", "InMemoryTaskService"]
