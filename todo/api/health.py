"""Health check endpoint"""

from fastapi import APIRouter, Depends

from todo.config import APP_NAME
from todo.dependencies import get_task_service
from todo.services.task_service import TaskService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(service: TaskService = Depends(get_task_service)):
    """Basic health check endpoint"""
    tasks = await service.select_all()

    return {
        "status": "healthy",
        "service": APP_NAME,
        "tasks": len(tasks),
    }
