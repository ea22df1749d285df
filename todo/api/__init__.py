# API module exports
from todo.api import health, tasks
from todo.api.base import api_router
from todo.api.errors import register_exception_handlers

__all__ = ["health", "tasks", "api_router", "register_exception_handlers"]
