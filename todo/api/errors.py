"""Translation of domain errors into HTTP responses"""

import logging
from fastapi import FastAPI, Request, Response

from todo.models.task import MalformedTaskIdError
from todo.services.task_service import NoEntityError

logger = logging.getLogger(__name__)


async def handle_no_entity(request: Request, exc: NoEntityError) -> Response:
    logger.info(f"{request.method} {request.url.path}: task {exc.task_id} not found")
    return Response(status_code=404)


async def handle_malformed_task_id(request: Request, exc: MalformedTaskIdError) -> Response:
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return Response(status_code=400)


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors to status codes with an empty body"""
    app.add_exception_handler(NoEntityError, handle_no_entity)
    app.add_exception_handler(MalformedTaskIdError, handle_malformed_task_id)
