import logging

from todo.config import APP_NAME, APP_VERSION, CORS_ALLOW_ORIGINS, LOG_LEVEL

# Log configuration (before other imports)
# ruff: noqa: E402
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from todo.api import api_router, register_exception_handlers  # noqa: E402

app = FastAPI(
    title="Todo Backend API",
    description="REST API for tasks",
    version=APP_VERSION
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# NoEntity -> 404, malformed id -> 400
register_exception_handlers(app)

# Include all API routes
app.include_router(api_router)


@app.get("/")
def read_root():
    return {
        "message": APP_NAME,
        "docs": "/docs",
        "version": APP_VERSION
    }
