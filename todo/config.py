import os
from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

APP_NAME = os.getenv("APP_NAME", "todo-backend")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS origins, comma separated
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
