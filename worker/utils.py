import logging
import os

from django.conf import settings

logger = logging.getLogger("worker")


def is_development():
    return settings.PYTHON_ENVIRONMENT == "development"


def log_conditionally(level, msg, *args, **kwargs):
    """
    Logs a message only if in development environment or if the log level
    is WARNING, ERROR, or CRITICAL.
    """
    if is_development() or level >= logging.WARNING:
        logger.log(level, msg, *args, **kwargs)


def print_env_variables():
    print("➡️  TAILWINDCSS_BINARY:", os.getenv('TAILWINDCSS_BINARY', 'Not Set'))
    print("➡️  TAILWINDCSS_VERSION:", os.getenv('TAILWINDCSS_VERSION', 'Not Set'))
    print("➡️  LOCAL_STORAGE_DIR:", os.getenv('LOCAL_STORAGE_DIR', 'Not Set'))
    print("➡️  COMPILER_TIMEOUT:", os.getenv('COMPILER_TIMEOUT', 'Not Set'))
    print("➡️  TELEMETRY_MODE:", os.getenv('TELEMETRY_MODE', 'Not Set'))
