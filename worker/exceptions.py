"""Failures raised while handling a build job.

Every handler stage raises a ``JobError`` subclass; the view turns it into a
``{"status": "error", "errors": ...}`` response with ``status_code``.
"""
from rest_framework import status


class JobError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ValidationError(JobError):
    status_code = status.HTTP_400_BAD_REQUEST


class WorkspaceWriteError(JobError):
    def __init__(self, filename):
        self.filename = filename
        super().__init__(f"Failed to warm up the compiler [{filename}].")


class CompilerExecutionError(JobError):
    pass


class CompilerTimeoutError(CompilerExecutionError):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT


class PersistenceError(JobError):
    pass


class StorageError(Exception):
    """Raised by the job storage when a key cannot be written."""


class PayloadError(ValidationError):
    """The request body could not be read; keeps the parser's status code."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
