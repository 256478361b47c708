import logging

from django.core.exceptions import SuspiciousOperation
from django.core.files.base import ContentFile
from django.core.files.storage import storages

from .exceptions import StorageError

logger = logging.getLogger(__name__)


class JobStorage:
    """Write-by-key access to the storage backend holding job workspaces."""

    def __init__(self, backend):
        self.backend = backend

    def write(self, path: str, contents: str) -> None:
        try:
            if self.backend.exists(path):
                raise StorageError(f"{path} already exists")
            saved = self.backend.save(path, ContentFile(contents.encode("utf-8")))
        except (OSError, SuspiciousOperation, UnicodeEncodeError) as exc:
            logger.error(f"❌ Unable to write {path}: {exc}")
            raise StorageError(str(exc)) from exc

        # Django renames on collision; the compiler needs the exact name
        if saved != path:
            raise StorageError(f"{path} was stored as {saved}")

    def path(self, name: str) -> str:
        return self.backend.path(name)


def get_job_storage():
    return JobStorage(storages["jobs"])
