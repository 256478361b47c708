import logging
import uuid
from dataclasses import asdict, dataclass

from django.conf import settings
from django.db import DatabaseError, transaction

from .exceptions import PersistenceError
from .models import Profile
from .utils import log_conditionally

logger = logging.getLogger(__name__)

TELEMETRY_SYNC = "sync"
TELEMETRY_ASYNC = "async"


@dataclass(frozen=True)
class TelemetryRecord:
    job_id: uuid.UUID
    duration_ms: int
    memory_bytes: int
    compiler_version: str
    caller_client_name: str
    caller_site_identifier: str

    def as_payload(self):
        payload = asdict(self)
        payload["job_id"] = str(self.job_id)
        return payload

    @classmethod
    def from_payload(cls, payload):
        return cls(**{**payload, "job_id": uuid.UUID(payload["job_id"])})


def insert(record: TelemetryRecord) -> Profile:
    with transaction.atomic():
        return Profile.objects.create(**asdict(record))


def record_sync(record):
    try:
        insert(record)
    except DatabaseError as e:
        logger.exception(f"❌ Could not store profile for job {record.job_id}")
        raise PersistenceError("Failed to record the compilation profile.") from e
    log_conditionally(logging.INFO, f"📊 Profile stored for job {record.job_id}")


def record_async(record):
    from .tasks import persist_telemetry

    try:
        persist_telemetry.delay(record.as_payload())
    except Exception:
        # Broker outage must not cost the caller its compiled css
        logger.exception(f"❌ Could not enqueue profile for job {record.job_id}")
        return
    log_conditionally(logging.INFO, f"📨 Profile queued for job {record.job_id}")


def get_recorder(mode=None):
    mode = mode or settings.TELEMETRY_MODE
    if mode == TELEMETRY_ASYNC:
        return record_async
    if mode == TELEMETRY_SYNC:
        return record_sync
    raise ValueError(f"❌ Unknown TELEMETRY_MODE {mode!r}, expected 'sync' or 'async'.")
