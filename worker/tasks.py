import logging

from celery import shared_task
from django.db import DatabaseError

from .telemetry import TelemetryRecord, insert
from .utils import log_conditionally

logger = logging.getLogger(__name__)


@shared_task(bind=True, max_retries=3)
def persist_telemetry(self, payload: dict):
    record = TelemetryRecord.from_payload(payload)
    try:
        profile = insert(record)
    except DatabaseError as e:
        logger.warning(f"⏳ Storing profile for job {record.job_id} failed, retrying: {e}")
        raise self.retry(exc=e, countdown=60)

    log_conditionally(logging.INFO, f"📊 Profile {profile.pk} stored for job {record.job_id}")
    return profile.pk
