"""
The build job: validate, write the workspace, compile, record the profile.

Every collaborator is handed to ``JobHandler`` explicitly; ``build_handler``
wires the ones configured in settings.
"""
import logging
import uuid
from dataclasses import dataclass

from django.conf import settings

from . import workspace
from .callers import get_caller_matcher
from .compiler import get_compiler_runner
from .storage import get_job_storage
from .telemetry import TelemetryRecord, get_recorder
from .utils import log_conditionally
from .validation import validate_request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildRequest:
    caller_agent: str
    css: str
    preset: str
    content: str


@dataclass(frozen=True)
class BuildResult:
    job_id: uuid.UUID
    css: str


class JobHandler:
    def __init__(self, storage, compiler, recorder, matcher, compiler_version):
        self.storage = storage
        self.compiler = compiler
        self.recorder = recorder
        self.matcher = matcher
        self.compiler_version = compiler_version

    def handle(self, request: BuildRequest) -> BuildResult:
        validate_request(request, self.matcher)
        caller = self.matcher(request.caller_agent)

        job_id = uuid.uuid4()
        log_conditionally(logging.INFO, f"🚀 Starting job {job_id} for {caller.site_identifier}")

        workspace_dir = workspace.materialize(self.storage, job_id, request)
        result = self.compiler.run(workspace_dir)

        self.recorder(TelemetryRecord(
            job_id=job_id,
            duration_ms=result.duration_ms,
            memory_bytes=result.memory_bytes,
            compiler_version=self.compiler_version,
            caller_client_name=caller.client_name,
            caller_site_identifier=caller.site_identifier,
        ))

        logger.info(f"✅ Completed job {job_id} in {result.duration_ms}ms")
        return BuildResult(job_id=job_id, css=result.css)


def build_handler():
    return JobHandler(
        storage=get_job_storage(),
        compiler=get_compiler_runner(),
        recorder=get_recorder(),
        matcher=get_caller_matcher(),
        compiler_version=settings.TAILWINDCSS_VERSION,
    )
