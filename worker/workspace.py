import logging

from .exceptions import StorageError, WorkspaceWriteError
from .validation import PRESET_DECLARATION
from .utils import log_conditionally

logger = logging.getLogger(__name__)

MODULE_DECLARATION = "module.exports = {"

INPUT_FILE = "input.css"
PRESET_FILE = "preset.js"
CONTENT_FILE = "content.html"
CONFIG_FILE = "tailwind.config.js"

CONFIG_TEMPLATE = """module.exports = {{
    content: [
        '{workspace}/{content_file}'
    ],
    presets: [
        require('{workspace}/{preset_file}')
    ],
    plugins: [
        require('@tailwindcss/forms'),
        require('@tailwindcss/typography'),
        require('@tailwindcss/line-clamp'),
    ],
}}"""


def transform_preset(preset: str) -> str:
    """Turn the browser-side ``tailwind.config = {`` into a requirable module."""
    return preset.replace(PRESET_DECLARATION, MODULE_DECLARATION, 1)


def render_config(workspace_dir: str) -> str:
    return CONFIG_TEMPLATE.format(
        workspace=workspace_dir.rstrip("/"),
        content_file=CONTENT_FILE,
        preset_file=PRESET_FILE,
    )


def materialize(storage, job_id, request) -> str:
    """
    Write the four files of a job into ``<storage root>/<job_id>/``.

    Returns the absolute workspace directory. Files written before a failing
    write are left behind; ``purge_workspaces`` reaps them.
    """
    workspace_dir = storage.path(str(job_id))

    files = [
        (INPUT_FILE, request.css),
        (PRESET_FILE, transform_preset(request.preset)),
        (CONTENT_FILE, request.content),
        (CONFIG_FILE, render_config(workspace_dir)),
    ]

    for filename, contents in files:
        try:
            storage.write(f"{job_id}/{filename}", contents)
        except StorageError as exc:
            logger.error(f"❌ Job {job_id}: could not write {filename}: {exc}")
            raise WorkspaceWriteError(filename) from exc

    log_conditionally(logging.INFO, f"📁 Workspace ready for job {job_id}: {workspace_dir}")
    return workspace_dir
