import stat

import pytest

VALID_PRESET = """tailwind.config = {
    theme: {
        extend: {
            colors: { brand: '#0f172a' },
        },
    },
}"""

VALID_AGENT = "WordPress/6.1; https://example.com"


def write_stub(path, body):
    path.write_text("#!/bin/sh\n" + body + "\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def storage_dir(tmp_path):
    directory = tmp_path / "tasks"
    directory.mkdir()
    return directory


@pytest.fixture
def job_settings(settings, storage_dir, tmp_path):
    settings.LOCAL_STORAGE_DIR = str(storage_dir)
    settings.STORAGES = {
        **settings.STORAGES,
        "jobs": {
            "BACKEND": "django.core.files.storage.FileSystemStorage",
            "OPTIONS": {"location": str(storage_dir)},
        },
    }
    settings.TAILWINDCSS_BINARY = str(write_stub(tmp_path / "tailwindcss", "printf '%s' '.a{color:red}'"))
    settings.TAILWINDCSS_VERSION = "3.2.4"
    settings.COMPILER_TIMEOUT = 10
    settings.TELEMETRY_MODE = "sync"
    settings.CALLER_AGENT_MATCHER = "worker.callers.WordPressAgentMatcher"
    return settings


@pytest.fixture
def compiler_stub(job_settings, tmp_path):
    """Replace the compiler binary with a shell script running ``body``."""

    def install(body):
        job_settings.TAILWINDCSS_BINARY = str(write_stub(tmp_path / "tailwindcss", body))
        return job_settings.TAILWINDCSS_BINARY

    return install


@pytest.fixture
def valid_payload():
    return {
        "css": "@tailwind base;\n@tailwind components;\n@tailwind utilities;",
        "preset": VALID_PRESET,
        "content": '<div class="text-brand font-bold"></div>',
    }
