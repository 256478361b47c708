import os
import time

import pytest

from worker.compiler import CompilerRunner
from worker.exceptions import CompilerExecutionError, CompilerTimeoutError

from .conftest import write_stub


@pytest.fixture
def workspace(tmp_path):
    directory = tmp_path / "job"
    directory.mkdir()
    return directory


def test_returns_stdout_as_css(tmp_path, workspace):
    binary = write_stub(tmp_path / "tailwindcss", "printf '%s' '.a{color:red}'")

    result = CompilerRunner(binary, timeout=10).run(str(workspace))

    assert result.css == ".a{color:red}"
    assert result.duration_ms >= 0
    assert result.memory_bytes > 0


def test_passes_input_config_and_minify(tmp_path, workspace):
    binary = write_stub(tmp_path / "tailwindcss", 'printf "%s|" "$@"; pwd -P | tr -d "\\n"')

    result = CompilerRunner(binary, timeout=10).run(str(workspace))

    args = result.css.split("|")
    assert args[:5] == [
        "-i", os.path.join(str(workspace), "input.css"),
        "-c", os.path.join(str(workspace), "tailwind.config.js"),
        "--minify",
    ]
    assert os.path.realpath(args[5]) == os.path.realpath(str(workspace))


def test_nonzero_exit_reports_stderr(tmp_path, workspace):
    binary = write_stub(tmp_path / "tailwindcss", "printf '%s' 'syntax error' >&2; exit 1")

    with pytest.raises(CompilerExecutionError) as exc_info:
        CompilerRunner(binary, timeout=10).run(str(workspace))

    assert str(exc_info.value) == "syntax error"


def test_missing_binary_is_an_execution_error(tmp_path, workspace):
    with pytest.raises(CompilerExecutionError):
        CompilerRunner(tmp_path / "missing", timeout=10).run(str(workspace))


def test_timeout_kills_the_whole_process_group(tmp_path, workspace):
    # The backgrounded sleep keeps stdout open unless the whole group dies
    binary = write_stub(tmp_path / "tailwindcss", "sleep 30 & wait")

    t0 = time.monotonic()
    with pytest.raises(CompilerTimeoutError) as exc_info:
        CompilerRunner(binary, timeout=0.5).run(str(workspace))

    assert time.monotonic() - t0 < 10
    assert exc_info.value.status_code == 504


def test_undecodable_output_is_replaced(tmp_path, workspace):
    binary = write_stub(tmp_path / "tailwindcss", r"printf '.a{}\377\376'")

    result = CompilerRunner(binary, timeout=10).run(str(workspace))

    assert result.css.startswith(".a{}")
    assert "\ufffd" in result.css


def test_undecodable_stderr_is_still_reported(tmp_path, workspace):
    binary = write_stub(tmp_path / "tailwindcss", r"printf 'bad \377' >&2; exit 2")

    with pytest.raises(CompilerExecutionError) as exc_info:
        CompilerRunner(binary, timeout=10).run(str(workspace))

    assert str(exc_info.value).startswith("bad ")


def test_every_run_reports_its_own_peak_memory(tmp_path, workspace):
    binary = write_stub(tmp_path / "tailwindcss", "printf '%s' '.a{}'")
    runner = CompilerRunner(binary, timeout=10)

    first = runner.run(str(workspace))
    second = runner.run(str(workspace))

    assert first.memory_bytes > 0
    assert second.memory_bytes > 0


def test_silent_failure_is_still_an_error(tmp_path, workspace):
    binary = write_stub(tmp_path / "tailwindcss", "exit 3")

    with pytest.raises(CompilerExecutionError) as exc_info:
        CompilerRunner(binary, timeout=10).run(str(workspace))

    assert str(exc_info.value) == ""
