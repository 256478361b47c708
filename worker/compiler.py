import logging
import os
import signal
import subprocess
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass

from django.conf import settings

from .exceptions import CompilerExecutionError, CompilerTimeoutError
from .utils import log_conditionally

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompileResult:
    css: str
    duration_ms: int
    memory_bytes: int


def peak_rss_bytes(rusage):
    # ru_maxrss is in kilobytes on Linux and bytes on macOS
    return rusage.ru_maxrss if sys.platform == "darwin" else rusage.ru_maxrss * 1024


def reap(pid):
    """Wait for ``pid`` and return its exit code and its own resource usage."""
    _, wait_status, rusage = os.wait4(pid, 0)
    return os.waitstatus_to_exitcode(wait_status), rusage


def kill_group(pid):
    try:
        os.killpg(pid, signal.SIGKILL)
    except ProcessLookupError:
        pass


def kill_process_group(process, exit_future):
    kill_group(process.pid)
    process.returncode, _ = exit_future.result()


class CompilerRunner:
    def __init__(self, binary, timeout=None):
        self.binary = str(binary)
        self.timeout = timeout

    def command(self, workspace_dir):
        return [
            self.binary,
            "-i", os.path.join(workspace_dir, "input.css"),
            "-c", os.path.join(workspace_dir, "tailwind.config.js"),
            "--minify",
        ]

    def run(self, workspace_dir) -> CompileResult:
        cmd = self.command(workspace_dir)

        t0 = time.monotonic()
        try:
            process = subprocess.Popen(
                cmd,
                cwd=workspace_dir,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
                start_new_session=True,
            )
        except OSError as e:
            logger.error(f"❌ Could not start the compiler: {e}")
            raise CompilerExecutionError(str(e)) from e

        # The child is reaped here with wait4 so its own peak RSS is known;
        # Popen only closes the pipes on exit since returncode is already set.
        with process, ThreadPoolExecutor(max_workers=3) as executor:
            stdout_future = executor.submit(process.stdout.read)
            stderr_future = executor.submit(process.stderr.read)
            exit_future = executor.submit(reap, process.pid)

            try:
                process.returncode, rusage = exit_future.result(timeout=self.timeout)
            except FutureTimeoutError:
                kill_process_group(process, exit_future)
                logger.warning(f"⏳ Compiler timed out after {self.timeout}s in {workspace_dir}")
                raise CompilerTimeoutError(f"The compiler did not finish within {self.timeout:g} seconds.")
            except BaseException:
                # Interrupted while waiting, don't leave the compiler running
                kill_process_group(process, exit_future)
                raise
            duration_ms = int((time.monotonic() - t0) * 1000)

            # Leftovers in the group would keep the pipes open
            kill_group(process.pid)

            stdout = stdout_future.result()
            stderr = stderr_future.result()

        memory_bytes = peak_rss_bytes(rusage)

        if process.returncode != 0:
            log_conditionally(logging.WARNING, f"❌ Compiler exited with {process.returncode} in {workspace_dir}")
            raise CompilerExecutionError(stderr)

        log_conditionally(logging.INFO, f"⚙️  Compiled {workspace_dir} in {duration_ms}ms, peak {memory_bytes} bytes")
        return CompileResult(css=stdout, duration_ms=duration_ms, memory_bytes=memory_bytes)


def get_compiler_runner():
    return CompilerRunner(settings.TAILWINDCSS_BINARY, timeout=settings.COMPILER_TIMEOUT)
