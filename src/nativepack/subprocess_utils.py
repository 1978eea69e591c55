"""Subprocess helpers for invoking the external packaging tools.

All black-box tools (jlink, jpackage, magick, iconutil, lsb_release) are run
through run_subprocess_with_context so that failures carry the operation
being attempted, the command line and the tool's stderr.
"""

import logging
import subprocess
import time
from pathlib import Path

from nativepack.core.errors import ToolInvocationError

logger = logging.getLogger(__name__)

# Upper bound for a single tool invocation when the caller does not set one
DEFAULT_TOOL_TIMEOUT = 1800.0


def format_command(cmd: list[str]) -> str:
    """Render a command line for logs and error messages."""
    return " ".join(cmd)


def run_subprocess_with_context(
    *,
    cmd: list[str],
    operation_context: str,
    cwd: Path | None = None,
    capture_output: bool = True,
    check: bool = True,
    timeout: float | None = DEFAULT_TOOL_TIMEOUT,
) -> subprocess.CompletedProcess[str]:
    """Run a command, raising ToolInvocationError with context on failure.

    Args:
        cmd: Command and arguments
        operation_context: Short description of what the command does,
            used as "Failed to <operation_context>" in error messages
        cwd: Working directory for the command
        capture_output: Capture stdout/stderr instead of streaming them
        check: Raise on non-zero exit code
        timeout: Seconds before the command is killed, None for no limit

    Returns:
        The completed process (stdout/stderr as text when captured)

    Raises:
        ToolInvocationError: If the command cannot be launched, times out,
            or exits non-zero while check is True
    """
    description = format_command(cmd)
    logger.debug("Running: %s", description)
    start = time.monotonic()
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=capture_output,
            text=True,
            encoding="utf-8",
            check=check,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        msg = f"Failed to {operation_context}: command not found: {cmd[0]}"
        raise ToolInvocationError(msg) from e
    except OSError as e:
        msg = f"Failed to {operation_context}: could not launch {cmd[0]}: {e}"
        raise ToolInvocationError(msg) from e
    except subprocess.TimeoutExpired as e:
        msg = (
            f"Failed to {operation_context}: timed out after {timeout:g}s\n"
            f"Command: {description}"
        )
        raise ToolInvocationError(msg) from e
    except subprocess.CalledProcessError as e:
        msg = f"Failed to {operation_context}\nCommand: {description}\nExit code: {e.returncode}"
        if e.stderr:
            msg += f"\nstderr: {e.stderr.strip()}"
        raise ToolInvocationError(msg) from e
    finally:
        logger.debug("Finished in %.2fs: %s", time.monotonic() - start, description)

    return result
