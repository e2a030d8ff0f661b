"""Command execution module.

Runs staged files through the interpreter via a two-stage pipe
(``cat FILE | bash``) and runs post-processing lines that consume a
previously captured value. Both go through run_shell, which differs
per call only in whether output is captured.

Known limitation: paths and captured values are wrapped in double
quotes without escaping, so embedded quote characters change the
resulting shell line.
"""

import logging
import subprocess
import sys

from catbash.config import get_interpreter
from catbash.constants import LAUNCHER_SHELL, NON_ZERO_STATUS_WARNING, TEXT_ENCODING
from catbash.errors import ExecutionFailure

logger = logging.getLogger(__name__)


def run_shell(command_line: str, capture: bool = False) -> subprocess.CompletedProcess:
    """Run a command line through ``sh -c`` and wait for it to exit.

    Args:
        command_line: The shell line to run.
        capture: If True, stdout and stderr are buffered and decoded.
            Otherwise output streams directly to the terminal.

    Returns:
        CompletedProcess with returncode, and stdout/stderr when captured.
    """
    logger.debug("Running: %s", command_line)
    if not capture:
        return subprocess.run([LAUNCHER_SHELL, "-c", command_line])

    return subprocess.run(
        [LAUNCHER_SHELL, "-c", command_line],
        capture_output=True,
        encoding=TEXT_ENCODING,
        errors="replace",
    )


def build_catbash_command(path: str) -> str:
    """Build the ``cat "FILE" | interpreter`` line for a staged file."""
    return f'cat "{path}" | {get_interpreter()}'


def build_post_process_command(value: str, expression: str) -> str:
    """Interpolate a captured value into a post-processing line.

    Trailing whitespace and newlines are stripped from the value, which
    is then echoed in front of the user's expression, e.g.
    ``echo "<value>" | grep hi``.

    Args:
        value: Previously captured output.
        expression: Follow-on shell syntax supplied by the user.

    Returns:
        The shell line to run.
    """
    return f'echo "{value.rstrip()}" {expression}'


def _report_failure(command_line: str, result: subprocess.CompletedProcess) -> None:
    """Print diagnostics for a failed capturing run to stderr."""
    print(f"Failed command: {command_line}", file=sys.stderr)
    print(f"Exit code: {result.returncode}", file=sys.stderr)
    if result.stderr:
        print(f"stderr:\n{result.stderr}", file=sys.stderr, end="")
    if result.stdout:
        print(f"stdout:\n{result.stdout}", file=sys.stderr, end="")


def _forward(result: subprocess.CompletedProcess, mirror: bool) -> None:
    """Write buffered stderr to the terminal, and stdout too when mirroring."""
    if mirror and result.stdout:
        sys.stdout.write(result.stdout)
        sys.stdout.flush()
    if result.stderr:
        sys.stderr.write(result.stderr)
        sys.stderr.flush()


def _run_captured(command_line: str, mirror: bool) -> str:
    result = run_shell(command_line, capture=True)

    if result.returncode != 0:
        _report_failure(command_line, result)
        raise ExecutionFailure(command_line, result.returncode)

    _forward(result, mirror)
    return result.stdout


def catbash(path: str) -> int:
    """Pipe a file into the interpreter, output going to the terminal.

    The script's exit status is advisory: a non-zero status is reported
    as a warning and returned, never raised.

    Args:
        path: The file whose content is executed.

    Returns:
        Exit code of the pipeline.
    """
    result = run_shell(build_catbash_command(path))
    if result.returncode != 0:
        print(NON_ZERO_STATUS_WARNING, file=sys.stderr)
        logger.warning("%s exited with status %d", path, result.returncode)
    return result.returncode


def catbash_capture(path: str, mirror: bool = False) -> str:
    """Pipe a file into the interpreter and capture its standard output.

    Args:
        path: The file whose content is executed.
        mirror: If True, captured stdout is also written to the
            process's own stdout. Captured stderr is always forwarded
            to stderr.

    Returns:
        Captured standard output, unmodified.

    Raises:
        ExecutionFailure: If the pipeline exits non-zero.
    """
    return _run_captured(build_catbash_command(path), mirror)


def post_process(value: str, expression: str, mirror: bool = False) -> str:
    """Run a post-processing expression over a captured value.

    Args:
        value: Captured output to feed into the expression.
        expression: Follow-on shell syntax, e.g. ``| grep hi``.
        mirror: If True, the result is also written to the terminal.

    Returns:
        Standard output of the post-processing line.

    Raises:
        ExecutionFailure: If the post-processing line exits non-zero.
    """
    return _run_captured(build_post_process_command(value, expression), mirror)
