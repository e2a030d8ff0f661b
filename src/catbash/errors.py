"""Exception hierarchy for catbash.

Every error the pipeline can surface to the user derives from
CatbashError. The CLI catches the base class, prints the message to
stderr, and exits with ``exit_code``.
"""

from catbash.constants import EXIT_FAILURE


class CatbashError(Exception):
    """Base class for all user-facing catbash errors."""

    exit_code = EXIT_FAILURE


class ValidationError(CatbashError):
    """Illegal flag combination, detected before any side effect."""


class ExecutionFailure(CatbashError):
    """A capturing run or post-processing step exited non-zero."""

    def __init__(self, command: str, returncode: int):
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"Command failed with exit code {returncode}: {command}"
        )


class FileRetrievalError(CatbashError):
    """A required source file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class FileIOError(CatbashError):
    """Staging, writing, reading, or deleting a file failed."""


class InternalLogicError(CatbashError):
    """A flag shape reached the driver that no dispatch entry covers."""
