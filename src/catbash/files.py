"""File staging and retrieval.

Staging writes the command text that is about to be executed, and is
also how captured output gets persisted to a target file. Retrieval
reads post-processing expressions back from disk.
"""

import logging
import os

from catbash.constants import TEXT_ENCODING
from catbash.errors import FileIOError, FileRetrievalError

logger = logging.getLogger(__name__)


def stage_file(content: str, dest: str) -> None:
    """Write content to dest, replacing whatever was there.

    The file is created empty first if it does not exist, then
    overwritten in full. Nothing is appended, so staging the same
    destination twice leaves only the second content.

    Args:
        content: Text to write.
        dest: Destination path.

    Raises:
        FileIOError: If the file cannot be created or written.
    """
    try:
        if not os.path.exists(dest):
            open(dest, "w", encoding=TEXT_ENCODING).close()
        with open(dest, "w", encoding=TEXT_ENCODING, newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileIOError(f"Cannot write {dest}: {e}") from e

    logger.debug("Staged %d characters into %s", len(content), dest)


def retrieve_file(path: str) -> str:
    """Read a file's full contents as text.

    Invalid UTF-8 sequences are replaced rather than rejected.

    Args:
        path: File to read.

    Returns:
        The decoded file content.

    Raises:
        FileRetrievalError: If path does not exist.
        FileIOError: If the file exists but cannot be read.
    """
    if not os.path.exists(path):
        raise FileRetrievalError(path)

    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise FileIOError(f"Cannot read {path}: {e}") from e

    return raw.decode(TEXT_ENCODING, errors="replace")


def delete_file(path: str) -> None:
    """Remove a staged file.

    Raises:
        FileIOError: If the file cannot be removed.
    """
    try:
        os.remove(path)
    except OSError as e:
        raise FileIOError(f"Cannot delete {path}: {e}") from e

    logger.debug("Deleted %s", path)
