"""Mode resolution.

Validates the parsed command-line flags and classifies them into exactly
one ExecutionMode. Resolution is pure: it never touches the filesystem,
so an invalid combination is rejected before any side effect happens.
"""

import logging
from dataclasses import dataclass, field

from catbash.constants import MIXED_FILES_AND_FLAGS_MESSAGE, UNDEFINED_BEHAVIOR_MESSAGE
from catbash.errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlagSet:
    """Parsed command-line inputs.

    A flag counts as present when its value is not None, so ``-i ""`` is
    present with an empty value.
    """

    input: str | None = None
    output: str | None = None
    capture: bool = False
    target: str | None = None
    arguments: str | None = None
    arguments_from_file: str | None = None
    files: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_flags(self) -> bool:
        """True if any flag other than the positional files is present."""
        return self.capture or any(
            value is not None
            for value in (
                self.input,
                self.output,
                self.target,
                self.arguments,
                self.arguments_from_file,
            )
        )

    @property
    def args_source(self) -> str | None:
        """Where the post-processing expression comes from.

        Returns:
            "inline", "file", or None when no post-processing is requested.
        """
        if self.arguments is not None:
            return "inline"
        if self.arguments_from_file is not None:
            return "file"
        return None


@dataclass(frozen=True)
class NoArgs:
    """Nothing was given on the command line."""


@dataclass(frozen=True)
class DefaultBehavior:
    """A single positional file, executed as-is."""

    path: str


@dataclass(frozen=True)
class DefinedFlags:
    """One or more flags and no positional files."""

    flags: FlagSet


@dataclass(frozen=True)
class InvalidCombination:
    """Flags and positional files that cannot be combined."""

    message: str


ExecutionMode = NoArgs | DefaultBehavior | DefinedFlags | InvalidCombination


def validate_flags(flags: FlagSet) -> None:
    """Check the flag dependency rules.

    Rules are checked in a fixed order so the reported message is
    deterministic when several are broken at once.

    Args:
        flags: The parsed flags.

    Raises:
        ValidationError: On the first violated rule.
    """
    has_output = flags.output is not None
    has_output_and_capture = has_output and flags.capture

    if flags.capture and not has_output:
        raise ValidationError("--capture requires --output")

    if flags.target is not None and not has_output_and_capture:
        raise ValidationError("--target requires --output and --capture")

    if flags.arguments is not None and not has_output_and_capture:
        raise ValidationError("--arguments requires --output and --capture")

    if flags.arguments_from_file is not None and not has_output_and_capture:
        raise ValidationError(
            "--arguments-from-file requires --output and --capture"
        )

    if flags.arguments is not None and flags.arguments_from_file is not None:
        raise ValidationError(
            "--arguments and --arguments-from-file are mutually exclusive"
        )


def resolve_mode(flags: FlagSet) -> ExecutionMode:
    """Classify validated flags into an execution mode.

    Args:
        flags: The parsed flags, including positional files.

    Returns:
        NoArgs, DefaultBehavior, DefinedFlags, or InvalidCombination.

    Raises:
        ValidationError: If a flag dependency rule is violated.
    """
    validate_flags(flags)

    has_flags = flags.has_flags
    file_count = len(flags.files)

    if not has_flags and file_count == 0:
        mode = NoArgs()
    elif not has_flags and file_count == 1:
        mode = DefaultBehavior(flags.files[0])
    elif not has_flags and file_count > 1:
        mode = InvalidCombination(
            f"Too many files for default behavior: {list(flags.files)}. "
            "Please use flags or provide only one file."
        )
    elif has_flags and file_count == 0:
        mode = DefinedFlags(flags)
    elif has_flags and file_count > 0:
        mode = InvalidCombination(MIXED_FILES_AND_FLAGS_MESSAGE)
    else:
        mode = InvalidCombination(UNDEFINED_BEHAVIOR_MESSAGE)

    logger.debug("Resolved mode: %s", mode)
    return mode
