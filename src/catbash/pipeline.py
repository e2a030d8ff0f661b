"""Pipeline driver.

Consumes one ExecutionMode and performs its side effects in a fixed,
blocking order: stage -> execute -> capture -> post-process -> persist.
Nothing is rolled back when a step fails; files written by earlier
steps stay on disk.

For DefinedFlags the shape of the flags (which of input, output,
capture, target and the post-processing source are present) is looked
up in PLANS, which lists every legal shape explicitly.
"""

import logging
import sys
from dataclasses import dataclass

from catbash.config import get_temp_path
from catbash.constants import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    NO_ARGS_MESSAGE,
    TEMP_FILE_CAUTION,
)
from catbash.errors import InternalLogicError
from catbash.executor import catbash, catbash_capture, post_process
from catbash.files import delete_file, retrieve_file, stage_file
from catbash.resolver import (
    DefaultBehavior,
    DefinedFlags,
    ExecutionMode,
    FlagSet,
    InvalidCombination,
    NoArgs,
)

logger = logging.getLogger(__name__)

# Where the input text is staged before execution
STAGE_NONE = None
STAGE_TEMP = "temp"
STAGE_OUTPUT = "output"

# What happens to the executed output
CAPTURE_NONE = None
CAPTURE_MIRROR = "mirror"  # capture, echo to the terminal, discard
CAPTURE_SILENT = "silent"  # capture for post-processing or persistence


@dataclass(frozen=True)
class Plan:
    """The ordered steps run for one flag shape."""

    stage: str | None
    capture: str | None
    post_process: bool = False
    persist: bool = False


# (input, output, capture, target, args source) -> Plan
Shape = tuple[bool, bool, bool, bool, str | None]

PLANS: dict[Shape, Plan] = {
    # Fire-and-forget
    (True, False, False, False, None): Plan(STAGE_TEMP, CAPTURE_NONE),
    (False, True, False, False, None): Plan(STAGE_NONE, CAPTURE_NONE),
    (True, True, False, False, None): Plan(STAGE_OUTPUT, CAPTURE_NONE),
    # Capture only
    (False, True, True, False, None): Plan(STAGE_NONE, CAPTURE_MIRROR),
    (False, True, True, True, None): Plan(STAGE_NONE, CAPTURE_SILENT, persist=True),
    (True, True, True, False, None): Plan(STAGE_OUTPUT, CAPTURE_MIRROR),
    (True, True, True, True, None): Plan(STAGE_OUTPUT, CAPTURE_SILENT, persist=True),
    # Inline post-processing
    (False, True, True, False, "inline"): Plan(STAGE_NONE, CAPTURE_SILENT, post_process=True),
    (False, True, True, True, "inline"): Plan(STAGE_NONE, CAPTURE_SILENT, post_process=True, persist=True),
    (True, True, True, False, "inline"): Plan(STAGE_OUTPUT, CAPTURE_SILENT, post_process=True),
    (True, True, True, True, "inline"): Plan(STAGE_OUTPUT, CAPTURE_SILENT, post_process=True, persist=True),
    # File-sourced post-processing
    (False, True, True, False, "file"): Plan(STAGE_NONE, CAPTURE_SILENT, post_process=True),
    (False, True, True, True, "file"): Plan(STAGE_NONE, CAPTURE_SILENT, post_process=True, persist=True),
    (True, True, True, False, "file"): Plan(STAGE_OUTPUT, CAPTURE_SILENT, post_process=True),
    (True, True, True, True, "file"): Plan(STAGE_OUTPUT, CAPTURE_SILENT, post_process=True, persist=True),
}


def flag_shape(flags: FlagSet) -> Shape:
    """Reduce flags to the presence pattern used as a PLANS key."""
    return (
        flags.input is not None,
        flags.output is not None,
        flags.capture,
        flags.target is not None,
        flags.args_source,
    )


def plan_for(flags: FlagSet) -> Plan:
    """Look up the plan for a flag shape.

    Raises:
        InternalLogicError: If the shape has no entry. Validated flags
            always have one.
    """
    shape = flag_shape(flags)
    plan = PLANS.get(shape)
    if plan is None:
        raise InternalLogicError(f"No execution plan for flag shape {shape}")
    return plan


def _post_processing_expression(flags: FlagSet) -> str:
    if flags.args_source == "file":
        return retrieve_file(flags.arguments_from_file)
    return flags.arguments


def _run_temp(flags: FlagSet) -> None:
    print(TEMP_FILE_CAUTION)
    temp_path = get_temp_path()
    stage_file(flags.input, temp_path)
    catbash(temp_path)
    delete_file(temp_path)


def execute_plan(flags: FlagSet, plan: Plan) -> None:
    """Run the steps of a plan against the given flags.

    Args:
        flags: Validated flags supplying paths and expressions.
        plan: The steps to run.

    Raises:
        CatbashError: From the first failing step.
    """
    logger.debug("Executing %s", plan)

    if plan.stage == STAGE_TEMP:
        _run_temp(flags)
        return

    if plan.stage == STAGE_OUTPUT:
        stage_file(flags.input, flags.output)

    if plan.capture is CAPTURE_NONE:
        catbash(flags.output)
        return

    mirror_capture = plan.capture == CAPTURE_MIRROR
    value = catbash_capture(flags.output, mirror=mirror_capture)
    if mirror_capture:
        return

    if plan.post_process:
        expression = _post_processing_expression(flags)
        value = post_process(value, expression, mirror=not plan.persist)

    if plan.persist:
        stage_file(value, flags.target)


def run_defined_flags(flags: FlagSet) -> int:
    """Run the plan matching the flag shape.

    Returns:
        EXIT_SUCCESS once every step has completed.
    """
    execute_plan(flags, plan_for(flags))
    return EXIT_SUCCESS


def run_mode(mode: ExecutionMode) -> int:
    """Drive the pipeline for a resolved mode.

    Args:
        mode: The mode returned by resolve_mode.

    Returns:
        Process exit code.

    Raises:
        CatbashError: If a step of a DefinedFlags pipeline fails.
    """
    if isinstance(mode, NoArgs):
        print(NO_ARGS_MESSAGE)
        return EXIT_SUCCESS

    if isinstance(mode, DefaultBehavior):
        # Script status is advisory here, catbash() already warned
        catbash(mode.path)
        return EXIT_SUCCESS

    if isinstance(mode, DefinedFlags):
        return run_defined_flags(mode.flags)

    if isinstance(mode, InvalidCombination):
        print(f"Error: {mode.message}", file=sys.stderr)
        return EXIT_FAILURE

    raise InternalLogicError(f"Unknown execution mode: {mode!r}")
