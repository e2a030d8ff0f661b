"""Constants and defaults for catbash.

Centralizes module-level constants, defaults, and user-facing messages
used across the catbash codebase. Individual modules import from here
rather than defining constants inline.
"""


# =============================================================================
# Exit codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_FAILURE = 1  # Validation error or propagated execution failure


# =============================================================================
# Execution defaults
# =============================================================================

# Shell used to launch every command line (the "cat file | interpreter" pipe
# and post-processing lines alike)
LAUNCHER_SHELL = "sh"

# Interpreter the staged file content is piped into
DEFAULT_INTERPRETER = "bash"

# Fixed staging path for input-only runs, deleted after execution
DEFAULT_TEMP_FILE = "temp.txt"

# Encoding for staged, retrieved, and captured text
TEXT_ENCODING = "utf-8"


# =============================================================================
# Logging
# =============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_FORMAT = "catbash: %(levelname)s: %(name)s: %(message)s"


# =============================================================================
# Messages
# =============================================================================

NO_ARGS_MESSAGE = "No arguments given, nothing to do."

TEMP_FILE_CAUTION = (
    "Avoid using -i flag alone, the application might not be able to "
    "remove the temporary file created to execute"
)

NON_ZERO_STATUS_WARNING = "Command exited with non-zero status"

MIXED_FILES_AND_FLAGS_MESSAGE = (
    "Cannot mix positional files with flags. Use either flags OR a single file."
)

UNDEFINED_BEHAVIOR_MESSAGE = "Undefined behavior"

INPUT_HELP = (
    "Input argument to write to a file that will be catbashed. Accepts a "
    'single word and "multiple words" formats (e.g. ls and "ls -l" are both '
    "valid). Call without other flags to create a tmp file that gets deleted "
    "immediately after."
)
