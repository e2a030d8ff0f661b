"""catbash CLI entry point.

Provides the Typer CLI interface: parses flags into a FlagSet, resolves
the execution mode, and runs the pipeline.
"""

import logging
import sys
from typing import List, Optional

import typer

from catbash import __version__
from catbash.config import configure_logging
from catbash.constants import INPUT_HELP
from catbash.errors import CatbashError
from catbash.pipeline import run_mode
from catbash.resolver import FlagSet, resolve_mode

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="catbash",
    help="Write a command to a file, then pipe the file into bash",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Display version, then exit."""
    if value:
        print(f"catbash version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    files: Optional[List[str]] = typer.Argument(
        None,
        help="File to execute with default behavior. Only 1 is expected",
        show_default=False,
    ),
    input: Optional[str] = typer.Option(
        None, "--input", "-i", help=INPUT_HELP,
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output file that will be catbashed",
    ),
    capture: bool = typer.Option(
        False, "--capture", "-c", help="Capture the output of the executed file",
    ),
    target: Optional[str] = typer.Option(
        None, "--target", "-t",
        help="File to write the captured (or post-processed) output to",
    ),
    arguments: Optional[str] = typer.Option(
        None, "--arguments", "-a",
        help='Shell syntax applied to the captured output, e.g. "| grep hi"',
    ),
    arguments_from_file: Optional[str] = typer.Option(
        None, "--arguments-from-file", "-f",
        help="File containing the shell syntax applied to the captured output",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Catbash a command: stage it in a file, then cat the file into bash."""
    configure_logging()

    flags = FlagSet(
        input=input,
        output=output,
        capture=capture,
        target=target,
        arguments=arguments,
        arguments_from_file=arguments_from_file,
        files=tuple(files or ()),
    )

    try:
        mode = resolve_mode(flags)
        exit_code = run_mode(mode)
    except CatbashError as e:
        logger.debug("Pipeline aborted: %r", e)
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(e.exit_code)

    raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
