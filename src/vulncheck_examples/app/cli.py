from __future__ import annotations

"""vulncheck_examples.app.cli
=================================
Command-line dispatcher powered by Typer.

Usage examples
--------------
$ vulncheck-examples list                      # list every example
$ vulncheck-examples run index-vulnrichment    # run one example
$ vulncheck-examples "Index Vulnrichment"      # shorthand, name is normalized
$ vulncheck-examples --log-level DEBUG backup  # show request logging on stderr
"""

import logging
from enum import Enum
from typing import Optional, Sequence

import typer
from typing_extensions import Annotated

from ..config.loader import load_env
from .registry import Registry, default_registry

logger = logging.getLogger(__name__)

PROG = "vulncheck-examples"
LIST_COMMANDS = ("list", "ls", "ll")
HELP_COMMANDS = ("help", "-h", "--help")

# Module-level so tests can swap it out.
REGISTRY: Registry = default_registry()

app = typer.Typer(add_completion=False, help="VulnCheck SDK examples")


class LogLevel(str, Enum):
    OFF = "OFF"          # special value: logging disabled
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"
    NOTSET = "NOTSET"


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def show_usage() -> None:
    typer.echo("SDK Test CLI")
    typer.echo("Usage:")
    typer.echo(f"  {PROG} list                    # List all available test functions")
    typer.echo(f"  {PROG} run <function-name>     # Run a specific test function")
    typer.echo(f"  {PROG} <function-name>         # Run a specific test function (shorthand)")
    typer.echo(f"  {PROG} help                    # Show this help message")
    typer.echo()
    typer.echo("Options:")
    typer.echo("  --log-level LEVEL   OFF, CRITICAL, ERROR, WARNING (default), INFO, DEBUG, NOTSET")
    typer.echo()
    typer.echo("Examples:")
    typer.echo(f"  {PROG} list")
    typer.echo(f"  {PROG} run index-vulnrichment")
    typer.echo(f"  {PROG} index-vulnrichment")


def list_examples(registry: Registry | None = None) -> None:
    registry = registry if registry is not None else REGISTRY
    typer.echo("Available test functions:")
    typer.echo()
    for example in registry:
        typer.echo(f"  {example.name:<25} - {example.description}")
    typer.echo()
    typer.echo(f"Usage: {PROG} run <function-name>")
    typer.echo(f"   Or: {PROG} <function-name>")


def run_example(name: str, registry: Registry | None = None) -> bool:
    """Run one example by (normalized) name. Returns False if no such example exists."""
    registry = registry if registry is not None else REGISTRY
    example = registry.get(name)
    if example is None:
        typer.echo(f"Error: Function '{name}' not found")
        typer.echo(f"Use '{PROG} list' to see available functions")
        return False

    typer.echo(f"Running: {example.description}")
    typer.echo("-" * 50)
    logger.info("Running example %s", example.name)
    example.function()
    return True


def dispatch(args: Sequence[str], registry: Registry | None = None) -> None:
    """Route raw positional arguments to usage, listing or an example."""
    if not args:
        show_usage()
        return

    command = args[0]
    if command in LIST_COMMANDS:
        list_examples(registry)
    elif command == "run":
        if len(args) < 2:
            typer.echo("Error: Please specify a function name to run")
            typer.echo(f"Usage: {PROG} run <function-name>")
            typer.echo(f"Use '{PROG} list' to see available functions")
            return
        run_example(args[1], registry)
    elif command in HELP_COMMANDS:
        show_usage()
    else:
        # Anything else is taken as an example name
        run_example(command, registry)


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

def configure_logging(log_level: LogLevel | None) -> None:
    if log_level in (None, LogLevel.OFF):
        return

    level_name = log_level.value if isinstance(log_level, LogLevel) else str(log_level)
    level = logging.getLevelNamesMapping().get(level_name.upper(), logging.WARNING)

    # Configure the package logger derived from this module name
    if __package__:
        package_name = __package__.split(".", 1)[0]
    else:
        package_name = "vulncheck_examples"
    pkg_logger = logging.getLogger(package_name)

    has_stream = any(isinstance(h, logging.StreamHandler) for h in pkg_logger.handlers)
    if not has_stream:
        handler = logging.StreamHandler()  # default: sys.stderr
        handler.setFormatter(logging.Formatter("%(levelname)s | %(name)s | %(message)s"))
        pkg_logger.addHandler(handler)

    # Stop propagation to the root logger so records are not printed twice
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

@app.command(
    context_settings={
        "help_option_names": [],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    }
)
def main(
    args: Annotated[
        Optional[list[str]],
        typer.Argument(
            help="list | ls | ll | run <function-name> | <function-name> | help",
            show_default=False,
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            case_sensitive=False,
            help="Set log level (OFF, CRITICAL, ERROR, WARNING, INFO, DEBUG, NOTSET). Default: WARNING",
        ),
    ] = LogLevel.WARNING,
) -> None:
    """Run VulnCheck API examples by name."""
    configure_logging(log_level)
    load_env()
    logger.debug("Running SDK Examples...")
    dispatch(args or [])


if __name__ == "__main__":  # pragma: no cover
    app()
