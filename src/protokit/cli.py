"""Typer-based command line interface for the protokit helpers.

Each command wraps one helper so that test data can be produced from a shell
script: random digits, strings and numbers, bit patterns, timestamps, the
platform label, key-value parsing and command execution.

Exit codes
----------
0 success
1 malformed key-value input
3 execution error (command could not be run or timed out)
4 configuration error
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from .config import ToolboxConfig, load_config
from .gen import RandomDataGenerator
from .numeric import number_as_binary, to_string
from .numtypes import int_type, real_type
from .parse import deserialize_key_value
from .system import execute, get_platform_name
from .utils.datefmt import get_current_timestamp
from .utils.errors import ConfigurationError, ExecutionError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

app = typer.Typer(
    name="protokit",
    help="Prototyping and test-data helpers. Use 'protokit COMMAND --help' for details.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None, seed: int | None = None) -> ToolboxConfig:
    """Load configuration, apply ``seed`` and configure logging."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, ConfigurationError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    if seed is not None:
        cfg.generation.seed = seed
    configure_logging(cfg.logging.level, trace=cfg.logging.trace)
    return cfg


def _generator(config_path: Path | None, seed: int | None) -> RandomDataGenerator:
    return RandomDataGenerator.from_config(_load(config_path, seed))


_CONFIG_HELP = "YAML config to override defaults"
_SEED_HELP = "Seed for reproducible output"


@app.callback()
def main() -> None:
    """Entry point for the protokit command group."""
    pass


@app.command()
def digits(
    length: int = typer.Argument(..., help="Number of decimal digits"),  # noqa: B008
    type_name: Optional[str] = typer.Option(  # noqa: B008
        None, "--type", help="Integer type bounding the length (e.g. int32, uint64)"
    ),
    count: int = typer.Option(1, "--count", "-n", min=1, help="How many numbers to print"),  # noqa: B008
    seed: Optional[int] = typer.Option(None, "--seed", help=_SEED_HELP),  # noqa: B008
    config_path: Optional[Path] = typer.Option(None, "--config", help=_CONFIG_HELP),  # noqa: B008
) -> None:
    """Print random numbers with exactly LENGTH digits."""

    gen = _generator(config_path, seed)
    try:
        kind = int_type(type_name) if type_name else None
        for _ in range(count):
            typer.echo(to_string(gen.number_of_length(length, kind)))
    except ConfigurationError as exc:
        _safe_exit(4, str(exc))


@app.command()
def string(
    length: int = typer.Argument(..., help="Length of each string"),  # noqa: B008
    alphabet: Optional[str] = typer.Option(  # noqa: B008
        None, "--alphabet", "-a", help="Characters to draw from (default from config)"
    ),
    count: int = typer.Option(1, "--count", "-n", min=1, help="How many strings to print"),  # noqa: B008
    seed: Optional[int] = typer.Option(None, "--seed", help=_SEED_HELP),  # noqa: B008
    config_path: Optional[Path] = typer.Option(None, "--config", help=_CONFIG_HELP),  # noqa: B008
) -> None:
    """Print random strings of LENGTH characters."""

    gen = _generator(config_path, seed)
    try:
        for _ in range(count):
            typer.echo(gen.string(length, alphabet))
    except ConfigurationError as exc:
        _safe_exit(4, str(exc))


@app.command()
def integer(
    lo: int = typer.Argument(..., help="Inclusive lower bound"),  # noqa: B008
    hi: int = typer.Argument(..., help="Inclusive upper bound"),  # noqa: B008
    seed: Optional[int] = typer.Option(None, "--seed", help=_SEED_HELP),  # noqa: B008
    config_path: Optional[Path] = typer.Option(None, "--config", help=_CONFIG_HELP),  # noqa: B008
) -> None:
    """Print a random integer between LO and HI inclusive."""

    gen = _generator(config_path, seed)
    try:
        typer.echo(to_string(gen.integer(lo, hi)))
    except ConfigurationError as exc:
        _safe_exit(4, str(exc))


@app.command()
def real(
    lo: float = typer.Argument(..., help="Inclusive lower bound"),  # noqa: B008
    hi: float = typer.Argument(..., help="Exclusive upper bound"),  # noqa: B008
    type_name: str = typer.Option("float64", "--type", help="float32 or float64"),  # noqa: B008
    seed: Optional[int] = typer.Option(None, "--seed", help=_SEED_HELP),  # noqa: B008
    config_path: Optional[Path] = typer.Option(None, "--config", help=_CONFIG_HELP),  # noqa: B008
) -> None:
    """Print a random real in [LO, HI)."""

    gen = _generator(config_path, seed)
    try:
        typer.echo(repr(gen.real(lo, hi, real_type=real_type(type_name))))
    except ConfigurationError as exc:
        _safe_exit(4, str(exc))


@app.command()
def binary(
    number: int = typer.Argument(..., help="Integer to render"),  # noqa: B008
    full: bool = typer.Option(False, "--full", help="Render every bit, not just the low half"),  # noqa: B008
    type_name: str = typer.Option("int32", "--type", help="Integer type giving the width"),  # noqa: B008
) -> None:
    """Print the bit pattern of NUMBER."""

    try:
        typer.echo(number_as_binary(number, shorten=not full, int_type=int_type(type_name)))
    except ConfigurationError as exc:
        _safe_exit(4, str(exc))


@app.command()
def timestamp() -> None:
    """Print the current local time as HH:MM:SS.mmm."""

    typer.echo(get_current_timestamp())


@app.command()
def platform() -> None:
    """Print the host platform label (empty when unknown)."""

    typer.echo(get_platform_name())


@app.command()
def parse(
    text: str = typer.Argument(..., help="Input such as 'name=john&age=50'"),  # noqa: B008
    element_sep: str = typer.Option("=", "--sep", help="Separator between key and value"),  # noqa: B008
    item_sep: str = typer.Option("&", "--item-sep", help="Separator between pairs"),  # noqa: B008
) -> None:
    """Parse key-value TEXT and print one KEY<TAB>VALUE line per pair."""

    pairs: dict[str, str] = {}
    try:
        ok = deserialize_key_value(text, element_sep, item_sep, pairs)
    except ConfigurationError as exc:
        _safe_exit(4, str(exc))
    for key, value in pairs.items():
        typer.echo(f"{key}\t{value}")
    if not ok:
        _safe_exit(1, "malformed key-value input")


@app.command("exec")
def exec_command(
    command: str = typer.Argument(..., help="Shell command to run"),  # noqa: B008
    timeout: Optional[float] = typer.Option(  # noqa: B008
        None, "--timeout", help="Seconds before giving up (default from config)"
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", help=_CONFIG_HELP),  # noqa: B008
) -> None:
    """Run COMMAND through the shell and print its standard output."""

    cfg = _load(config_path)
    limit = timeout if timeout is not None else cfg.execute.timeout_seconds
    try:
        output = execute(command, timeout=limit, encoding=cfg.execute.encoding)
    except ExecutionError as exc:
        _safe_exit(3, str(exc))
    typer.echo(output, nl=False)
