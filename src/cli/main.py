"""CLI principal (Typer).

    bytepipe [OPERATION ...] (-f PATH | -i TEXT) [--output PATH]

The command only wires adapters and services together: parse, resolve the
input, run the pipeline, write the result. Every `BytePipeError` is caught
once here and turned into a message on stderr plus its exit code.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.input_resolver import resolve_input
from adapters.output_writer import print_output, write_output_file
from cli.ui_components import add_stage_row, build_stages_table, print_error
from core.config import AppSettings
from core.domain.errors import ArgumentError, BytePipeError
from core.domain.models import InputSource, Operation
from core.logging_setup import configure_logging
from core.services.pipeline import PipelineHooks, run_pipeline

app = typer.Typer(
    add_completion=False,
    help="Apply an ordered chain of base64/hex transforms to a file or a literal string.",
)

_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def get_version() -> str:
    try:
        return package_version("bytepipe")
    except PackageNotFoundError:
        return "0.0.0+dev"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bytepipe {get_version()}")
        raise typer.Exit()


def build_input_source(in_file: Path | None, in_string: str | None) -> InputSource:
    """Validate the `-f` / `-i` pair into an `InputSource`."""

    try:
        return InputSource(file_path=in_file, literal=in_string)
    except ValidationError as exc:
        errors = exc.errors()
        message = str(errors[0]["msg"]) if errors else str(exc)
        raise ArgumentError(message.removeprefix("Value error, ")) from exc


def load_settings() -> AppSettings:
    """Build `AppSettings`, reporting a bad variable as an `ArgumentError`."""

    try:
        return AppSettings()
    except ValidationError as exc:
        errors = exc.errors()
        if not errors:
            raise ArgumentError(f"Invalid configuration: {exc}") from exc
        first = errors[0]
        field_name = ".".join(str(part) for part in first["loc"])
        variable = f"{AppSettings.model_config.get('env_prefix', '')}{field_name}".upper()
        raise ArgumentError(f"Invalid configuration {variable}: {first['msg']}") from exc


@app.command()
def run_command(
    ctx: typer.Context,
    operations: Optional[List[Operation]] = typer.Argument(
        None,
        help="Operations applied left to right.",
        show_default=False,
    ),
    in_file: Optional[Path] = typer.Option(
        None,
        "-f",
        "--file",
        help="Read input bytes from this file.",
    ),
    in_string: Optional[str] = typer.Option(
        None,
        "-i",
        "--input",
        help="Use this literal string (UTF-8) as input.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        help="Write the result bytes to this file instead of stdout.",
    ),
    trace: bool = typer.Option(False, "--trace", help="Print a table of pipeline stages to stderr."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Run OPERATIONS over the input and print or save the result."""

    try:
        settings = load_settings()
    except ArgumentError as exc:
        print_error(_console, exc)
        raise typer.Exit(code=exc.exit_code) from exc
    configure_logging("DEBUG" if verbose else settings.log_level, console=_console)

    try:
        source = build_input_source(in_file, in_string)
    except ArgumentError as exc:
        raise typer.BadParameter(exc.message, ctx=ctx, param_hint="'-f' / '-i'") from exc

    pipeline = tuple(operations or ())
    logger.debug("pipeline: %s", " -> ".join(op.value for op in pipeline) or "(empty)")

    show_trace = trace or settings.trace
    table = build_stages_table()
    hooks = PipelineHooks()
    if show_trace:
        hooks = PipelineHooks(
            stage_done=lambda stage: add_stage_row(table, stage),
            stage_failed=lambda stage: add_stage_row(table, stage),
        )

    try:
        data = resolve_input(source)
        result = run_pipeline(data, pipeline, hooks=hooks)
        if show_trace:
            _console.print(table)
        final = result.unwrap()

        if output is not None:
            write_output_file(final, output, create_parents=settings.create_output_dirs)
        else:
            print_output(final)
    except BytePipeError as exc:
        logger.debug("run failed with %s", type(exc).__name__)
        print_error(_console, exc)
        raise typer.Exit(code=exc.exit_code) from exc


def run() -> None:
    app()


if __name__ == "__main__":
    run()
