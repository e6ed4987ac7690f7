"""Componentes de UI para CLI (Rich).

Separa la presentación (tablas, mensajes de error) de la lógica del comando.
Everything here writes to the diagnostics console (stderr); the pipeline
result itself never goes through Rich.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.errors import BytePipeError
from core.domain.models import StageResult


def build_stages_table() -> Table:
    """Crea la tabla de etapas para `--trace`."""

    table = Table(title="Pipeline stages")
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Operation", style="cyan", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")
    table.add_column("Status")
    return table


def add_stage_row(table: Table, stage: StageResult) -> None:
    out_size = "-" if stage.output_size is None else str(stage.output_size)
    if stage.ok:
        status = Text("ok", style="green")
    else:
        status = Text(f"failed: {stage.error.message}", style="red")  # type: ignore[union-attr]
    table.add_row(
        str(stage.index),
        f"{stage.operation.value} ({stage.operation.label()})",
        "decode" if stage.operation.is_decoder else "encode",
        str(stage.input_size),
        out_size,
        status,
    )


def print_error(console: Console, error: BytePipeError) -> None:
    message = Text()
    message.append("Error: ", style="bold red")
    message.append(str(error))
    console.print(message)
