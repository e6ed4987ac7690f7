"""Modelos del dominio (Pydantic v2 + dataclasses).

- `Operation` is the closed set of transforms a pipeline can contain.
- `InputSource` validates the "exactly one of file or literal" rule at the
  edge, before any I/O happens.
- `StageResult` / `PipelineResult` describe a pipeline run as data so the
  failure of a stage is inspectable instead of being thrown through the fold.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.domain.errors import TransformError


class Operation(str, Enum):
    """Transforms accepted on the command line, valued by their CLI token."""

    BASE64_ENCODE = "b64enc"
    BASE64_DECODE = "b64dec"
    HEX_DECODE = "hex2bin"
    HEX_ENCODE = "bin2hex"

    @property
    def is_decoder(self) -> bool:
        return self in (Operation.BASE64_DECODE, Operation.HEX_DECODE)

    def label(self) -> str:
        """Human readable label for tables and logging."""

        labels = {
            Operation.BASE64_ENCODE: "base64 encode",
            Operation.BASE64_DECODE: "base64 decode",
            Operation.HEX_ENCODE: "hex encode",
            Operation.HEX_DECODE: "hex decode",
        }
        return labels[self]


class InputSource(BaseModel):
    """Where the initial buffer comes from: a file path or a literal string."""

    model_config = ConfigDict(frozen=True)

    file_path: Path | None = Field(
        default=None,
        description="File whose raw bytes are the pipeline input.",
    )
    literal: str | None = Field(
        default=None,
        description="Literal text; its UTF-8 encoding is the pipeline input.",
    )

    @model_validator(mode="after")
    def _exactly_one(self) -> "InputSource":
        has_file = self.file_path is not None
        has_literal = self.literal is not None
        if has_file and has_literal:
            raise ValueError("-f and -i are mutually exclusive")
        if not has_file and not has_literal:
            raise ValueError("one of -f or -i is required")
        return self

    @property
    def is_file(self) -> bool:
        return self.file_path is not None


@dataclass(frozen=True)
class StageResult:
    """Outcome of applying one operation inside a pipeline run."""

    index: int
    operation: Operation
    input_size: int
    output: bytes | None = None
    error: TransformError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def output_size(self) -> int | None:
        return None if self.output is None else len(self.output)


@dataclass
class PipelineResult:
    """Output of a pipeline invocation."""

    input: bytes
    stages: list[StageResult] = field(default_factory=list)

    @property
    def failed_stage(self) -> StageResult | None:
        for stage in self.stages:
            if not stage.ok:
                return stage
        return None

    @property
    def ok(self) -> bool:
        return self.failed_stage is None

    @property
    def output(self) -> bytes | None:
        if not self.ok:
            return None
        if not self.stages:
            return self.input
        return self.stages[-1].output

    def unwrap(self) -> bytes:
        """Return the final buffer or raise the error of the failing stage."""

        failed = self.failed_stage
        if failed is not None:
            assert failed.error is not None
            raise failed.error
        output = self.output
        assert output is not None
        return output
