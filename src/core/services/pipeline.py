"""Pipeline execution.

The executor folds a buffer through an ordered sequence of operations and
records every stage in a `PipelineResult`. It never prints and never
retries: the first failing stage ends the fold and later stages are not
attempted. UI layers observe the run through `PipelineHooks`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from core.domain.models import Operation, PipelineResult, StageResult
from core.transforms import apply_operation_safe

logger = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (tracing, progress)."""

    stage_done: Callable[[StageResult], None] | None = None
    stage_failed: Callable[[StageResult], None] | None = None


def run_pipeline(
    data: bytes,
    operations: Sequence[Operation],
    *,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    hooks = hooks or PipelineHooks()
    result = PipelineResult(input=data)

    current = data
    for index, operation in enumerate(operations):
        output, error = apply_operation_safe(operation, current)
        stage = StageResult(
            index=index,
            operation=operation,
            input_size=len(current),
            output=output,
            error=error,
        )
        result.stages.append(stage)

        if error is not None:
            logger.debug("stage %d (%s) failed: %s", index, operation.value, error)
            if hooks.stage_failed:
                hooks.stage_failed(stage)
            break

        assert output is not None
        logger.debug(
            "stage %d (%s): %d -> %d bytes",
            index,
            operation.value,
            len(current),
            len(output),
        )
        if hooks.stage_done:
            hooks.stage_done(stage)
        current = output

    return result

