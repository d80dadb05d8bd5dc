"""
Vectora Router Pipeline - runs navigation steps in order.

Each step receives the instruction and a fresh `Next` continuation and must
call exactly one of `next()` or `next.cancel()`. The pipeline stops at the
first step that cancels.

Usage:
    pipeline = build_guard_pipeline()
    result = await pipeline.run(instruction)
    if result.completed:
        swap_views(instruction)
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Protocol

from .activation import CanActivateNextStep, CanDeactivatePreviousStep
from .config import RouterConfig
from .errors import PipelineError
from .outcome import is_pending

logger = logging.getLogger(__name__)

CANCEL = "cancel"

class PipelineStatus(str, Enum):
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELED = "canceled"

class Step(Protocol):
    def run(self, instruction: Any, next: Next) -> Any: ...

class Next:
    """
    Continuation handed to a single step.

    `next()` advances and returns `True`; `next.cancel()` aborts and returns
    `"cancel"`. Only one of them may be called, once.
    """

    def __init__(self) -> None:
        self.status = PipelineStatus.RUNNING

    def __call__(self) -> bool:
        self._settle(PipelineStatus.COMPLETED)
        return True

    def cancel(self) -> str:
        self._settle(PipelineStatus.CANCELED)
        return CANCEL

    def _settle(self, status: PipelineStatus) -> None:
        if self.status is not PipelineStatus.RUNNING:
            raise PipelineError(f"Continuation already {self.status.value}")
        self.status = status

    def __repr__(self) -> str:
        return f"Next(status={self.status.value!r})"

@dataclass
class PipelineResult:
    """Final state of a pipeline run."""
    status: PipelineStatus
    instruction: Any

    @property
    def completed(self) -> bool:
        return self.status is PipelineStatus.COMPLETED

class Pipeline:
    """Ordered list of navigation steps."""

    def __init__(self, steps: Optional[List[Step]] = None) -> None:
        self.steps: List[Step] = list(steps or [])

    def add_step(self, step: Step) -> Pipeline:
        """Append a step (Builder pattern)."""
        self.steps.append(step)
        return self

    async def run(self, instruction: Any) -> PipelineResult:
        """
        Run every step until one cancels.

        Raises:
            PipelineError: If a step returns without calling its continuation.
        """
        for step in self.steps:
            name = type(step).__name__
            next = Next()

            result = step.run(instruction, next)
            if is_pending(result):
                await result

            if next.status is PipelineStatus.RUNNING:
                raise PipelineError(f"Step {name} returned without calling next() or next.cancel()")

            if next.status is PipelineStatus.CANCELED:
                logger.info("Navigation cancelled by %s", name)
                return PipelineResult(PipelineStatus.CANCELED, instruction)

        logger.debug("Navigation completed after %d step(s)", len(self.steps))
        return PipelineResult(PipelineStatus.COMPLETED, instruction)

    def run_sync(self, instruction: Any) -> PipelineResult:
        """Run the pipeline on a new event loop. Not usable inside a running loop."""
        return asyncio.run(self.run(instruction))

def build_guard_pipeline(config: Optional[RouterConfig] = None) -> Pipeline:
    """Pipeline asking outgoing views first, then incoming views."""
    config = config or RouterConfig()
    return Pipeline([
        CanDeactivatePreviousStep(config),
        CanActivateNextStep(config),
    ])
