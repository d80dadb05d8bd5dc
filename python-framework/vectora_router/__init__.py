"""
Vectora Router - navigation guards for nested view routers

Example usage:
    from vectora_router import (
        ActivationStrategy, CanDeactivatePreviousStep, Component,
        NavigationInstruction, Next, ViewPortPlan,
    )

    class EditorPage:
        dirty = True

        def can_deactivate(self):
            return not self.dirty

    instruction = NavigationInstruction(plan={
        "default": ViewPortPlan(
            strategy=ActivationStrategy.INVOKE_LIFECYCLE,
            prev_component=Component(view_model=EditorPage()),
        )
    })

    CanDeactivatePreviousStep().run(instruction, Next())  # -> "cancel"
"""

from .navigation import (
    ActivationStrategy,
    ChildRouter,
    Component,
    NavigationInstruction,
    ViewPortInstruction,
    ViewPortPlan,
)
from .outcome import Outcome, combine_outcomes, is_pending
from .guard import CanActivate, CanDeactivate, GuardState, inspect_guard, resolve_guard
from .activation import CanActivateNextStep, CanDeactivatePreviousStep
from .pipeline import CANCEL, Next, Pipeline, PipelineResult, PipelineStatus, build_guard_pipeline
from .config import RouterConfig
from .errors import InvalidContinuationError, PipelineError, RouterError
from .observability import setup_logging

__version__ = "0.1.0"
__all__ = [
    "ActivationStrategy", "ChildRouter", "Component", "NavigationInstruction",
    "ViewPortInstruction", "ViewPortPlan",
    "Outcome", "combine_outcomes", "is_pending",
    "CanActivate", "CanDeactivate", "GuardState", "inspect_guard", "resolve_guard",
    "CanActivateNextStep", "CanDeactivatePreviousStep",
    "CANCEL", "Next", "Pipeline", "PipelineResult", "PipelineStatus", "build_guard_pipeline",
    "RouterConfig", "InvalidContinuationError", "PipelineError", "RouterError",
    "setup_logging", "__version__",
]
