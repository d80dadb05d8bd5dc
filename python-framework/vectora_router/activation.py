"""
Vectora Router Activation Steps - ask views whether a navigation may happen.

Two pipeline steps run before any view is torn down or mounted:

- CanDeactivatePreviousStep asks every outgoing view model `can_deactivate`.
- CanActivateNextStep asks every incoming view model `can_activate`.

Each step invokes every guard in scope, AND-combines the outcomes and then
calls exactly one of `next()` or `next.cancel()`, returning whatever that
call returns. When every guard answered synchronously the step finishes
synchronously; otherwise `run` returns a coroutine.

Usage:
    step = CanDeactivatePreviousStep()
    result = step.run(instruction, next)
    if is_pending(result):
        result = await result
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from .config import RouterConfig
from .errors import InvalidContinuationError
from .guard import resolve_guard
from .navigation import invokes_lifecycle
from .outcome import Outcome, combine_outcomes, is_pending

logger = logging.getLogger(__name__)

def _check_continuation(next: Any) -> None:
    if not callable(next) or not callable(getattr(next, "cancel", None)):
        raise InvalidContinuationError(next)

def _active_instruction(component: Any) -> Any:
    """The nested instruction a component's child router is currently showing."""
    child_router = getattr(component, "child_router", None)
    return getattr(child_router, "current_instruction", None)

def _continue(permitted: bool, next: Callable[..., Any], step: str) -> Any:
    if permitted:
        logger.debug("%s permitted navigation", step, extra={"step": step})
        return next()
    logger.info("%s cancelled navigation", step, extra={"step": step})
    return next.cancel()

async def _continue_when_settled(outcome: Any, next: Callable[..., Any], step: str) -> Any:
    permitted = await outcome
    result = _continue(permitted, next, step)
    if is_pending(result):
        return await result
    return result

class _GuardStep(ABC):
    """Shared run loop: collect outcomes, combine, continue."""

    guard_name: str

    def run(self, instruction: Any, next: Callable[..., Any]) -> Any:
        """
        Evaluate every guard in scope and continue the pipeline.

        Args:
            instruction: The pending NavigationInstruction.
            next: Continuation; `next()` advances, `next.cancel()` aborts.

        Returns:
            Whatever the invoked continuation returns, or a coroutine
            settling to it when any guard was asynchronous.
        """
        _check_continuation(next)

        outcomes: List[Outcome] = []
        self._collect(instruction, outcomes)
        combined = combine_outcomes(outcomes)

        step = type(self).__name__
        if is_pending(combined):
            logger.debug("%s waiting on asynchronous guards", step)
            return _continue_when_settled(combined, next, step)
        return _continue(combined, next, step)

    @abstractmethod
    def _collect(self, instruction: Any, outcomes: List[Outcome]) -> None:
        """Append the outcome of every guard in scope to `outcomes`."""
        pass

class CanDeactivatePreviousStep(_GuardStep):
    """
    Asks the outgoing side of a navigation for permission to leave.

    For a viewport whose current component hosts a router that is already
    showing a nested route, the deepest active view models are asked instead
    of the component itself. A pending child plan is evaluated as well.
    """

    def __init__(self, config: Optional[RouterConfig] = None) -> None:
        config = config or RouterConfig()
        self.guard_name = config.deactivate_guard

    def _collect(self, instruction: Any, outcomes: List[Outcome]) -> None:
        plan = getattr(instruction, "plan", None) or {}

        for name, view_port_plan in plan.items():
            strategy = getattr(view_port_plan, "strategy", None)
            if not invokes_lifecycle(strategy):
                logger.debug(
                    "Viewport %r bypasses %s (strategy=%r)", name, self.guard_name, strategy,
                    extra={"viewport": name, "guard": self.guard_name, "strategy": strategy},
                )
                continue

            prev_component = getattr(view_port_plan, "prev_component", None)
            active = _active_instruction(prev_component)
            if active is not None:
                self._collect_active(active, outcomes)
            else:
                outcomes.append(resolve_guard(getattr(prev_component, "view_model", None), self.guard_name))

            child = getattr(view_port_plan, "child_navigation_instruction", None)
            if child is not None:
                self._collect(child, outcomes)

    def _collect_active(self, instruction: Any, outcomes: List[Outcome]) -> None:
        view_port_instructions = getattr(instruction, "view_port_instructions", None) or {}

        for view_port_instruction in view_port_instructions.values():
            component = getattr(view_port_instruction, "component", None)
            active = _active_instruction(component)
            if active is not None:
                self._collect_active(active, outcomes)
            else:
                outcomes.append(resolve_guard(getattr(component, "view_model", None), self.guard_name))

class CanActivateNextStep(_GuardStep):
    """Asks the incoming side of a navigation for permission to enter."""

    def __init__(self, config: Optional[RouterConfig] = None) -> None:
        config = config or RouterConfig()
        self.guard_name = config.activate_guard

    def _collect(self, instruction: Any, outcomes: List[Outcome]) -> None:
        plan = getattr(instruction, "plan", None) or {}
        view_port_instructions = getattr(instruction, "view_port_instructions", None) or {}

        for name, view_port_instruction in view_port_instructions.items():
            if name not in plan:
                continue

            strategy = getattr(plan[name], "strategy", None)
            if not invokes_lifecycle(strategy):
                logger.debug(
                    "Viewport %r bypasses %s (strategy=%r)", name, self.guard_name, strategy,
                    extra={"viewport": name, "guard": self.guard_name, "strategy": strategy},
                )
                continue

            component = getattr(view_port_instruction, "component", None)
            outcomes.append(resolve_guard(getattr(component, "view_model", None), self.guard_name))
