"""
Vectora Router Navigation Model - the instruction tree read by guard steps.

A pending navigation is described by a NavigationInstruction produced by the
planner. The guard steps only read it: nothing here is mutated while guards
are evaluated.

Usage:
    from vectora_router.navigation import (
        ActivationStrategy, Component, NavigationInstruction, ViewPortPlan,
    )

    instruction = NavigationInstruction(plan={
        "default": ViewPortPlan(
            strategy=ActivationStrategy.INVOKE_LIFECYCLE,
            prev_component=Component(view_model=EditorPage()),
        )
    })
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

class ActivationStrategy(str, Enum):
    """
    Policy controlling whether lifecycle guards run for a viewport.

    Only INVOKE_LIFECYCLE asks the view model. Any other value, including
    strings the planner invents, lets the viewport through unconditionally.
    """
    NO_CHANGE = "no-change"
    INVOKE_LIFECYCLE = "invoke-lifecycle"
    REPLACE = "replace"

def invokes_lifecycle(strategy: Any) -> bool:
    """True when the strategy requires the viewport's guard to be asked."""
    return strategy == ActivationStrategy.INVOKE_LIFECYCLE

@dataclass
class ChildRouter:
    """Router hosted by a component, possibly already showing a nested route."""
    current_instruction: Optional[NavigationInstruction] = None

@dataclass
class Component:
    """A view model plus the child router it hosts, if any."""
    view_model: Any = None
    child_router: Optional[ChildRouter] = None

@dataclass
class ViewPortInstruction:
    """Incoming half of a viewport: the component about to be activated."""
    component: Optional[Component] = None

@dataclass
class ViewPortPlan:
    """Outgoing half of a viewport."""
    strategy: Any = ActivationStrategy.INVOKE_LIFECYCLE
    prev_component: Optional[Component] = None
    child_navigation_instruction: Optional[NavigationInstruction] = None

@dataclass
class NavigationInstruction:
    """Root description of one pending route transition."""
    plan: Dict[str, ViewPortPlan] = field(default_factory=dict)
    view_port_instructions: Dict[str, ViewPortInstruction] = field(default_factory=dict)

    def __repr__(self) -> str:
        return (
            f"NavigationInstruction(plan={list(self.plan)!r}, "
            f"view_port_instructions={list(self.view_port_instructions)!r})"
        )
