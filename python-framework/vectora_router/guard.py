from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Union, Awaitable, Tuple

from .outcome import Outcome, is_pending, settle

logger = logging.getLogger(__name__)

class CanActivate(ABC):
    """
    Base class for view models that gate their own activation.

    Inheriting is optional: any view model with a zero-argument
    `can_activate` attribute is asked in the same way.
    """

    @abstractmethod
    def can_activate(self) -> Union[bool, Awaitable[bool]]:
        """
        Return `True` to let the incoming view be mounted.
        Return `False`, raise, or settle to `False` to cancel the navigation.
        """
        pass

class CanDeactivate(ABC):
    """
    Base class for view models that gate leaving their route.

    Typically used to protect unsaved changes. As with `CanActivate`,
    duck-typed view models are asked as well.
    """

    @abstractmethod
    def can_deactivate(self) -> Union[bool, Awaitable[bool]]:
        """
        Return `True` to let the outgoing view be torn down.
        Return `False`, raise, or settle to `False` to cancel the navigation.
        """
        pass

class GuardState(str, Enum):
    """What asking a view model for its guard produced."""
    ABSENT = "absent"
    SYNC = "sync"
    ASYNC = "async"
    FAILED = "failed"

def inspect_guard(view_model: Any, guard_name: str) -> Tuple[GuardState, Outcome]:
    """
    Invoke a view model's guard, if it has one.

    Args:
        view_model: The view model to ask. `None` counts as having no guard.
        guard_name: Attribute name of the guard, e.g. "can_deactivate".

    Returns:
        The capability state and the outcome to fold. Failures are already
        converted into `False`.
    """
    guard = getattr(view_model, guard_name, None)
    if not callable(guard):
        return GuardState.ABSENT, True

    try:
        result = guard()
        if not is_pending(result):
            return GuardState.SYNC, bool(result)
    except Exception:
        logger.warning(
            "Guard %s of %s raised; treating as denial",
            guard_name,
            type(view_model).__name__,
            exc_info=True,
            extra={"guard": guard_name},
        )
        return GuardState.FAILED, False

    return GuardState.ASYNC, settle(result)

def resolve_guard(view_model: Any, guard_name: str) -> Outcome:
    """Invoke a guard and return only its outcome."""
    state, outcome = inspect_guard(view_model, guard_name)
    logger.debug("Guard %s on %s: %s", guard_name, type(view_model).__name__, state.value)
    return outcome
