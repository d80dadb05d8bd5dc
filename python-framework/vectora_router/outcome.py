"""
Vectora Router Outcomes - AND-combination of guard results.

A guard outcome is either a plain bool or an awaitable that settles to one.
Combining outcomes stays synchronous for as long as every input is
synchronous, so a navigation made only of synchronous guards never touches
the event loop.

Example:
    >>> combine_outcomes([True, True])
    True
    >>> combine_outcomes([True, asyncio.sleep(0, result=False)])
    <coroutine object ...>    # settles to False
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Iterable, List, Union

logger = logging.getLogger(__name__)

Outcome = Union[bool, Awaitable[bool]]

def is_pending(value: Any) -> bool:
    """True when the outcome has not settled yet and must be awaited."""
    return inspect.isawaitable(value)

async def settle(outcome: Awaitable[Any]) -> bool:
    """
    Await a pending outcome, converting failure into denial.

    Only ``Exception`` is converted; task cancellation still propagates.
    """
    try:
        return bool(await outcome)
    except Exception:
        logger.warning("Guard outcome failed while settling; treating as denial", exc_info=True)
        return False

def combine_outcomes(outcomes: Iterable[Outcome]) -> Outcome:
    """
    AND-reduce guard outcomes.

    Args:
        outcomes: Outcomes already produced by invoking every guard in scope.

    Returns:
        A bool when every outcome is a bool, otherwise a coroutine that
        settles to the combined bool.
    """
    produced = list(outcomes)
    result = True

    for index, outcome in enumerate(produced):
        if is_pending(outcome):
            return _combine_pending(result, produced[index:])
        result = result and bool(outcome)

    return result

async def _combine_pending(result: bool, remaining: List[Outcome]) -> bool:
    for outcome in remaining:
        if is_pending(outcome):
            # Settled even when already denied so the guard runs to completion.
            value = await settle(outcome)
        else:
            value = bool(outcome)
        result = result and value
    return result
