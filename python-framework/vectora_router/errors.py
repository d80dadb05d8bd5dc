"""
Vectora Router Errors.

Guard code never produces these: a guard that raises is a denial. They are
raised only when the engine itself is driven incorrectly.
"""

from __future__ import annotations

class RouterError(Exception):
    """Base class for router errors."""

class InvalidContinuationError(RouterError, TypeError):
    """The continuation handed to a step cannot advance or cancel."""

    def __init__(self, continuation: object) -> None:
        self.continuation = continuation
        super().__init__(
            f"Continuation {continuation!r} must be callable and expose a callable 'cancel'"
        )

class PipelineError(RouterError):
    """A pipeline step misused its continuation."""
