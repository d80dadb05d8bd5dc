import asyncio
from types import SimpleNamespace

import pytest

from vectora_router import (
    CanActivate,
    CanDeactivate,
    CanDeactivatePreviousStep,
    Component,
    GuardState,
    NavigationInstruction,
    Next,
    ViewPortPlan,
    inspect_guard,
    resolve_guard,
)


class EditorPage(CanDeactivate):
    def __init__(self, dirty):
        self.dirty = dirty

    def can_deactivate(self):
        return not self.dirty


class AsyncGate(CanActivate):
    async def can_activate(self):
        await asyncio.sleep(0)
        return True


def test_missing_guard_permits():
    assert inspect_guard(SimpleNamespace(), "can_deactivate") == (GuardState.ABSENT, True)


def test_missing_view_model_permits():
    assert resolve_guard(None, "can_activate") is True


def test_non_callable_guard_counts_as_absent():
    state, outcome = inspect_guard(SimpleNamespace(can_activate=False), "can_activate")
    assert state is GuardState.ABSENT
    assert outcome is True


def test_sync_guard_result():
    assert inspect_guard(EditorPage(dirty=False), "can_deactivate") == (GuardState.SYNC, True)
    assert inspect_guard(EditorPage(dirty=True), "can_deactivate") == (GuardState.SYNC, False)


def test_sync_result_is_coerced_to_bool():
    assert resolve_guard(SimpleNamespace(can_activate=lambda: None), "can_activate") is False
    assert resolve_guard(SimpleNamespace(can_activate=lambda: "ok"), "can_activate") is True


def test_raising_guard_is_denial(caplog):
    def guard():
        raise KeyError("missing")

    with caplog.at_level("WARNING", logger="vectora_router"):
        state, outcome = inspect_guard(SimpleNamespace(can_deactivate=guard), "can_deactivate")

    assert state is GuardState.FAILED
    assert outcome is False
    assert "treating as denial" in caplog.text


class Ambiguous:
    def __bool__(self):
        raise ValueError("truth value is ambiguous")


def test_result_that_cannot_be_coerced_is_denial():
    state, outcome = inspect_guard(SimpleNamespace(can_deactivate=lambda: Ambiguous()), "can_deactivate")

    assert state is GuardState.FAILED
    assert outcome is False


def test_step_cancels_when_guard_result_cannot_be_coerced():
    view_model = SimpleNamespace(can_deactivate=lambda: Ambiguous())
    instruction = NavigationInstruction(plan={"first": ViewPortPlan(prev_component=Component(view_model=view_model))})

    assert CanDeactivatePreviousStep().run(instruction, Next()) == "cancel"


@pytest.mark.asyncio
async def test_async_result_that_cannot_be_coerced_is_denial():
    async def guard():
        return Ambiguous()

    assert await resolve_guard(SimpleNamespace(can_activate=guard), "can_activate") is False


@pytest.mark.asyncio
async def test_async_guard_result():
    state, outcome = inspect_guard(AsyncGate(), "can_activate")

    assert state is GuardState.ASYNC
    assert await outcome is True


@pytest.mark.asyncio
async def test_rejected_async_guard_is_denial():
    async def guard():
        raise RuntimeError("nope")

    outcome = resolve_guard(SimpleNamespace(can_activate=guard), "can_activate")
    assert await outcome is False


def test_guard_base_classes_are_abstract():
    with pytest.raises(TypeError):
        CanActivate()
    with pytest.raises(TypeError):
        CanDeactivate()
