"""Shared test configuration."""

import pytest


class AsyncNext:
    """Continuation whose results settle later, like a pipeline that awaits."""

    def __init__(self):
        self.result = None
        self.calls = 0

    async def _settle(self, value):
        return value

    def __call__(self):
        self.calls += 1
        self.result = True
        return self._settle(True)

    def cancel(self):
        self.calls += 1
        self.result = "cancel"
        return self._settle("cancel")


@pytest.fixture
def async_next():
    return AsyncNext()
