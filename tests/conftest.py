from __future__ import annotations

from types import ModuleType

import pytest

from stateflow import lazy, strict


@pytest.fixture(params=[strict, lazy], ids=["strict", "lazy"])
def engine(request: pytest.FixtureRequest) -> ModuleType:
    """Both engines expose the same operation names."""
    return request.param


@pytest.fixture
def append_marker(engine: ModuleType):
    """Build a computation that appends marker to a list log and returns it."""

    def build(marker: int):
        return engine.bind(
            lambda _: engine.inject(marker),
            engine.modify(lambda log: log + [marker]),
        )

    return build
