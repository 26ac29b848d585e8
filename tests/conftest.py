"""Shared fixtures: deterministic ids and clock, and a repo wired to them"""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from docstore.crud.memory_repo import MemoryRepo


T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class StepClock:
    """Returns T0, T0+1s, T0+2s, ... on successive calls."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture(name="ids")
def ids_fixture():
    """Id factory yielding doc-1, doc-2, ..."""
    counter = count(1)
    return lambda: f"doc-{next(counter)}"


@pytest.fixture(name="t0")
def t0_fixture():
    """First timestamp the clock fixture hands out."""
    return T0


@pytest.fixture(name="clock")
def clock_fixture():
    return StepClock()


@pytest.fixture(name="repo")
def repo_fixture(ids, clock):
    """Empty MemoryRepo with deterministic ids and timestamps."""
    return MemoryRepo(id_factory=ids, clock=clock)
