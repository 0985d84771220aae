from __future__ import annotations

import pytest


class ScriptedRandom:
    """Hands out pre-set rolls in order, checking each against the requested range."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        assert self.values, "ran out of scripted rolls"
        value = self.values.pop(0)
        assert a <= value <= b
        self.calls.append((a, b))
        return value


class ForbiddenRandom:
    def randint(self, a, b):
        raise AssertionError("random source must not be consulted")


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def forbidden_rng():
    return ForbiddenRandom()
