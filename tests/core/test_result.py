"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings and has_warning()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pysms.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: int


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=3),
            info={"steps": 3},
            timing={"total_seconds": 0.01},
            backend_name="greedy_badness",
        )
        assert result.params.value == 3
        assert result.info["steps"] == 3
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "greedy_badness"

    def test_timing_none(self):
        result = Result(params=FakeParams(1), info={}, timing=None, backend_name="x")
        assert result.timing is None

    def test_default_warnings_empty(self):
        result = Result(params=FakeParams(1), info={}, timing=None, backend_name="x")
        assert result.warnings == ()


class TestImmutability:

    def test_cannot_reassign_params(self):
        result = Result(params=FakeParams(1), info={}, timing=None, backend_name="x")
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(2)


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(1), info={}, timing=None, backend_name="x",
            warnings=("2 duplicate entries overwritten (last value kept)",),
        )
        assert result.has_warning("duplicate")
        assert not result.has_warning("terminator")
