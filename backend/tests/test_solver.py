"""Tests for the reference solver."""

import hashlib

import pytest

from powgate.services.solver import solve_challenge


def test_solution_meets_criteria():
    solution = solve_challenge("some-payload", "000")

    assert solution.data == "some-payload"
    assert solution.hash.startswith("000")
    expected = hashlib.sha256(b"some-payload" + solution.added_value.encode()).hexdigest()
    assert solution.hash == expected


def test_first_counter_is_returned():
    """Test the solver returns the smallest decimal counter that works."""
    solution = solve_challenge("some-payload", "0")
    winner = int(solution.added_value)

    for counter in range(winner):
        digest = hashlib.sha256(f"some-payload{counter}".encode()).hexdigest()
        assert not digest.startswith("0")


def test_empty_criteria_solved_immediately():
    assert solve_challenge("anything", "").added_value == "0"


def test_iteration_limit():
    with pytest.raises(RuntimeError):
        solve_challenge("some-payload", "0" * 64, max_iterations=10)
