"""Tests for the demo CLI."""

from powgate.demo import main


def test_demo_round_trip(capsys):
    assert main(["2", "--timelimit", "30"]) == 0
    out = capsys.readouterr().out
    assert "Solution is valid!" in out
    assert "criteria: 00" in out


def test_demo_zero_difficulty(capsys):
    assert main(["0"]) == 1
    assert "Difficulty must be greater than 0" in capsys.readouterr().out


def test_demo_stale(capsys):
    assert main(["1", "--timelimit", "0"]) == 1
    assert "timelimit_exceeded" in capsys.readouterr().out
