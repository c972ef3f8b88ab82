import logging

import pytest

from src.solver.errors import InternalConsistencyError
from src.solver.validation import LONE_TRAVELER, UNBALANCED, collect_diagnostics, validate_assignment


def car(people, capacity):
    return {"people": list(people), "capacity": capacity}


def test_valid_assignment_passes():
    validate_assignment({"x": car("AB", 2), "y": car("C", 3)})


def test_duplicate_person_is_rejected():
    with pytest.raises(InternalConsistencyError) as excinfo:
        validate_assignment({"x": car("AB", 2), "y": car("BC", 3)})
    assert excinfo.value.details["people"] == ["B"]
    assert excinfo.value.kind == "InternalConsistencyError"


def test_over_capacity_is_rejected():
    with pytest.raises(InternalConsistencyError, match="3 seats"):
        validate_assignment({"x": car("ABCD", 3)})


def test_unbalanced_distribution_flagged():
    assignment = {"x": car("ABCDE", 5), "y": car("F", 5)}
    rules = [d['rule'] for d in collect_diagnostics(assignment, people_count=6)]
    assert UNBALANCED in rules


def test_balanced_distribution_not_flagged():
    assignment = {"x": car("ABC", 5), "y": car("DE", 5)}
    assert collect_diagnostics(assignment, people_count=5) == []


def test_empty_vehicles_ignored_for_balance():
    assignment = {"x": car("ABC", 3), "y": car("", 3)}
    rules = [d['rule'] for d in collect_diagnostics(assignment, people_count=3)]
    assert UNBALANCED not in rules


def test_lone_traveler_flagged_when_avoidable(caplog):
    assignment = {"x": car("A", 4), "y": car("BC", 4), "z": car("", 2)}
    with caplog.at_level(logging.WARNING):
        diagnostics = collect_diagnostics(assignment, people_count=3)
    assert diagnostics == [{"rule": LONE_TRAVELER, "details": "Alone in: x"}]
    assert "Lone Traveler" in caplog.text


def test_lone_traveler_not_flagged_without_spare_cars():
    assignment = {"x": car("ABCDE", 5), "y": car("F", 5)}
    rules = [d['rule'] for d in collect_diagnostics(assignment, people_count=6)]
    assert LONE_TRAVELER not in rules
