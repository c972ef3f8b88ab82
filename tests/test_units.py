import random

from src.solver.units import build_units
from tests.helpers import make_people


def test_singletons_for_unassigned_people(rng):
    people = make_people("A", "B", "C")
    units = build_units(people, assigned={"B"}, pending_groups=[], rng=rng)
    assert sorted(units) == [["A"], ["C"]]


def test_group_members_are_not_singletons(rng):
    people = make_people("A", "B", "C", "D")
    units = build_units(people, assigned=set(), pending_groups=[["A", "B"]], rng=rng)
    assert sorted(units) == [["A", "B"], ["C"], ["D"]]


def test_overlapping_groups_are_kept_as_written(rng):
    people = make_people("A", "B", "C")
    units = build_units(people, assigned=set(), pending_groups=[["A", "B"], ["B", "C"]], rng=rng)
    assert sorted(units) == [["A", "B"], ["B", "C"]]


def test_unit_order_follows_seed():
    people = make_people(*"ABCDEFGHIJ")
    first = build_units(people, set(), [], random.Random(7))
    second = build_units(people, set(), [], random.Random(7))
    assert first == second
    assert sorted(first) == [[n] for n in "ABCDEFGHIJ"]


def test_pending_groups_not_mutated(rng):
    groups = [["A", "B"]]
    units = build_units(make_people("A", "B"), set(), groups, rng)
    units[0].append("Z")
    assert groups == [["A", "B"]]
