import logging

from src.rule_descriptions import RULE_TYPES
from src.solver.errors import PinnedSeatConflict

logger = logging.getLogger(__name__)


def prune_rules(rules, people, vehicles):
    """
    Drops rules the solver cannot act on:
    1. Rules naming a person or vehicle that no longer exists.
    2. 'separate' rules that do not name exactly two distinct people.
    3. 'together' rules naming fewer than two distinct people.
    4. Rules with an unknown type.

    Repeated names in a kept 'together' rule are collapsed, first mention wins.
    """
    person_names = {p['name'] for p in people}
    vehicle_ids = {v['id'] for v in vehicles}

    kept = []
    for rule in rules:
        rule_type = rule.get('type')

        if rule_type == RULE_TYPES['SPECIFIC_CAR']:
            if rule.get('person') in person_names and rule.get('carId') in vehicle_ids:
                kept.append(rule)
            continue

        members = rule.get('people') or []
        if rule_type not in (RULE_TYPES['TOGETHER'], RULE_TYPES['SEPARATE']):
            continue
        if not members or not all(p in person_names for p in members):
            continue
        if rule_type == RULE_TYPES['SEPARATE'] and (len(members) != 2 or members[0] == members[1]):
            continue
        if rule_type == RULE_TYPES['TOGETHER']:
            distinct = list(dict.fromkeys(members))
            if len(distinct) < 2:
                continue
            if len(distinct) != len(members):
                rule = {**rule, 'people': distinct}
        kept.append(rule)

    dropped = len(rules) - len(kept)
    if dropped:
        logger.debug("Ignoring %d rule(s) with unknown or malformed references", dropped)
    return kept


def apply_pinned_rules(people, vehicles, rules):
    """
    Places everyone that can be placed without search.

    Returns (buckets, assigned, pending_groups):
    - buckets: vehicle id -> list of names already seated
    - assigned: set of names seated here
    - pending_groups: member lists of 'together' rules left for the search

    Pinned seats are checked as they are taken: a 'specificCar' rule
    targeting a full vehicle fails immediately with PinnedSeatConflict.
    """
    vehicle_map = {v['id']: v for v in vehicles}
    rules = prune_rules(rules, people, vehicles)

    buckets = {v['id']: [] for v in vehicles}
    assigned = set()
    pinned_to = {}

    # 1. Specific vehicle rules
    for rule in rules:
        if rule['type'] != RULE_TYPES['SPECIFIC_CAR']:
            continue
        person = rule['person']
        car_id = rule['carId']
        vehicle = vehicle_map[car_id]

        if len(buckets[car_id]) >= vehicle['capacity']:
            raise PinnedSeatConflict(
                f"Cannot place {person} in {vehicle['name']}, it's already full.",
                person=person,
                vehicle_id=car_id,
            )
        buckets[car_id].append(person)
        assigned.add(person)
        # First pin wins for group lookups; a repeated pin still takes a seat
        pinned_to.setdefault(person, car_id)

    # 2. Together rules anchored by a pinned member
    pending_groups = []
    for rule in rules:
        if rule['type'] != RULE_TYPES['TOGETHER']:
            continue
        members = list(rule['people'])
        anchors = {pinned_to[p] for p in members if p in pinned_to}

        if not anchors:
            pending_groups.append(members)
            continue

        if len(anchors) > 1:
            raise PinnedSeatConflict(
                f"Group [{', '.join(members)}] is pinned to more than one vehicle.",
                people=members,
            )

        car_id = anchors.pop()
        vehicle = vehicle_map[car_id]
        unassigned = [p for p in members if p not in assigned]
        if len(buckets[car_id]) + len(unassigned) > vehicle['capacity']:
            raise PinnedSeatConflict(
                f"Group [{', '.join(members)}] cannot fit in their assigned car.",
                people=members,
                vehicle_id=car_id,
            )
        for p in unassigned:
            buckets[car_id].append(p)
            assigned.add(p)

    return buckets, assigned, pending_groups
