import logging

from src.rule_descriptions import RULE_TYPES

logger = logging.getLogger(__name__)


def separation_pairs(rules):
    """Collects every 'separate' rule as an unordered pair of names."""
    return {frozenset(r['people']) for r in rules if r.get('type') == RULE_TYPES['SEPARATE']}


def fits(bucket, unit, capacity):
    return len(bucket) + len(unit) <= capacity


def violates_separation(bucket, unit, pairs):
    for person in unit:
        for occupant in bucket:
            if frozenset((person, occupant)) in pairs:
                return True
    return False


def _shuffled_indices(count, rng):
    order = list(range(count))
    rng.shuffle(order)
    return iter(order)


def backtrack_search(buckets, capacities, units, pairs, rng):
    """
    Depth-first backtracking over the unit list.

    buckets: vehicle id -> names already seated (not modified)
    capacities: vehicle id -> seat count
    units: ordered list of name lists to place
    pairs: set of frozenset name pairs that may not share a vehicle
    rng: random.Random driving the vehicle order at every node

    Snapshots are tuples of tuples. Placing a unit rebuilds only the bucket it
    lands in, the other buckets are shared with the parent snapshot.
    The choice-point stack holds one frame per placed unit: the snapshot the
    unit is placed into and the iterator over vehicles still to try.

    Returns a fresh vehicle id -> list of names mapping, or None when every
    vehicle choice for every unit has been exhausted.
    """
    vehicle_ids = list(buckets)
    caps = [capacities[v] for v in vehicle_ids]
    root = tuple(tuple(buckets[v]) for v in vehicle_ids)

    if not units:
        return {v: list(bucket) for v, bucket in zip(vehicle_ids, root)}

    stack = [(root, _shuffled_indices(len(vehicle_ids), rng))]
    steps = 0

    while stack:
        snapshot, choices = stack[-1]
        depth = len(stack) - 1
        unit = units[depth]

        for idx in choices:
            bucket = snapshot[idx]
            if not fits(bucket, unit, caps[idx]):
                continue
            if violates_separation(bucket, unit, pairs):
                continue

            steps += 1
            placed = snapshot[:idx] + (bucket + tuple(unit),) + snapshot[idx + 1:]
            if depth + 1 == len(units):
                logger.debug("Search finished after %d placements", steps)
                return {v: list(b) for v, b in zip(vehicle_ids, placed)}

            stack.append((placed, _shuffled_indices(len(vehicle_ids), rng)))
            break
        else:
            # Every vehicle tried for this unit: backtrack
            stack.pop()

    logger.debug("Search exhausted after %d placements", steps)
    return None
