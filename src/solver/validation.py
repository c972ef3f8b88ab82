import logging
from collections import Counter

from src.solver.errors import InternalConsistencyError

logger = logging.getLogger(__name__)

UNBALANCED = "Unbalanced Distribution"
LONE_TRAVELER = "Lone Traveler"


def validate_assignment(assignment):
    """
    Final check before an assignment leaves the solver.
    Raises InternalConsistencyError if a person is seated twice or a
    vehicle holds more people than it has seats.
    """
    seated = [p for car in assignment.values() for p in car['people']]
    counts = Counter(seated)
    duplicates = sorted(name for name, n in counts.items() if n > 1)
    if duplicates:
        raise InternalConsistencyError(
            f"Assignment places {', '.join(duplicates)} in more than one seat.",
            people=duplicates,
        )

    for car_id, car in assignment.items():
        if len(car['people']) > car['capacity']:
            raise InternalConsistencyError(
                f"Vehicle {car_id} holds {len(car['people'])} people but has {car['capacity']} seats.",
                vehicle_id=car_id,
            )


def collect_diagnostics(assignment, people_count, margin=2):
    """
    Advisory signals about a valid assignment. Never raises.

    - Unbalanced Distribution: the fullest vehicle has more than `margin`
      people over the emptiest non-empty one, with more people than vehicles.
    - Lone Traveler: someone rides alone while more vehicles have free
      seats than there are lone travellers.
    """
    diagnostics = []
    cars = list(assignment.values())
    occupancies = [len(c['people']) for c in cars]
    non_empty = [o for o in occupancies if o > 0]

    if non_empty:
        max_occ = max(occupancies)
        min_occ = min(non_empty)
        if max_occ > min_occ + margin and people_count > len(cars):
            diagnostics.append({
                "rule": UNBALANCED,
                "details": f"Occupancy ranges from {min_occ} to {max_occ}",
            })

    lone = [car_id for car_id, c in assignment.items() if len(c['people']) == 1]
    with_space = [c for c in cars if len(c['people']) < c['capacity']]
    if lone and len(with_space) > len(lone):
        diagnostics.append({
            "rule": LONE_TRAVELER,
            "details": f"Alone in: {', '.join(lone)}",
        })

    for d in diagnostics:
        logger.warning("%s: %s", d['rule'], d['details'])
    return diagnostics
