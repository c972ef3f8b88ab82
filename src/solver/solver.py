import asyncio
import json
import logging
import random
from pathlib import Path

from src.solver.errors import InsufficientCapacity, UnsatisfiableAssignment
from src.solver.preprocess import apply_pinned_rules, prune_rules
from src.solver.search import backtrack_search, separation_pairs
from src.solver.units import build_units
from src.solver.validation import collect_diagnostics, validate_assignment

logger = logging.getLogger(__name__)

CONFIG_PATH = Path('data') / 'solver_config.json'

DEFAULT_CONFIG = {
    "seed": None,
    "imbalance_margin": 2,
    "report_diagnostics": True,
}


def load_config(path=CONFIG_PATH):
    config = dict(DEFAULT_CONFIG)
    if Path(path).exists():
        with open(path, 'r', encoding='utf-8') as f:
            config.update(json.load(f))
    return config


class SeatingSolver:
    def __init__(self, people, vehicles, rules, config=None, rng=None):
        if not people:
            raise ValueError("At least one person is required")
        if not vehicles:
            raise ValueError("At least one vehicle is required")
        for v in vehicles:
            if int(v['capacity']) < 1:
                raise ValueError(f"Vehicle {v['name']} must have at least one seat")

        # Work on copies, the caller keeps ownership of its lists
        self.people = [dict(p) for p in people]
        self.vehicles = [dict(v, capacity=int(v['capacity'])) for v in vehicles]
        self.rules = [dict(r) for r in rules]
        self.vehicle_map = {v['id']: v for v in self.vehicles}

        if config is None:
            config = load_config()
        else:
            config = {**DEFAULT_CONFIG, **config}

        self.seed = config.get('seed')
        self.imbalance_margin = config.get('imbalance_margin', 2)
        self.report_diagnostics = config.get('report_diagnostics', True)
        self.rng = rng if rng is not None else random.Random(self.seed)

    def check_total_capacity(self):
        total = sum(v['capacity'] for v in self.vehicles)
        if total < len(self.people):
            raise InsufficientCapacity(
                f"Only {total} seats for {len(self.people)} people.",
                seats=total,
                people=len(self.people),
            )

    def solve(self):
        """
        Runs the full pipeline and returns (assignments, diagnostics).

        assignments: vehicle id -> {"people": [...], "capacity": n}, in vehicle input order
        diagnostics: list of advisory {"rule", "details"} dicts

        Raises a SeatingError subclass when no valid assignment is produced.
        """
        self.check_total_capacity()

        # 1. Pinned seats and groups anchored to them
        buckets, assigned, pending_groups = apply_pinned_rules(self.people, self.vehicles, self.rules)
        logger.debug("Pinned %d people, %d groups left for search", len(assigned), len(pending_groups))

        # 2. Placement units
        units = build_units(self.people, assigned, pending_groups, self.rng)

        # 3. Backtracking search
        capacities = {v_id: v['capacity'] for v_id, v in self.vehicle_map.items()}
        pairs = separation_pairs(prune_rules(self.rules, self.people, self.vehicles))
        solved = backtrack_search(buckets, capacities, units, pairs, self.rng)
        if solved is None:
            raise UnsatisfiableAssignment(
                "Could not find a valid assignment with the given rules and people. "
                "Try removing some constraints."
            )

        assignments = {
            v_id: {"people": solved[v_id], "capacity": capacities[v_id]}
            for v_id in self.vehicle_map
        }

        # 4. Validation
        validate_assignment(assignments)

        diagnostics = []
        if self.report_diagnostics:
            diagnostics = collect_diagnostics(assignments, len(self.people), self.imbalance_margin)

        return assignments, diagnostics


def solve(people, vehicles, rules, config=None, rng=None):
    return SeatingSolver(people, vehicles, rules, config=config, rng=rng).solve()


async def solve_async(people, vehicles, rules, config=None, rng=None):
    """Yields to the event loop once, then runs the blocking search in a worker thread."""
    await asyncio.sleep(0)
    return await asyncio.to_thread(solve, people, vehicles, rules, config=config, rng=rng)
