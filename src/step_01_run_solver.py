import json
import pathlib
import sys

# Add project root to sys.path to allow running as script
root_dir = str(pathlib.Path(__file__).parent.parent)
if root_dir not in sys.path:
    sys.path.append(root_dir)

from src.rule_descriptions import describe_rule
from src.solver.errors import SeatingError
from src.solver.solver import SeatingSolver, load_config

def load_json(path):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)

def save_json(data, path):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=4, ensure_ascii=False)

def run_solver(base_dir=None):
    base_dir = pathlib.Path(base_dir) if base_dir else pathlib.Path(__file__).parent.parent
    data_dir = base_dir / "data"
    results_dir = data_dir / "results"

    # Ensure results directory exists
    results_dir.mkdir(parents=True, exist_ok=True)

    roster_file = data_dir / "roster.json"
    print(f"Loading roster from {roster_file}...")
    roster = load_json(roster_file)
    people = roster.get("people", [])
    vehicles = roster.get("vehicles", [])
    rules = roster.get("rules", [])

    print(f"{len(people)} people, {len(vehicles)} vehicles, {len(rules)} rules")
    for rule in rules:
        print(f"  - {describe_rule(rule, vehicles)}")

    config = load_config(data_dir / "solver_config.json")

    print("Solving...")
    try:
        assignments, diagnostics = SeatingSolver(people, vehicles, rules, config=config).solve()
    except SeatingError as e:
        print(f"No assignment: [{e.kind}] {e.message}")
        save_json(e.to_dict(), results_dir / "error.json")
        return None

    output_path = results_dir / "assignments.json"
    save_json(assignments, output_path)
    print(f"Assignments saved to {output_path}")

    diagnostics_path = results_dir / "diagnostics.json"
    save_json(diagnostics, diagnostics_path)
    print(f"Diagnostics saved to {diagnostics_path}")

    vehicle_names = {v['id']: v['name'] for v in vehicles}
    for car_id, car in assignments.items():
        print(f"{vehicle_names[car_id]} ({len(car['people'])}/{car['capacity']}): {', '.join(car['people'])}")

    return assignments

if __name__ == "__main__":
    run_solver()
