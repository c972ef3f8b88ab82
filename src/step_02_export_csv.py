import json
import pathlib
import sys

import pandas as pd

# Add project root to sys.path to allow running as script
root_dir = str(pathlib.Path(__file__).parent.parent)
if root_dir not in sys.path:
    sys.path.append(root_dir)

def load_json(path):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)

def build_rows(assignments, vehicles):
    vehicle_names = {v['id']: v['name'] for v in vehicles}
    rows = []
    for car_id, car in assignments.items():
        for seat, person in enumerate(car['people'], start=1):
            rows.append({
                "Vehicle ID": car_id,
                "Vehicle": vehicle_names.get(car_id, car_id),
                "Seat": seat,
                "Person": person,
            })
    return pd.DataFrame(rows, columns=["Vehicle ID", "Vehicle", "Seat", "Person"])

def export_csv(base_dir=None):
    base_dir = pathlib.Path(base_dir) if base_dir else pathlib.Path(".")
    data_dir = base_dir / "data"
    results_dir = data_dir / "results"

    assignments_path = results_dir / "assignments.json"
    if not assignments_path.exists():
        print(f"Error: Assignments file not found at {assignments_path}. Run solver first.")
        return None

    assignments = load_json(assignments_path)
    roster = load_json(data_dir / "roster.json")

    df = build_rows(assignments, roster.get("vehicles", []))

    # Sanitize Output (Remove newlines that break simple parsers)
    for col in ["Vehicle", "Person"]:
        df[col] = df[col].astype(str).replace(r'[\r\n]+', ' ', regex=True)

    output_path = results_dir / "assignments.csv"
    df.to_csv(output_path, index=False, encoding='utf-8-sig')
    print(f"Exported {len(df)} seats to {output_path}")
    return output_path

if __name__ == "__main__":
    export_csv()
