import json
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from src.rule_descriptions import describe_rule
from src.solver.errors import SeatingError
from src.solver.solver import load_config as load_solver_config, solve_async

logger = logging.getLogger(__name__)

# Initialize FastAPI
app = FastAPI(title="Carpool Seating API")

# Setup CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for local dev
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Paths
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
CONFIG_PATH = DATA_DIR / "solver_config.json"

# --- Models ---
class PersonModel(BaseModel):
    id: str
    name: str

class VehicleModel(BaseModel):
    id: str
    name: str
    capacity: int = Field(ge=1)

class RuleModel(BaseModel):
    type: str
    id: Optional[str] = None
    people: Optional[List[str]] = None
    person: Optional[str] = None
    carId: Optional[str] = None

class SolveRequest(BaseModel):
    people: List[PersonModel]
    vehicles: List[VehicleModel]
    rules: List[RuleModel] = []
    seed: Optional[int] = None

class ConfigUpdate(BaseModel):
    seed: Optional[int] = None
    imbalance_margin: int = 2
    report_diagnostics: bool = True

# --- Helpers ---
def load_config() -> Dict[str, Any]:
    return load_solver_config(CONFIG_PATH)

def save_config(config: Dict[str, Any]):
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_PATH, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=4)

# --- Endpoints ---

@app.get("/api/config")
def get_config():
    return load_config()

@app.post("/api/config")
def update_config(update: ConfigUpdate):
    config = load_config()
    config["seed"] = update.seed
    config["imbalance_margin"] = update.imbalance_margin
    config["report_diagnostics"] = update.report_diagnostics
    save_config(config)
    return {"status": "updated", "config": config}

@app.post("/api/solve")
async def run_solve(request: SolveRequest):
    if not request.people or not request.vehicles:
        raise HTTPException(status_code=422, detail="People and vehicles must not be empty")

    people = [p.model_dump() for p in request.people]
    vehicles = [v.model_dump() for v in request.vehicles]
    rules = [r.model_dump(exclude_none=True) for r in request.rules]

    config = load_config()
    if request.seed is not None:
        config["seed"] = request.seed

    try:
        assignments, diagnostics = await solve_async(people, vehicles, rules, config=config)
    except SeatingError as e:
        logger.info("Solve failed: %s", e.message)
        raise HTTPException(status_code=409, detail=e.to_dict())

    return {
        "assignments": assignments,
        "diagnostics": diagnostics,
        "rules": [describe_rule(r, vehicles) for r in rules],
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
