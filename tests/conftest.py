import random

import pytest

from tests.helpers import make_people, make_vehicle, separate, specific_car, together


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def quiet_config():
    return {"seed": None, "imbalance_margin": 2, "report_diagnostics": False}


@pytest.fixture
def sample_people():
    return make_people("Alice", "Bob", "Charlie", "Dana", "Eve", "Frank", "Grace", "Heidi")


@pytest.fixture
def sample_vehicles():
    return [
        make_vehicle("sedan", 4, "Sedan"),
        make_vehicle("coupe", 2, "Coupe"),
        make_vehicle("suv", 5, "SUV"),
    ]


@pytest.fixture
def sample_rules():
    return [
        together("Alice", "Bob"),
        separate("Charlie", "Dana"),
        specific_car("Eve", "coupe"),
    ]
