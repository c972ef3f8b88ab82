
def make_people(*names):
    return [{"id": f"p_{name.lower()}", "name": name} for name in names]


def make_vehicle(car_id, capacity, name=None):
    return {"id": car_id, "name": name or car_id.title(), "capacity": capacity}


def together(*names):
    return {"type": "together", "people": list(names)}


def separate(a, b):
    return {"type": "separate", "people": [a, b]}


def specific_car(person, car_id):
    return {"type": "specificCar", "person": person, "carId": car_id}


def seat_of(assignments, name):
    cars = [car_id for car_id, car in assignments.items() if name in car['people']]
    assert len(cars) == 1, f"{name} seated in {cars}"
    return cars[0]
