RULE_TYPES = {
    "TOGETHER": "together",
    "SEPARATE": "separate",
    "SPECIFIC_CAR": "specificCar",
}

RULE_DESCRIPTIONS = {
    "together": "Must travel together",
    "separate": "Cannot travel together",
    "specificCar": "Must be in a specific car",
}


def describe_rule(rule, vehicles):
    people = rule.get('people') or ([rule['person']] if rule.get('person') else [])
    names = ", ".join(people)
    rule_type = rule.get('type')

    if rule_type == RULE_TYPES["TOGETHER"]:
        return f"{names} must travel together."
    if rule_type == RULE_TYPES["SEPARATE"]:
        return f"{names} must travel separately."
    if rule_type == RULE_TYPES["SPECIFIC_CAR"]:
        car_name = next((v['name'] for v in vehicles if v['id'] == rule.get('carId')), "Unknown Car")
        return f"{rule.get('person')} must be in {car_name}."
    return "Unknown rule"
