def build_units(people, assigned, pending_groups, rng):
    """
    Builds the indivisible placement units for the search.

    Each pending 'together' group becomes one unit exactly as written; groups
    sharing a member are not merged, so such a member ends up in two units and
    the duplicate is left for the result validator to report.
    Everyone else still unseated becomes a unit of one. The final order is
    shuffled with the supplied random source.
    """
    in_groups = set()
    for group in pending_groups:
        in_groups.update(group)

    units = [list(group) for group in pending_groups]
    for person in people:
        name = person['name']
        if name in assigned or name in in_groups:
            continue
        units.append([name])

    rng.shuffle(units)
    return units
