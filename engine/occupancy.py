"""Space already consumed inside an enclosure."""

from typing import Iterable, List

from models.enclosure import Enclosure, Occupant


def occupied_space(occupants: Iterable[Occupant]) -> int:
    return sum(o.count * o.unit_size for o in occupants)


def free_space(enclosure: Enclosure) -> int:
    """Capacity left before any hypothetical addition."""
    return enclosure.total_capacity - occupied_space(enclosure.occupants)


def get_enclosure_utilization(enclosures: Iterable[Enclosure]) -> List[dict]:
    """Per-enclosure occupancy summary, ordered by enclosure id."""
    results = []
    for e in sorted(enclosures, key=lambda e: e.enclosure_id):
        used = occupied_space(e.occupants)
        residents = {}
        for o in e.occupants:
            residents[o.species_id] = residents.get(o.species_id, 0) + o.count
        results.append({
            "enclosure_id": e.enclosure_id,
            "biome": e.biome,
            "total_capacity": e.total_capacity,
            "used_space": used,
            "free_space": e.total_capacity - used,
            "utilization_pct": used / e.total_capacity if e.total_capacity > 0 else 0,
            "residents": residents,
        })
    return results
