from __future__ import annotations

import uuid
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
from scipy.sparse import csr_matrix  # type: ignore
from scipy.sparse.csgraph import breadth_first_order, connected_components, shortest_path  # type: ignore

from starmap.models import UNIVERSE_CONFIG, GeneratorConfig, Universe

from .world_helpers import HOME_MIN_TECH, services_for_tech


def _index(universe: Universe) -> Tuple[List[uuid.UUID], Dict[uuid.UUID, int]]:
    ids = list(universe.systems.keys())
    return ids, {sid: i for i, sid in enumerate(ids)}


def adjacency_matrix(universe: Universe) -> Tuple[csr_matrix, List[uuid.UUID]]:
    """Unweighted directed adjacency (one entry per listed jump route)."""
    ids, index = _index(universe)
    rows: List[int] = []
    cols: List[int] = []
    for sid, system in universe.systems.items():
        for other in system.connected_systems:
            if other in index:
                rows.append(index[sid])
                cols.append(index[other])
    data = np.ones(len(rows), dtype=np.int8)
    n = len(ids)
    return csr_matrix((data, (rows, cols)), shape=(n, n)), ids


def component_count(universe: Universe) -> int:
    if not universe.systems:
        return 0
    matrix, _ = adjacency_matrix(universe)
    count, _ = connected_components(matrix, directed=False)
    return int(count)


def is_connected(universe: Universe) -> bool:
    return component_count(universe) <= 1


def reachable_from(universe: Universe, start: uuid.UUID) -> List[uuid.UUID]:
    """Breadth-first visit order starting at start."""
    matrix, ids = adjacency_matrix(universe)
    index = {sid: i for i, sid in enumerate(ids)}
    order = breadth_first_order(matrix, index[start], directed=True, return_predecessors=False)
    return [ids[int(i)] for i in order]


def hop_distances(universe: Universe, start: uuid.UUID) -> Dict[uuid.UUID, int]:
    """Jump count from start to every reachable system."""
    matrix, ids = adjacency_matrix(universe)
    index = {sid: i for i, sid in enumerate(ids)}
    hops = shortest_path(matrix, directed=True, unweighted=True, indices=index[start])
    return {
        ids[i]: int(h) for i, h in enumerate(hops) if np.isfinite(h)
    }


def route_length(universe: Universe, path: Sequence[uuid.UUID]) -> float:
    """Sum of true (not squared) distances along consecutive systems of path."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        total += universe.systems[a].position.true_distance_to(universe.systems[b].position)
    return total


def find_violations(
    universe: Universe,
    config: Optional[GeneratorConfig] = None,
    home_faction: str = UNIVERSE_CONFIG.home.faction,
) -> List[str]:
    """Human-readable list of every broken structural invariant."""
    problems: List[str] = []
    systems = universe.systems
    n = len(systems)

    names = [s.name for s in systems.values()]
    if len(set(names)) != len(names):
        problems.append("system names are not unique")

    for sid, system in systems.items():
        if sid in system.connected_systems:
            problems.append(f"{system.name} lists itself as connected")
        if len(set(system.connected_systems)) != len(system.connected_systems):
            problems.append(f"{system.name} lists a connection twice")
        for other in system.connected_systems:
            if other not in systems:
                problems.append(f"{system.name} connects to unknown system {other}")
            elif sid not in systems[other].connected_systems:
                problems.append(f"{system.name} -> {systems[other].name} has no return route")
        if not 1 <= system.tech_level <= 10:
            problems.append(f"{system.name} tech level {system.tech_level} out of range")
        if config is not None:
            ceiling = config.max_connections
            floor = min(config.min_connections, n - 1)
            if system.degree > ceiling or system.degree < floor:
                problems.append(
                    f"{system.name} degree {system.degree} outside [{floor}, {ceiling}]"
                )
        for planet in system.planets:
            if universe.planets.get(planet.id) is not planet:
                problems.append(f"planet {planet.name} missing from planet map")

    for pid, planet in universe.planets.items():
        owner = systems.get(planet.system_id)
        if owner is None or all(p.id != pid for p in owner.planets):
            problems.append(f"planet {planet.name} is orphaned")
        if not planet.has_service("trading"):
            problems.append(f"planet {planet.name} has no trading service")
        if not 1 <= planet.tech_level <= 10:
            problems.append(f"planet {planet.name} tech level {planet.tech_level} out of range")
        allowed = set(services_for_tech(planet.tech_level))
        gated = [s for s in planet.services if s not in allowed]
        if gated:
            problems.append(f"planet {planet.name} offers {gated} below their tech threshold")

    home = universe.home
    if home is None:
        if n:
            problems.append("no home system recorded")
    else:
        if (home.position.x, home.position.y) != (0, 0):
            problems.append("home system is not at the origin")
        if home.tech_level < HOME_MIN_TECH:
            problems.append(f"home tech level {home.tech_level} below {HOME_MIN_TECH}")
        if home.government_id != home_faction:
            problems.append(f"home system belongs to {home.government_id!r}")
        at_origin = [s for s in systems.values() if (s.position.x, s.position.y) == (0, 0)]
        if len(at_origin) != 1:
            problems.append(f"{len(at_origin)} systems sit at the origin")
        if n and len(reachable_from(universe, home.id)) != n:
            problems.append("not every system is reachable from home")

    return problems


def assert_valid(universe: Universe, config: Optional[GeneratorConfig] = None) -> None:
    problems = find_violations(universe, config)
    if problems:
        raise ValueError("universe violates invariants: " + "; ".join(problems))
