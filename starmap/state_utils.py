#!/usr/bin/env python3
"""
Helpers for turning a generated Universe into plain data for persistence
and reporting layers.
"""
from __future__ import annotations

import uuid
from collections import Counter
from typing import Dict, List, Optional, Tuple

from starmap.generator import rings_by_system
from starmap.helper.world_helpers import SERVICE_TIERS
from starmap.models import UNIVERSE_CONFIG, GeneratorConfig, Planet, StarSystem, Universe


def jump_routes(universe: Universe) -> List[Tuple[uuid.UUID, uuid.UUID]]:
    """
    One record per undirected jump route. A pair is emitted from the endpoint
    whose id string sorts first, so a store can insert each route once.
    """
    routes: List[Tuple[uuid.UUID, uuid.UUID]] = []
    for system in universe.systems.values():
        for other in system.connected_systems:
            if str(system.id) < str(other):
                routes.append((system.id, other))
    return routes


def list_systems(universe: Universe, faction: Optional[str] = None) -> List[StarSystem]:
    systems = [
        s for s in universe.systems.values() if faction is None or s.government_id == faction
    ]
    return sorted(systems, key=lambda s: s.name)


def universe_stats(universe: Universe, config: Optional[GeneratorConfig] = None) -> dict:
    systems = list(universe.systems.values())
    count = len(systems)
    total_planets = sum(len(s.planets) for s in systems)
    total_links = sum(s.degree for s in systems)

    services: Counter = Counter()
    for planet in universe.planets.values():
        services.update(planet.services)

    most_connected = max(systems, key=lambda s: s.degree, default=None)
    highest_tech = max(systems, key=lambda s: s.tech_level, default=None)
    most_planets = max(systems, key=lambda s: len(s.planets), default=None)

    rings = rings_by_system(universe, config if config is not None else UNIVERSE_CONFIG.generator)

    return {
        "generator_seed": universe.generator_seed,
        "systems": count,
        "planets": total_planets,
        "jump_routes": total_links // 2,
        "avg_planets_per_system": total_planets / count if count else 0.0,
        "avg_routes_per_system": total_links / count if count else 0.0,
        "factions": dict(Counter(s.government_id for s in systems)),
        "rings": dict(Counter(rings.values())),
        "tech_levels": dict(sorted(Counter(s.tech_level for s in systems).items())),
        "services": {name: services[name] for name, _ in SERVICE_TIERS if services[name]},
        "most_connected": (most_connected.name, most_connected.degree) if most_connected else None,
        "highest_tech": (highest_tech.name, highest_tech.tech_level) if highest_tech else None,
        "most_planets": (most_planets.name, len(most_planets.planets)) if most_planets else None,
    }


def _planet_payload(planet: Planet) -> dict:
    return {
        "id": str(planet.id),
        "system_id": str(planet.system_id),
        "name": planet.name,
        "description": planet.description,
        "services": list(planet.services),
        "population": planet.population,
        "tech_level": planet.tech_level,
    }


def snapshot_from_universe(universe: Universe) -> dict:
    """
    JSON-ready payload: systems with adjacency and planet ids, planets, and
    the de-duplicated route list.
    """
    factions: Dict[str, dict] = {
        fid: info.model_dump() for fid, info in UNIVERSE_CONFIG.factions.items()
    }

    systems_payload = []
    for sys in universe.systems.values():
        systems_payload.append(
            {
                "id": str(sys.id),
                "name": sys.name,
                "x": sys.position.x,
                "y": sys.position.y,
                "government_id": sys.government_id,
                "tech_level": sys.tech_level,
                "description": sys.description,
                "planets": [str(p.id) for p in sys.planets],
                "connected_systems": [str(c) for c in sys.connected_systems],
            }
        )

    snapshot = {
        "generator_seed": universe.generator_seed,
        "home_id": str(universe.home_id) if universe.home_id else None,
        "factions": factions,
        "systems": systems_payload,
        "planets": [_planet_payload(p) for p in universe.planets.values()],
        "jump_routes": [[str(a), str(b)] for (a, b) in jump_routes(universe)],
    }
    return snapshot
