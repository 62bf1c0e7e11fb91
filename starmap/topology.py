#!/usr/bin/env python3
"""
Jump-route topology on top of the spanning tree.

The tree alone keeps every system reachable, but it is all long detours and
dead-end leaves. Augmentation tops every system up to min_connections and
randomly adds shortcuts to the nearest unconnected neighbours. Extra routes
never push either endpoint past max_connections; tree routes are never
removed, so connectivity survives any cap.
"""
from __future__ import annotations

import random
import uuid
from typing import Dict, List, Sequence

from starmap.models import Edge, StarSystem


def connect(a: StarSystem, b: StarSystem) -> bool:
    if a.id == b.id:
        return False
    added = a.add_connection(b.id)
    b.add_connection(a.id)
    return added


def apply_edges(systems: Sequence[StarSystem], edges: Sequence[Edge]) -> None:
    by_id: Dict[uuid.UUID, StarSystem] = {s.id: s for s in systems}
    for edge in edges:
        source = by_id.get(edge.source)
        target = by_id.get(edge.target)
        if source is None or target is None:
            continue
        connect(source, target)


def nearest_unconnected(
    system: StarSystem, systems: Sequence[StarSystem], max_connections: int
) -> List[StarSystem]:
    """Candidates sorted by distance that are not linked yet and have room."""
    candidates = [
        other
        for other in systems
        if other.id != system.id
        and not system.is_connected_to(other.id)
        and other.degree < max_connections
    ]
    # sorted() is stable: equal distances keep generation order
    return sorted(candidates, key=system.distance_to)


def add_nearest_connections(
    system: StarSystem,
    systems: Sequence[StarSystem],
    count: int,
    max_connections: int,
) -> int:
    added = 0
    for other in nearest_unconnected(system, systems, max_connections):
        if added >= count or system.degree >= max_connections:
            break
        if other.degree >= max_connections:
            continue
        if connect(system, other):
            added += 1
    return added


def augment_connections(
    systems: Sequence[StarSystem],
    rng: random.Random,
    min_connections: int,
    max_connections: int,
    shortcut_chance: float = 0.3,
) -> None:
    """Top up to the minimum degree, then sprinkle 1-2 shortcuts per system."""
    for system in systems:
        if system.degree < min_connections:
            add_nearest_connections(
                system, systems, min_connections - system.degree, max_connections
            )
        if rng.random() < shortcut_chance and system.degree < max_connections:
            extra = rng.randint(1, 2)
            add_nearest_connections(system, systems, extra, max_connections)


def make_bidirectional(systems: Sequence[StarSystem]) -> int:
    """Add any missing reverse routes; returns how many were added."""
    by_id: Dict[uuid.UUID, StarSystem] = {s.id: s for s in systems}
    added = 0
    for system in systems:
        for other_id in list(system.connected_systems):
            other = by_id.get(other_id)
            if other is not None and other.add_connection(system.id):
                added += 1
    return added


def build_jump_routes(
    systems: Sequence[StarSystem],
    tree: Sequence[Edge],
    rng: random.Random,
    min_connections: int,
    max_connections: int,
    shortcut_chance: float = 0.3,
) -> None:
    apply_edges(systems, tree)
    augment_connections(
        systems, rng, min_connections, max_connections, shortcut_chance
    )
    make_bidirectional(systems)
