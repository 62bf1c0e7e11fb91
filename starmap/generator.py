#!/usr/bin/env python3
"""
Universe generator: places systems, assigns factions and tech, synthesises
descriptions, builds jump routes and populates planets.

All randomness flows through one random.Random seeded at construction, so a
fixed non-zero seed reproduces the universe exactly (ids included).
"""
from __future__ import annotations

import math
import random
import uuid
from typing import Dict, List, Optional, Sequence, Set

from starmap.helper.seed_helpers import resolve_seed
from starmap.helper.world_helpers import (
    RING_MIXTURE,
    clamp_tech,
    ring_for_distance,
    services_for_tech,
)
from starmap.models import (
    UNIVERSE_CONFIG,
    GeneratorConfig,
    Planet,
    Position,
    StarSystem,
    Universe,
    UniverseSettings,
)
from starmap.mst import minimum_spanning_tree
from starmap.names import NameGenerator, planet_description, planet_name, system_description
from starmap.topology import build_jump_routes

MAX_PLACEMENT_ATTEMPTS = 32


class Generator:
    """Single-threaded universe builder. One instance, one generate() call."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        settings: Optional[UniverseSettings] = None,
    ) -> None:
        self.settings = settings if settings is not None else UNIVERSE_CONFIG
        self.config = config if config is not None else self.settings.generator
        self.seed = resolve_seed(self.config.seed)
        self.rng = random.Random(self.seed)
        self.names = NameGenerator(
            self.rng,
            max_attempts=self.config.name_attempts,
            fallback_prefix=self.config.fallback_prefix,
        )

    # ---------- helpers ----------

    def _new_id(self) -> uuid.UUID:
        return uuid.UUID(int=self.rng.getrandbits(128), version=4)

    def ring_for(self, position: Position) -> str:
        return ring_for_distance(position.from_origin(), self.config)

    def sample_distance(self) -> float:
        cfg = self.config
        bounds = {
            "core": (0.0, cfg.core_radius),
            "mid": (cfg.core_radius, cfg.mid_radius),
            "outer": (cfg.mid_radius, cfg.outer_radius),
            "edge": (cfg.outer_radius, cfg.edge_radius),
        }
        roll = self.rng.random()
        ring = next(name for limit, name in RING_MIXTURE if roll < limit)
        low, high = bounds[ring]
        return low + self.rng.random() * (high - low)

    def sample_position(self, taken: Set[Position]) -> Position:
        # one system per integer cell; the origin belongs to the home system
        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            angle = self.rng.random() * 2 * math.pi
            distance = self.sample_distance()
            position = Position(
                int(distance * math.cos(angle)), int(distance * math.sin(angle))
            )
            if position not in taken:
                return position
        x = 1
        while Position(x, 0) in taken:
            x += 1
        return Position(x, 0)

    # ---------- phases ----------

    def place_systems(self) -> List[StarSystem]:
        home = self.settings.home
        self.names.reserve(home.name)
        systems = [
            StarSystem(id=self._new_id(), name=home.name, position=Position(0, 0))
        ]
        taken = {Position(0, 0)}
        for _ in range(1, self.config.num_systems):
            position = self.sample_position(taken)
            taken.add(position)
            systems.append(
                StarSystem(
                    id=self._new_id(), name=self.names.system_name(), position=position
                )
            )
        return systems

    def choose_faction(self, ring: str) -> str:
        candidates = list(self.settings.rings[ring].factions.items())
        if len(candidates) == 1:
            return candidates[0][0]
        roll = self.rng.random()
        cumulative = 0.0
        for faction_id, weight in candidates:
            cumulative += weight
            if roll < cumulative:
                return faction_id
        return candidates[-1][0]

    def assign_factions(
        self, systems: Sequence[StarSystem], home_id: uuid.UUID, rings: Sequence[str]
    ) -> List[str]:
        factions = []
        for system, ring in zip(systems, rings):
            if system.id == home_id:
                factions.append(self.settings.home.faction)
            else:
                factions.append(self.choose_faction(ring))
        return factions

    def assign_tech_levels(self, rings: Sequence[str]) -> List[int]:
        levels = []
        for ring in rings:
            base = self.settings.rings[ring].base_tech
            levels.append(clamp_tech(base + self.rng.randint(-1, 1)))
        return levels

    def describe(self, factions: Sequence[str], rings: Sequence[str]) -> List[str]:
        # the home system is always ring "core", so it draws from its faction's core pool
        return [
            system_description(self.rng, faction_id, ring)
            for faction_id, ring in zip(factions, rings)
        ]

    def population_for(self, tech_level: int) -> int:
        base = tech_level * tech_level * self.settings.planets.population_per_tech_squared
        spread = base // 2
        return base + (self.rng.randrange(spread) if spread > 0 else 0)

    def generate_planets(self, systems: Sequence[StarSystem]) -> List[Planet]:
        policy = self.settings.planets
        planets: List[Planet] = []
        for system in systems:
            count = self.rng.randint(policy.min_per_system, policy.max_per_system)
            for index in range(count):
                name, is_station = planet_name(
                    self.rng, system.name, index, policy.station_chance
                )
                planet = Planet(
                    id=self._new_id(),
                    system_id=system.id,
                    name=name,
                    description=planet_description(self.rng, is_station),
                    services=services_for_tech(system.tech_level),
                    population=self.population_for(system.tech_level),
                    tech_level=system.tech_level,
                )
                system.planets.append(planet)
                planets.append(planet)
        return planets

    # ---------- entry point ----------

    def generate(self) -> Universe:
        cfg = self.config

        # Phase 1: placement (home pinned at the origin)
        placed = self.place_systems()
        home_id = placed[0].id
        rings = ["core" if s.id == home_id else self.ring_for(s.position) for s in placed]

        # Phase 2-3.5: faction, tech, description
        factions = self.assign_factions(placed, home_id, rings)
        tech_levels = self.assign_tech_levels(rings)
        descriptions = self.describe(factions, rings)

        systems = [
            StarSystem(
                id=s.id,
                name=s.name,
                position=s.position,
                government_id=faction_id,
                tech_level=tech,
                description=text,
            )
            for s, faction_id, tech, text in zip(placed, factions, tech_levels, descriptions)
        ]

        # Phase 4: jump routes (MST -> augmentation -> symmetry)
        tree = minimum_spanning_tree(systems, cfg.candidate_edges)
        build_jump_routes(
            systems,
            tree,
            self.rng,
            cfg.min_connections,
            cfg.max_connections,
            cfg.shortcut_chance,
        )

        # Phase 5: planets
        planets = self.generate_planets(systems)

        universe = Universe(
            systems={s.id: s for s in systems},
            planets={p.id: p for p in planets},
            generator_seed=self.seed,
            home_id=home_id,
        )
        routes = sum(s.degree for s in systems) // 2
        print(
            f"[starmap] generated {len(systems)} systems, {len(planets)} planets, "
            f"{routes} jump routes (seed={self.seed})"
        )
        return universe


def generate_universe(
    config: Optional[GeneratorConfig] = None,
    settings: Optional[UniverseSettings] = None,
) -> Universe:
    return Generator(config, settings).generate()


def rings_by_system(universe: Universe, config: GeneratorConfig) -> Dict[uuid.UUID, str]:
    """Ring of every system under config's radii (home is always core)."""
    return {
        sid: "core" if sid == universe.home_id else ring_for_distance(s.position.from_origin(), config)
        for sid, s in universe.systems.items()
    }
