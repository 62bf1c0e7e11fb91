from .models import (
    UNIVERSE_CONFIG,
    GeneratorConfig,
    UniverseSettings,
    StarmapSettings,
    Position,
    StarSystem,
    Planet,
    Edge,
    Universe,
    default_config,
    load_generator_config,
)
from .generator import Generator, generate_universe
from .mst import DisjointSet, minimum_spanning_tree
from .names import NameGenerator
from .state_utils import jump_routes, list_systems, snapshot_from_universe, universe_stats

__all__ = [
    "UNIVERSE_CONFIG",
    "GeneratorConfig",
    "UniverseSettings",
    "StarmapSettings",
    "Position",
    "StarSystem",
    "Planet",
    "Edge",
    "Universe",
    "default_config",
    "load_generator_config",
    "Generator",
    "generate_universe",
    "DisjointSet",
    "minimum_spanning_tree",
    "NameGenerator",
    "jump_routes",
    "list_systems",
    "snapshot_from_universe",
    "universe_stats",
]
