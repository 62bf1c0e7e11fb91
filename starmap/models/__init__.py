from .universe_config import (
    UNIVERSE_CONFIG,
    CONFIG_PATH,
    RING_NAMES,
    GeneratorConfig,
    UniverseSettings,
    FactionInfo,
    default_config,
)
from .env_config import StarmapSettings, load_generator_config, load_universe_settings
from .world_config import Position, StarSystem, Planet, Edge, Universe

__all__ = [
    "UNIVERSE_CONFIG",
    "CONFIG_PATH",
    "RING_NAMES",
    "GeneratorConfig",
    "UniverseSettings",
    "FactionInfo",
    "default_config",
    "StarmapSettings",
    "load_generator_config",
    "load_universe_settings",
    "Position",
    "StarSystem",
    "Planet",
    "Edge",
    "Universe",
]
