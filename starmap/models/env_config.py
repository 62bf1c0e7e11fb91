from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .universe_config import GeneratorConfig, UNIVERSE_CONFIG, UniverseSettings


class StarmapSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="STARMAP_")

    config_path: Optional[Path] = None
    seed: Optional[int] = None
    num_systems: Optional[int] = None


def load_universe_settings(settings: Optional[StarmapSettings] = None) -> UniverseSettings:
    settings = settings if settings is not None else StarmapSettings()
    if settings.config_path is None:
        return UNIVERSE_CONFIG
    return UniverseSettings.load_json(settings.config_path)


def load_generator_config(settings: Optional[StarmapSettings] = None) -> GeneratorConfig:
    """
    Resolve the GeneratorConfig for this process.
    Priority:
    1) STARMAP_SEED / STARMAP_NUM_SYSTEMS environment overrides.
    2) The "generator" section of STARMAP_CONFIG_PATH if set.
    3) The bundled universe_config.json defaults.
    """
    settings = settings if settings is not None else StarmapSettings()
    base = load_universe_settings(settings).generator
    overrides = {}
    if settings.seed is not None:
        overrides["seed"] = settings.seed
    if settings.num_systems is not None:
        overrides["num_systems"] = settings.num_systems
    if not overrides:
        return base
    return base.model_copy(update=overrides)
