import json
from pathlib import Path
from pydantic import BaseModel, ConfigDict, PositiveInt, model_validator
from pydantic import Field  # type: ignore
from typing import Annotated, Dict, Literal

# # NOTE: The bundled config is loaded once per process at import time. Callers
# # that need different tunables load their own file with UniverseSettings.load_json.

RING_NAMES = ("core", "mid", "outer", "edge")


class GeneratorConfig(BaseModel):
    """Immutable knobs for a single generation run.

    Values are type-checked only. Radius ordering and degree bounds are the
    caller's responsibility; nonsensical values give a degenerate universe.
    """

    model_config = ConfigDict(frozen=True)

    num_systems: int = 100
    core_radius: float = 30.0
    mid_radius: float = 60.0
    outer_radius: float = 100.0
    edge_radius: float = 120.0
    min_connections: int = 2
    max_connections: int = 5
    seed: int = 0  # 0 = pick a random seed
    name_attempts: int = 100
    fallback_prefix: str = "System"
    shortcut_chance: float = 0.3
    candidate_edges: Literal["complete", "delaunay"] = "complete"


class HomeSystemConfig(BaseModel):
    name: Annotated[str, Field(min_length=1)]
    faction: Annotated[str, Field(min_length=1)]


class FactionInfo(BaseModel):
    name: Annotated[str, Field(min_length=1)]
    short_name: Annotated[str, Field(min_length=1)]
    description: str = ""
    color: str
    flag: str


class RingPolicy(BaseModel):
    base_tech: Annotated[int, Field(ge=1, le=10)]
    factions: Dict[str, Annotated[float, Field(gt=0, le=1)]]


class PlanetPolicy(BaseModel):
    min_per_system: PositiveInt
    max_per_system: PositiveInt
    station_chance: Annotated[float, Field(ge=0, le=1)]
    population_per_tech_squared: PositiveInt


class UniverseSettings(BaseModel):
    generator: GeneratorConfig
    home: HomeSystemConfig
    factions: Dict[str, FactionInfo]
    rings: Dict[str, RingPolicy]
    planets: PlanetPolicy

    @model_validator(mode="after")
    def _check_references(self) -> "UniverseSettings":
        missing_rings = [ring for ring in RING_NAMES if ring not in self.rings]
        if missing_rings:
            raise ValueError(f"rings must define {', '.join(missing_rings)}")
        if self.home.faction not in self.factions:
            raise ValueError(f"home faction {self.home.faction!r} is not a known faction")
        for ring, policy in self.rings.items():
            if not policy.factions:
                raise ValueError(f"ring {ring!r} has no candidate factions")
            unknown = [fid for fid in policy.factions if fid not in self.factions]
            if unknown:
                raise ValueError(f"ring {ring!r} references unknown factions: {unknown}")
        if self.planets.max_per_system < self.planets.min_per_system:
            raise ValueError("planets.max_per_system must be >= planets.min_per_system")
        return self

    @classmethod
    def load_json(cls, path: str | Path) -> "UniverseSettings":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data)


_BASE_DIR = Path(__file__).resolve().parents[1]
CONFIG_PATH = _BASE_DIR / "config" / "universe_config.json"

UNIVERSE_CONFIG = UniverseSettings.model_validate_json(
    CONFIG_PATH.read_text(encoding="utf-8")
)


def default_config() -> GeneratorConfig:
    return UNIVERSE_CONFIG.generator
