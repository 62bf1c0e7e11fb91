from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from typing import Optional, List, Dict


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def distance_to(self, other: Position) -> float:
        # squared: enough for ordering, take the root before summing
        dx = float(self.x - other.x)
        dy = float(self.y - other.y)
        return dx * dx + dy * dy

    def true_distance_to(self, other: Position) -> float:
        return math.sqrt(self.distance_to(other))

    def from_origin(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass
class Planet:
    id: uuid.UUID
    system_id: uuid.UUID
    name: str
    description: str
    services: List[str] = field(default_factory=list)  # trading, bar, missions, outfitter, shipyard
    population: int = 0
    tech_level: int = 1  # inherited from the parent system

    def has_service(self, service: str) -> bool:
        return service in self.services


@dataclass
class StarSystem:
    id: uuid.UUID
    name: str
    position: Position
    government_id: str = ""  # controlling NPC faction
    tech_level: int = 1  # 1-10
    description: str = ""
    planets: List[Planet] = field(default_factory=list)
    connected_systems: List[uuid.UUID] = field(default_factory=list)

    @property
    def degree(self) -> int:
        return len(self.connected_systems)

    def is_connected_to(self, system_id: uuid.UUID) -> bool:
        return system_id in self.connected_systems

    def add_connection(self, system_id: uuid.UUID) -> bool:
        """Append a jump route unless it is a self-loop or already present."""
        if system_id == self.id or self.is_connected_to(system_id):
            return False
        self.connected_systems.append(system_id)
        return True

    def distance_to(self, other: StarSystem) -> float:
        return self.position.distance_to(other.position)


@dataclass(frozen=True)
class Edge:
    """Candidate jump route considered while building the spanning tree."""

    source: uuid.UUID
    target: uuid.UUID
    distance: float  # squared euclidean


@dataclass
class Universe:
    systems: Dict[uuid.UUID, StarSystem] = field(default_factory=dict)
    planets: Dict[uuid.UUID, Planet] = field(default_factory=dict)
    generator_seed: Optional[int] = None
    home_id: Optional[uuid.UUID] = None

    @property
    def home(self) -> Optional[StarSystem]:
        if self.home_id is None:
            return None
        return self.systems.get(self.home_id)
