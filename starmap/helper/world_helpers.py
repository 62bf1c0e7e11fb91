from __future__ import annotations

from typing import List, Tuple

from starmap.models import GeneratorConfig

# Radius mixture: (cumulative probability, ring)
RING_MIXTURE: Tuple[Tuple[float, str], ...] = (
    (0.15, "core"),
    (0.50, "mid"),
    (0.90, "outer"),
    (1.00, "edge"),
)

# (service, minimum tech level)
SERVICE_TIERS: Tuple[Tuple[str, int], ...] = (
    ("trading", 1),
    ("bar", 3),
    ("missions", 4),
    ("outfitter", 5),
    ("shipyard", 6),
)

MIN_TECH = 1
MAX_TECH = 10
HOME_MIN_TECH = 7


def services_for_tech(tech_level: int) -> List[str]:
    # trading is offered everywhere, whatever the tech level
    services = ["trading"]
    for service, minimum in SERVICE_TIERS[1:]:
        if tech_level >= minimum:
            services.append(service)
    return services


def clamp_tech(value: int) -> int:
    return max(MIN_TECH, min(MAX_TECH, value))


def ring_for_distance(distance: float, config: GeneratorConfig) -> str:
    if distance < config.core_radius:
        return "core"
    if distance < config.mid_radius:
        return "mid"
    if distance < config.outer_radius:
        return "outer"
    return "edge"
