from starmap.helper.seed_helpers import normalize_seed, resolve_seed
from starmap.helper.world_helpers import (
    services_for_tech,
    clamp_tech,
    ring_for_distance,
)
from starmap.helper.graph_helpers import (
    is_connected,
    hop_distances,
    route_length,
    find_violations,
    assert_valid,
)


__all__ = [
    "normalize_seed",
    "resolve_seed",
    "services_for_tech",
    "clamp_tech",
    "ring_for_distance",
    "is_connected",
    "hop_distances",
    "route_length",
    "find_violations",
    "assert_valid",
]
