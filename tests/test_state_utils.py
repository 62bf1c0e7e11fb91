"""
Plain-data export and graph analytics tests.
"""

import json
import math

from starmap.helper import hop_distances, is_connected, route_length
from starmap.helper.graph_helpers import assert_valid, component_count, find_violations
from starmap.state_utils import jump_routes, list_systems, snapshot_from_universe, universe_stats

import pytest


class TestJumpRoutes:
    def test_one_record_per_undirected_route(self, default_universe):
        routes = jump_routes(default_universe)
        total_degree = sum(s.degree for s in default_universe.systems.values())
        assert len(routes) == total_degree // 2
        assert len({frozenset(r) for r in routes}) == len(routes)
        for a, b in routes:
            assert str(a) < str(b)


class TestListing:
    def test_sorted_by_name(self, default_universe):
        names = [s.name for s in list_systems(default_universe)]
        assert names == sorted(names)
        assert len(names) == len(default_universe.systems)

    def test_faction_filter(self, default_universe):
        listed = list_systems(default_universe, faction="united_earth_federation")
        assert listed
        assert all(s.government_id == "united_earth_federation" for s in listed)
        assert list_systems(default_universe, faction="nobody") == []


class TestStats:
    def test_counts(self, default_universe):
        stats = universe_stats(default_universe)
        assert stats["systems"] == len(default_universe.systems)
        assert stats["planets"] == len(default_universe.planets)
        assert stats["jump_routes"] == len(jump_routes(default_universe))
        assert sum(stats["factions"].values()) == stats["systems"]
        assert sum(stats["tech_levels"].values()) == stats["systems"]
        assert sum(stats["rings"].values()) == stats["systems"]
        assert stats["services"]["trading"] == stats["planets"]
        assert stats["generator_seed"] == default_universe.generator_seed

    def test_notable_systems(self, default_universe):
        stats = universe_stats(default_universe)
        name, degree = stats["most_connected"]
        assert degree == max(s.degree for s in default_universe.systems.values())
        name, tech = stats["highest_tech"]
        assert tech == max(s.tech_level for s in default_universe.systems.values())


class TestSnapshot:
    def test_json_ready(self, small_universe):
        snapshot = snapshot_from_universe(small_universe)
        decoded = json.loads(json.dumps(snapshot))
        assert len(decoded["systems"]) == 10
        assert len(decoded["planets"]) == len(small_universe.planets)
        assert decoded["home_id"] == str(small_universe.home_id)
        assert "united_earth_federation" in decoded["factions"]

    def test_planet_references_resolve(self, small_universe):
        snapshot = snapshot_from_universe(small_universe)
        planet_ids = {p["id"] for p in snapshot["planets"]}
        for system in snapshot["systems"]:
            assert set(system["planets"]) <= planet_ids


class TestGraphHelpers:
    def test_connected(self, default_universe):
        assert is_connected(default_universe)
        assert component_count(default_universe) == 1

    def test_hop_distances_from_home(self, default_universe):
        hops = hop_distances(default_universe, default_universe.home_id)
        assert hops[default_universe.home_id] == 0
        assert len(hops) == len(default_universe.systems)
        for other in default_universe.home.connected_systems:
            assert hops[other] == 1

    def test_route_length_uses_true_distance(self, default_universe):
        home = default_universe.home
        neighbour = default_universe.systems[home.connected_systems[0]]
        expected = math.hypot(neighbour.position.x, neighbour.position.y)
        assert route_length(default_universe, [home.id, neighbour.id]) == pytest.approx(expected)
        assert route_length(default_universe, [home.id]) == 0.0

    def test_violations_reported(self, small_config):
        from starmap import generate_universe

        universe = generate_universe(small_config)
        assert find_violations(universe, small_config) == []
        home = universe.home
        victim = universe.systems[home.connected_systems[0]]
        victim.connected_systems.remove(home.id)
        home.connected_systems.append(home.id)
        problems = find_violations(universe, small_config)
        assert any("no return route" in p for p in problems)
        assert any("itself" in p for p in problems)
        with pytest.raises(ValueError):
            assert_valid(universe, small_config)

    def test_disconnected_graph_detected(self, small_config):
        from starmap import generate_universe

        universe = generate_universe(small_config)
        for system in universe.systems.values():
            system.connected_systems.clear()
        assert not is_connected(universe)
        assert any("reachable" in p for p in find_violations(universe))
