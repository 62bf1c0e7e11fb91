"""
Configuration, environment overrides and seed normalisation tests.
"""

import json

import pytest
from pydantic import ValidationError

from starmap.helper.seed_helpers import SEED_MASK, normalize_seed, resolve_seed
from starmap.models import (
    CONFIG_PATH,
    UNIVERSE_CONFIG,
    GeneratorConfig,
    StarmapSettings,
    UniverseSettings,
    default_config,
    load_generator_config,
    load_universe_settings,
)


def _bundled() -> dict:
    return json.loads(CONFIG_PATH.read_text(encoding="utf-8"))


class TestGeneratorConfig:
    def test_defaults(self):
        cfg = default_config()
        assert cfg.num_systems == 100
        assert (cfg.core_radius, cfg.mid_radius, cfg.outer_radius, cfg.edge_radius) == (
            30.0,
            60.0,
            100.0,
            120.0,
        )
        assert (cfg.min_connections, cfg.max_connections) == (2, 5)
        assert cfg.seed == 0
        assert cfg.name_attempts == 100
        assert cfg.shortcut_chance == pytest.approx(0.3)

    def test_bundled_matches_class_defaults(self):
        assert default_config() == GeneratorConfig()

    def test_frozen(self):
        cfg = GeneratorConfig()
        with pytest.raises(ValidationError):
            cfg.num_systems = 5  # type: ignore[misc]

    def test_nonsense_values_are_not_rejected(self):
        cfg = GeneratorConfig(num_systems=0, min_connections=9, max_connections=1, core_radius=500)
        assert cfg.min_connections > cfg.max_connections

    def test_unknown_candidate_strategy_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(candidate_edges="voronoi")


class TestUniverseSettings:
    def test_bundled_config_loaded(self):
        assert UNIVERSE_CONFIG.home.name == "Sol"
        assert UNIVERSE_CONFIG.home.faction == "united_earth_federation"
        assert set(UNIVERSE_CONFIG.rings) == {"core", "mid", "outer", "edge"}
        assert UNIVERSE_CONFIG.rings["edge"].base_tech == 10

    def test_ring_weights_sum_to_one(self):
        for policy in UNIVERSE_CONFIG.rings.values():
            assert sum(policy.factions.values()) == pytest.approx(1.0)

    def test_unknown_ring_faction_rejected(self, tmp_path):
        data = _bundled()
        data["rings"]["core"]["factions"] = {"galactic_empire": 1.0}
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ValidationError):
            UniverseSettings.load_json(path)

    def test_missing_ring_rejected(self, tmp_path):
        data = _bundled()
        del data["rings"]["edge"]
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ValidationError):
            UniverseSettings.load_json(path)

    def test_tech_base_out_of_range_rejected(self):
        data = _bundled()
        data["rings"]["mid"]["base_tech"] = 11
        with pytest.raises(ValidationError):
            UniverseSettings.model_validate(data)


class TestEnvironmentSettings:
    def test_no_overrides(self, monkeypatch):
        for key in ("STARMAP_SEED", "STARMAP_NUM_SYSTEMS", "STARMAP_CONFIG_PATH"):
            monkeypatch.delenv(key, raising=False)
        assert load_generator_config() == default_config()
        assert load_universe_settings() is UNIVERSE_CONFIG

    def test_env_overrides(self, monkeypatch):
        monkeypatch.delenv("STARMAP_CONFIG_PATH", raising=False)
        monkeypatch.setenv("STARMAP_SEED", "42")
        monkeypatch.setenv("STARMAP_NUM_SYSTEMS", "12")
        cfg = load_generator_config()
        assert cfg.seed == 42
        assert cfg.num_systems == 12
        assert cfg.max_connections == default_config().max_connections

    def test_config_path(self, monkeypatch, tmp_path):
        data = _bundled()
        data["generator"]["num_systems"] = 33
        data["generator"]["max_connections"] = 4
        path = tmp_path / "universe.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        monkeypatch.delenv("STARMAP_SEED", raising=False)
        monkeypatch.delenv("STARMAP_NUM_SYSTEMS", raising=False)
        monkeypatch.setenv("STARMAP_CONFIG_PATH", str(path))
        cfg = load_generator_config()
        assert cfg.num_systems == 33
        assert cfg.max_connections == 4

    def test_explicit_settings_object(self):
        cfg = load_generator_config(StarmapSettings(seed=7, num_systems=3))
        assert (cfg.seed, cfg.num_systems) == (7, 3)


class TestSeeds:
    @pytest.mark.parametrize("value", [None, 0, "", "   ", "0", False])
    def test_no_seed(self, value):
        assert normalize_seed(value) is None

    def test_int_passthrough(self):
        assert normalize_seed(12345) == 12345

    def test_numeric_strings(self):
        assert normalize_seed("12345") == 12345
        assert normalize_seed("0x10") == 16

    def test_text_seed_is_stable(self):
        first = normalize_seed("andromeda")
        assert first == normalize_seed("andromeda")
        assert 0 <= first <= SEED_MASK
        assert normalize_seed(b"andromeda") == first

    def test_resolve_picks_random_nonzero(self):
        seed = resolve_seed(0)
        assert 0 < seed <= SEED_MASK
        assert resolve_seed(99) == 99
