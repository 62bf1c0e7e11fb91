"""
Shared pytest fixtures for the starmap tests.

Provides:
  - A small seeded universe (10 systems, seed 12345)
  - A default-sized seeded universe (100 systems)
  - A factory for hand-placed StarSystem lists
"""

import sys
import uuid
from pathlib import Path
from typing import Callable, List, Sequence, Tuple

import pytest

# ---------------------------------------------------------------------------
# Ensure the project root is on sys.path so the package imports without install
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from starmap import Generator, GeneratorConfig, Position, StarSystem  # noqa: E402


@pytest.fixture(scope="session")
def small_config() -> GeneratorConfig:
    return GeneratorConfig(num_systems=10, seed=12345)


@pytest.fixture(scope="session")
def small_universe(small_config):
    return Generator(small_config).generate()


@pytest.fixture(scope="session")
def default_config() -> GeneratorConfig:
    return GeneratorConfig(seed=20240107)


@pytest.fixture(scope="session")
def default_universe(default_config):
    return Generator(default_config).generate()


@pytest.fixture()
def make_systems() -> Callable[[Sequence[Tuple[int, int]]], List[StarSystem]]:
    """Build StarSystems at the given integer coordinates, named S0, S1, ..."""

    def _make(coords: Sequence[Tuple[int, int]]) -> List[StarSystem]:
        return [
            StarSystem(id=uuid.uuid4(), name=f"S{i}", position=Position(x, y))
            for i, (x, y) in enumerate(coords)
        ]

    return _make
