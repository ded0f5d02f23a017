"""Shared fixtures for the cavemap test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from cavemap.generation.config import GenerationConfig
from cavemap.world.grid import Grid
from cavemap.world.terrain import TerrainKind


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def all_land() -> Grid:
    """A 10x10 grid of land."""
    return Grid.new(10, 10, lambda r, c: TerrainKind.LAND)


@pytest.fixture
def checkerboard() -> Grid:
    """A 6x7 land/water checkerboard, asymmetric so row/col mix-ups show."""
    return Grid.new(
        6,
        7,
        lambda r, c: TerrainKind.WATER if (r + c) % 2 else TerrainKind.LAND,
    )


@pytest.fixture
def default_config() -> GenerationConfig:
    """Default generation config (no YAML file needed)."""
    return GenerationConfig()
