"""Generation pipelines — seed random noise, then smooth it.

Every pipeline starts from fresh random terrain; randomness enters only
at seeding, and the smoothing passes that follow are deterministic.

- ``cave``:  land/water noise, cave smoothing, then one forest overlay.
- ``lava``:  land/lava noise, lava smoothing.
- ``noise``: the raw seeded noise with no smoothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import numpy as np

from cavemap.automata.passes import apply_rule, apply_rule_n_times
from cavemap.automata.rules import cave_rule, forest_rule, lava_rule
from cavemap.generation.config import PIPELINE_NAMES
from cavemap.world.errors import UnknownPipelineError
from cavemap.world.grid import Grid
from cavemap.world.terrain import (
    BASE_TERRAIN,
    HELL_TERRAIN,
    TerrainKind,
    random_terrain,
)

if TYPE_CHECKING:
    from numpy.random import Generator

    from cavemap.generation.config import GenerationConfig

logger = logging.getLogger(__name__)

# Enough passes for the automaton to settle into stable blobs
SMOOTHING_PASSES = 8


def seed_grid(
    height: int,
    width: int,
    palette: Sequence[TerrainKind],
    rng: Generator,
) -> Grid:
    """Fill a new grid with terrain drawn uniformly from ``palette``.

    Raises:
        InvalidDimensionsError: If either dimension is not positive.
    """
    return Grid.new(height, width, lambda _r, _c: random_terrain(palette, rng))


def generate_noise_map(
    height: int,
    width: int,
    *,
    palette: Sequence[TerrainKind] = BASE_TERRAIN,
    rng: Generator | None = None,
) -> Grid:
    """Return unsmoothed random terrain."""
    rng = rng if rng is not None else np.random.default_rng()
    return seed_grid(height, width, palette, rng)


def generate_cave_map(
    height: int,
    width: int,
    *,
    rng: Generator | None = None,
    passes: int = SMOOTHING_PASSES,
) -> Grid:
    """Generate a land/water cave map with forest on inland cells.

    Args:
        height: Number of rows.
        width: Number of columns.
        rng: Random generator for seeding.  A fresh one is created if None.
        passes: Number of cave smoothing passes.

    Returns:
        A Grid holding only land, water and forest.
    """
    rng = rng if rng is not None else np.random.default_rng()
    logger.info(f"Generating {height}x{width} cave map ({passes} passes)")
    grid = seed_grid(height, width, BASE_TERRAIN, rng)
    grid = apply_rule_n_times(grid, cave_rule, passes)
    grid = apply_rule(grid, forest_rule)
    logger.info(
        f"Cave map done: {grid.count(TerrainKind.WATER)} water, "
        f"{grid.count(TerrainKind.FOREST)} forest"
    )
    return grid


def generate_lava_map(
    height: int,
    width: int,
    *,
    rng: Generator | None = None,
    passes: int = SMOOTHING_PASSES,
) -> Grid:
    """Generate a land/lava volcanic map.

    Args:
        height: Number of rows.
        width: Number of columns.
        rng: Random generator for seeding.  A fresh one is created if None.
        passes: Number of lava smoothing passes.

    Returns:
        A Grid holding only land and lava.
    """
    rng = rng if rng is not None else np.random.default_rng()
    logger.info(f"Generating {height}x{width} lava map ({passes} passes)")
    grid = seed_grid(height, width, HELL_TERRAIN, rng)
    grid = apply_rule_n_times(grid, lava_rule, passes)
    logger.info(f"Lava map done: {grid.count(TerrainKind.LAVA)} lava")
    return grid


def _noise(
    height: int,
    width: int,
    *,
    rng: Generator | None = None,
    passes: int = SMOOTHING_PASSES,
) -> Grid:
    # Noise is never smoothed, so passes is ignored
    return generate_noise_map(height, width, rng=rng)


Pipeline = Callable[..., Grid]

PIPELINES: dict[str, Pipeline] = {
    "cave": generate_cave_map,
    "lava": generate_lava_map,
    "noise": _noise,
}


def generate(
    name: str,
    height: int,
    width: int,
    *,
    rng: Generator | None = None,
    passes: int = SMOOTHING_PASSES,
) -> Grid:
    """Run the pipeline registered under ``name``.

    Raises:
        UnknownPipelineError: If no pipeline has that name.
    """
    try:
        pipeline = PIPELINES[name]
    except KeyError:
        msg = f"unknown pipeline {name!r}; expected one of {PIPELINE_NAMES}"
        raise UnknownPipelineError(msg) from None
    return pipeline(height, width, rng=rng, passes=passes)


def generate_from_config(config: GenerationConfig) -> Grid:
    """Validate ``config`` and run the pipeline it names with a seeded RNG."""
    config.validate()
    rng = np.random.default_rng(config.seed)
    return generate(
        config.pipeline,
        config.height,
        config.width,
        rng=rng,
        passes=config.smoothing_passes,
    )
