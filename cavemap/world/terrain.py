"""Terrain kinds and the palettes used to seed random maps."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numpy.random import Generator


class TerrainKind(str, Enum):
    """The closed set of tile types a map cell can hold."""

    LAND = "land"
    WATER = "water"
    FOREST = "forest"
    LAVA = "lava"


# Seeding palettes.  Forest is never seeded; it only grows out of land.
BASE_TERRAIN: tuple[TerrainKind, ...] = (TerrainKind.LAND, TerrainKind.WATER)
HELL_TERRAIN: tuple[TerrainKind, ...] = (TerrainKind.LAND, TerrainKind.LAVA)


def random_terrain(palette: Sequence[TerrainKind], rng: Generator) -> TerrainKind:
    """Pick one member of ``palette`` uniformly at random.

    Args:
        palette: Terrain kinds to choose from.
        rng: Random generator supplying the draw.

    Raises:
        ValueError: If the palette is empty.
    """
    if not palette:
        msg = "cannot draw terrain from an empty palette"
        raise ValueError(msg)
    return palette[int(rng.integers(len(palette)))]
