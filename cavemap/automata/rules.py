"""Cellular-automaton rules.

Each rule maps a cell's current terrain and the terrain of its neighbours
to the terrain the cell takes in the next snapshot.  Rules are pure: they
see nothing but their arguments.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from cavemap.world.terrain import TerrainKind

Rule = Callable[[TerrainKind, Sequence[TerrainKind]], TerrainKind]

# A fluid cell survives with more than this many fluid neighbours ...
_SURVIVE_ABOVE = 3
# ... and land floods with more than this many.
_FLOOD_ABOVE = 4
# Forest only grows on land with a full ring of land around it.
_FOREST_MIN_LAND = 8


def _smooth(
    current: TerrainKind,
    neighbours: Sequence[TerrainKind],
    fluid: TerrainKind,
) -> TerrainKind:
    """Grow clustered ``fluid`` and shrink isolated ``fluid`` back to land."""
    fluid_count = sum(1 for kind in neighbours if kind is fluid)
    if current is fluid and fluid_count > _SURVIVE_ABOVE:
        return fluid
    if current is TerrainKind.LAND and fluid_count > _FLOOD_ABOVE:
        return fluid
    # Anything that is not land and did not survive above falls back to land
    if current is not TerrainKind.LAND and fluid_count <= _FLOOD_ABOVE:
        return TerrainKind.LAND
    return current


def cave_rule(current: TerrainKind, neighbours: Sequence[TerrainKind]) -> TerrainKind:
    """Smooth land/water noise into cave-like blobs of water."""
    return _smooth(current, neighbours, TerrainKind.WATER)


def lava_rule(current: TerrainKind, neighbours: Sequence[TerrainKind]) -> TerrainKind:
    """Smooth land/lava noise into pools of lava."""
    return _smooth(current, neighbours, TerrainKind.LAVA)


def forest_rule(current: TerrainKind, neighbours: Sequence[TerrainKind]) -> TerrainKind:
    """Turn land fully surrounded by land into forest.

    Edge cells have fewer than 8 neighbours and therefore never become
    forest.
    """
    land_count = sum(1 for kind in neighbours if kind is TerrainKind.LAND)
    if current is TerrainKind.LAND and land_count >= _FOREST_MIN_LAND:
        return TerrainKind.FOREST
    return current
