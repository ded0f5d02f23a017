"""Entry point for ``python -m cavemap``.

Loads the YAML config, applies command-line overrides, generates a map and
prints it as text, one glyph per tile.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from cavemap.generation.config import PIPELINE_NAMES, GenerationConfig
from cavemap.generation.pipelines import generate_from_config
from cavemap.world.errors import MapError
from cavemap.world.grid import Grid
from cavemap.world.terrain import TerrainKind

logger = logging.getLogger("cavemap")

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)

GLYPHS: dict[TerrainKind, str] = {
    TerrainKind.LAND: ".",
    TerrainKind.WATER: "~",
    TerrainKind.FOREST: "T",
    TerrainKind.LAVA: "^",
}


def render_text(grid: Grid) -> str:
    """Return ``grid`` as newline-separated rows of glyphs."""
    return "\n".join("".join(GLYPHS[cell.kind] for cell in row) for row in grid.rows)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="cavemap",
        description="cavemap - cellular-automaton terrain generator",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument("--pipeline", choices=PIPELINE_NAMES, help="Map style")
    parser.add_argument("--height", type=int, help="Rows in the map")
    parser.add_argument("--width", type=int, help="Columns in the map")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--passes", type=int, help="Smoothing passes")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, generate a map and print it."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    config_path = args.config
    if config_path is None and _DEFAULT_CONFIG.exists():
        config_path = _DEFAULT_CONFIG
    config = (
        GenerationConfig.from_yaml(config_path)
        if config_path is not None
        else GenerationConfig()
    )
    if args.pipeline is not None:
        config.pipeline = args.pipeline
    if args.height is not None:
        config.height = args.height
    if args.width is not None:
        config.width = args.width
    if args.seed is not None:
        config.seed = args.seed
    if args.passes is not None:
        config.smoothing_passes = args.passes

    try:
        grid = generate_from_config(config)
    except (MapError, ValueError) as exc:
        parser.error(str(exc))

    print(render_text(grid))

    counts = {kind: grid.count(kind) for kind in TerrainKind}
    tally = ", ".join(f"{kind.value}={n}" for kind, n in counts.items() if n)
    logger.info(f"{config.pipeline} map {grid.height}x{grid.width}: {tally}")


if __name__ == "__main__":
    main()
