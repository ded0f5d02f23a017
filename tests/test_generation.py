"""Tests for cavemap.generation — pipelines and config loading."""

from pathlib import Path

import numpy as np
import pytest
from numpy.random import Generator

from cavemap.generation.config import PIPELINE_NAMES, GenerationConfig
from cavemap.generation.pipelines import (
    PIPELINES,
    SMOOTHING_PASSES,
    generate,
    generate_cave_map,
    generate_from_config,
    generate_lava_map,
    generate_noise_map,
    seed_grid,
)
from cavemap.world.errors import InvalidDimensionsError, UnknownPipelineError
from cavemap.world.grid import Grid
from cavemap.world.terrain import HELL_TERRAIN, TerrainKind

LAND = TerrainKind.LAND
WATER = TerrainKind.WATER
FOREST = TerrainKind.FOREST
LAVA = TerrainKind.LAVA


def _kinds(grid: Grid) -> set[TerrainKind]:
    return {cell.kind for cell in grid.cells()}


class TestSeeding:
    """Tests for random seeding."""

    def test_seed_grid_uses_palette(self, rng: Generator) -> None:
        grid = seed_grid(12, 12, HELL_TERRAIN, rng)
        assert _kinds(grid) == {LAND, LAVA}

    def test_noise_map_defaults_to_base_palette(self, rng: Generator) -> None:
        grid = generate_noise_map(12, 12, rng=rng)
        assert _kinds(grid) == {LAND, WATER}

    def test_noise_map_without_rng(self) -> None:
        grid = generate_noise_map(4, 4)
        assert _kinds(grid) <= {LAND, WATER}


class TestCaveMap:
    """Tests for the cave/forest pipeline."""

    @pytest.mark.parametrize("dims", [(1, 1), (3, 8), (20, 15)])
    def test_dimensions(self, rng: Generator, dims: tuple[int, int]) -> None:
        grid = generate_cave_map(*dims, rng=rng)
        assert (grid.height, grid.width) == dims
        assert len(grid.rows) == dims[0]
        assert all(len(row) == dims[1] for row in grid.rows)

    def test_palette(self, rng: Generator) -> None:
        grid = generate_cave_map(30, 30, rng=rng)
        assert _kinds(grid) <= {LAND, WATER, FOREST}

    def test_no_forest_on_boundary(self, rng: Generator) -> None:
        grid = generate_cave_map(30, 25, rng=rng)
        for cell in grid.cells():
            if cell.row in (0, 29) or cell.col in (0, 24):
                assert cell.kind is not FOREST

    def test_forest_is_land_surrounded(self, rng: Generator) -> None:
        """Every forest cell came from land with 8 land neighbours."""
        grid = generate_cave_map(30, 30, rng=rng)
        for cell in grid.cells():
            if cell.kind is FOREST:
                assert 0 < cell.row < 29
                assert 0 < cell.col < 29
                for dr in (-1, 0, 1):
                    for dc in (-1, 0, 1):
                        assert grid.get(cell.row + dr, cell.col + dc) is not WATER

    def test_seeded_runs_match(self) -> None:
        a = generate_cave_map(20, 20, rng=np.random.default_rng(7))
        b = generate_cave_map(20, 20, rng=np.random.default_rng(7))
        assert a == b

    def test_zero_passes_still_overlays_forest(self, rng: Generator) -> None:
        grid = generate_cave_map(10, 10, rng=rng, passes=0)
        assert _kinds(grid) <= {LAND, WATER, FOREST}

    def test_invalid_dimensions(self) -> None:
        with pytest.raises(InvalidDimensionsError):
            generate_cave_map(0, 10)


class TestLavaMap:
    """Tests for the lava pipeline."""

    def test_dimensions(self, rng: Generator) -> None:
        grid = generate_lava_map(9, 14, rng=rng)
        assert (grid.height, grid.width) == (9, 14)

    def test_palette(self, rng: Generator) -> None:
        grid = generate_lava_map(30, 30, rng=rng)
        assert _kinds(grid) <= {LAND, LAVA}

    def test_seeded_runs_match(self) -> None:
        a = generate_lava_map(15, 15, rng=np.random.default_rng(3))
        b = generate_lava_map(15, 15, rng=np.random.default_rng(3))
        assert a == b

    def test_invalid_dimensions(self) -> None:
        with pytest.raises(InvalidDimensionsError):
            generate_lava_map(5, -1)


class TestDispatch:
    """Tests for name-based pipeline dispatch."""

    def test_registry(self) -> None:
        assert set(PIPELINES) == {"cave", "lava", "noise"}
        assert SMOOTHING_PASSES == 8

    def test_generate_by_name(self) -> None:
        a = generate("lava", 10, 10, rng=np.random.default_rng(1))
        b = generate_lava_map(10, 10, rng=np.random.default_rng(1))
        assert a == b

    def test_generate_noise_ignores_passes(self) -> None:
        a = generate("noise", 6, 6, rng=np.random.default_rng(2), passes=3)
        b = generate_noise_map(6, 6, rng=np.random.default_rng(2))
        assert a == b

    def test_unknown_pipeline(self) -> None:
        with pytest.raises(UnknownPipelineError):
            generate("desert", 5, 5)

    def test_unknown_pipeline_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            generate("", 5, 5)

    def test_generate_from_config_is_reproducible(self) -> None:
        cfg = GenerationConfig(seed=99, height=12, width=16, pipeline="cave")
        a = generate_from_config(cfg)
        b = generate_from_config(cfg)
        assert a == b
        assert (a.height, a.width) == (12, 16)

    def test_generate_from_config_validates(self) -> None:
        with pytest.raises(InvalidDimensionsError):
            generate_from_config(GenerationConfig(height=0))


class TestGenerationConfig:
    """Tests for YAML config loading."""

    def test_defaults(self, default_config: GenerationConfig) -> None:
        assert default_config.seed is None
        assert default_config.height == 75
        assert default_config.width == 75
        assert default_config.pipeline == "cave"
        assert default_config.smoothing_passes == 8

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text("seed: 5\nheight: 20\npipeline: lava\n")
        cfg = GenerationConfig.from_yaml(yaml_file)
        assert cfg.seed == 5
        assert cfg.height == 20
        assert cfg.width == 75
        assert cfg.pipeline == "lava"

    def test_empty_yaml_gives_defaults(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert GenerationConfig.from_yaml(yaml_file) == GenerationConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            GenerationConfig.from_yaml(tmp_path / "nope.yaml")

    def test_bundled_default_loads(self) -> None:
        path = Path(__file__).resolve().parent.parent / "config" / "default.yaml"
        assert GenerationConfig.from_yaml(path) == GenerationConfig()

    def test_validate_pipeline(self) -> None:
        with pytest.raises(UnknownPipelineError):
            GenerationConfig(pipeline="swamp").validate()

    def test_validate_passes(self) -> None:
        with pytest.raises(ValueError):
            GenerationConfig(smoothing_passes=-1).validate()

    def test_quoted_height_in_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "quoted.yaml"
        yaml_file.write_text('height: "75"\n')
        cfg = GenerationConfig.from_yaml(yaml_file)
        with pytest.raises(InvalidDimensionsError):
            cfg.validate()

    def test_quoted_height_rejected_before_generation(self) -> None:
        with pytest.raises(InvalidDimensionsError):
            generate_from_config(GenerationConfig(height="10"))

    def test_bool_width_rejected(self) -> None:
        with pytest.raises(InvalidDimensionsError):
            GenerationConfig(width=True).validate()

    @pytest.mark.parametrize("passes", ["8", 2.5, True])
    def test_non_int_passes_rejected(self, passes: object) -> None:
        with pytest.raises(ValueError):
            GenerationConfig(smoothing_passes=passes).validate()

    @pytest.mark.parametrize("seed", ["42", 1.5])
    def test_non_int_seed_rejected(self, seed: object) -> None:
        with pytest.raises(ValueError):
            GenerationConfig(seed=seed).validate()

    def test_names_match_registry(self) -> None:
        assert set(PIPELINES) == set(PIPELINE_NAMES)
