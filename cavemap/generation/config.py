"""Config — load map generation parameters from YAML files.

Map size, pipeline choice, seed and pass count live in YAML and are parsed
into a typed dataclass here, so a generation run can be reproduced from a
file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from cavemap.world.errors import UnknownPipelineError
from cavemap.world.grid import check_dimensions

PIPELINE_NAMES: tuple[str, ...] = ("cave", "lava", "noise")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class GenerationConfig:
    """Parameters for a single map generation run.

    Attributes:
        seed: RNG seed for a reproducible map, or None for fresh noise.
        height: Number of grid rows.
        width: Number of grid columns.
        pipeline: Name of the generation pipeline to run.
        smoothing_passes: Automaton passes applied by the smoothing
            pipelines.
    """

    seed: int | None = None
    height: int = 75
    width: int = 75
    pipeline: str = "cave"
    smoothing_passes: int = 8

    def validate(self) -> None:
        """Check the values before any random draw is made.

        Raises:
            InvalidDimensionsError: If height or width is not a positive int.
            UnknownPipelineError: If the pipeline name is not recognised.
            ValueError: If the seed is not an int or None, or the pass
                count is not a non-negative int.
        """
        check_dimensions(self.height, self.width)
        if self.seed is not None and not _is_int(self.seed):
            msg = f"seed must be an integer or empty, got {self.seed!r}"
            raise ValueError(msg)
        if self.pipeline not in PIPELINE_NAMES:
            msg = f"unknown pipeline {self.pipeline!r}; expected one of {PIPELINE_NAMES}"
            raise UnknownPipelineError(msg)
        if not _is_int(self.smoothing_passes) or self.smoothing_passes < 0:
            msg = f"smoothing_passes must be a non-negative integer, got {self.smoothing_passes!r}"
            raise ValueError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> GenerationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated GenerationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            seed=data.get("seed", cls.seed),
            height=data.get("height", cls.height),
            width=data.get("width", cls.width),
            pipeline=data.get("pipeline", cls.pipeline),
            smoothing_passes=data.get("smoothing_passes", cls.smoothing_passes),
        )
