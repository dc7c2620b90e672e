from __future__ import annotations

"""Benchmark configuration models and YAML loading."""

import os
from pathlib import Path
from typing import List, Literal, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, PositiveInt, ValidationError, field_validator

VariantName = Literal["full_table", "rolling_row"]
WorkloadKind = Literal["worst_case", "random"]

CONFIG_ENV_VAR = "EDITBENCH_CONFIG"

# Sweep of the original C++ driver. Pure-Python rolling rows past 10240 run
# for hours; configs/original_sweep.yaml opts in.
ORIGINAL_SIZES: Tuple[int, ...] = (
    10,
    20,
    40,
    80,
    160,
    320,
    640,
    1280,
    2560,
    5120,
    10240,
    20480,
    30000,
    40960,
    50000,
    60000,
    70000,
    81920,
)

DEFAULT_SIZES: Tuple[int, ...] = tuple(size for size in ORIGINAL_SIZES if size <= 2560)


class BenchmarkConfig(BaseModel):
    """Settings for one benchmark sweep."""

    sizes: List[PositiveInt] = Field(default_factory=lambda: list(DEFAULT_SIZES))
    variants: List[VariantName] = Field(
        default_factory=lambda: ["full_table", "rolling_row"]
    )
    workload: WorkloadKind = "worst_case"
    symbols: Tuple[str, str] = ("a", "b")
    alphabet: str = Field("acgt", min_length=1)
    repeat: PositiveInt = 1
    cell_bytes: PositiveInt = 4
    # Full tables above this many cells are skipped; None disables the guard.
    max_table_cells: Optional[PositiveInt] = 25_000_000
    seed: int = 7

    @field_validator("symbols")
    @classmethod
    def _distinct_symbols(cls, value: Tuple[str, str]) -> Tuple[str, str]:
        first, second = value
        if len(first) != 1 or len(second) != 1:
            raise ValueError("symbols must be single characters")
        if first == second:
            raise ValueError("symbols must differ so every position mismatches")
        return value

    @field_validator("variants")
    @classmethod
    def _non_empty_variants(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("at least one variant is required")
        return list(dict.fromkeys(value))


class ConfigNotFoundError(FileNotFoundError):
    """Raised when a config file cannot be located."""


def load_config(path: Optional[Path] = None) -> BenchmarkConfig:
    """Load a benchmark config from *path*, ``$EDITBENCH_CONFIG`` or defaults."""

    if path is None:
        env_value = os.getenv(CONFIG_ENV_VAR)
        if not env_value:
            return BenchmarkConfig()
        path = Path(env_value)
    if not path.exists():
        raise ConfigNotFoundError(f"Config file not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    try:
        return BenchmarkConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid config data in {path}: {exc}") from exc


def select_sizes(sizes: List[int], *, limit: Optional[int] = None) -> List[int]:
    """Keep the first *limit* sizes, preserving order."""

    if limit is not None:
        return sizes[: max(limit, 0)]
    return list(sizes)
