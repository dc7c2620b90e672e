from __future__ import annotations

from pathlib import Path

import pytest

from editbench.config import (
    CONFIG_ENV_VAR,
    DEFAULT_SIZES,
    ORIGINAL_SIZES,
    BenchmarkConfig,
    ConfigNotFoundError,
    load_config,
    select_sizes,
)

REPO_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "benchmark.yaml"
ORIGINAL_CONFIG = REPO_CONFIG.with_name("original_sweep.yaml")


def test_defaults_stop_at_pure_python_friendly_sizes(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    config = load_config()
    assert config.sizes == list(DEFAULT_SIZES)
    assert config.sizes[0] == 10 and config.sizes[-1] == 2560
    assert config.variants == ["full_table", "rolling_row"]
    assert config.symbols == ("a", "b")


def test_shipped_config_loads() -> None:
    config = load_config(REPO_CONFIG)
    assert config.workload == "worst_case"
    assert config.repeat == 3
    assert config.sizes[-1] == 2560


def test_original_sweep_is_opt_in() -> None:
    config = load_config(ORIGINAL_CONFIG)
    assert config.sizes == list(ORIGINAL_SIZES)
    assert config.sizes[-1] == 81920
    assert max(DEFAULT_SIZES) < max(ORIGINAL_SIZES)


def test_env_var_points_at_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "bench.yaml"
    path.write_text("sizes: [5, 6]\nworkload: random\nalphabet: xy\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    config = load_config()
    assert config.sizes == [5, 6]
    assert config.workload == "random"
    assert config.alphabet == "xy"


def test_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "body",
    [
        "symbols: [a, a]\n",
        "sizes: [0]\n",
        "variants: [bogus]\n",
        "variants: []\n",
        "repeat: 0\n",
        "sizes: [1, 2\n",
    ],
)
def test_invalid_config_raises_value_error(tmp_path: Path, body: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_duplicate_variants_collapse() -> None:
    config = BenchmarkConfig(variants=["rolling_row", "rolling_row", "full_table"])
    assert config.variants == ["rolling_row", "full_table"]


def test_select_sizes_limit() -> None:
    assert select_sizes([1, 2, 3], limit=2) == [1, 2]
    assert select_sizes([1, 2, 3], limit=-1) == []
    assert select_sizes([1, 2, 3]) == [1, 2, 3]
