from __future__ import annotations

import json
from pathlib import Path

import pytest

from editbench.reports import (
    distance_mismatches,
    load_trace,
    summarise,
    write_report,
    write_trace,
)


def _record(size, variant, distance, seconds, memory_bytes, skipped=False):
    return {
        "size": size,
        "variant": variant,
        "workload": "worst_case",
        "distance": distance,
        "seconds": seconds,
        "mean_seconds": seconds,
        "repeats": 0 if skipped else 1,
        "memory_cells": memory_bytes // 4,
        "memory_bytes": memory_bytes,
        "skipped": skipped,
    }


def test_summarise_per_variant_metrics() -> None:
    records = [
        _record(10, "full_table", 10, 0.4, 400),
        _record(10, "rolling_row", 10, 0.2, 40),
        _record(20, "full_table", None, None, 1600, skipped=True),
        _record(20, "rolling_row", 20, 0.6, 80),
    ]
    summary = summarise(records)

    assert summary["num_measurements"] == 4
    full = summary["variants"]["full_table"]
    rolling = summary["variants"]["rolling_row"]
    assert full["runs"] == 1 and full["skipped"] == 1
    assert full["max_size"] == 10
    assert full["peak_memory_bytes"] == 400
    assert rolling["total_seconds"] == pytest.approx(0.8)
    assert rolling["max_seconds"] == pytest.approx(0.6)
    assert rolling["max_size"] == 20
    assert summary["full_over_rolling_time"] == pytest.approx(2.0)
    assert summary["distance_mismatches"] == []


def test_summarise_empty() -> None:
    summary = summarise([])
    assert summary["num_measurements"] == 0
    assert summary["variants"] == {}
    assert summary["full_over_rolling_time"] is None


def test_distance_mismatches_flags_disagreeing_sizes() -> None:
    records = [
        _record(5, "full_table", 5, 0.1, 100),
        _record(5, "rolling_row", 4, 0.1, 20),
        _record(6, "full_table", 6, 0.1, 144),
        _record(6, "rolling_row", 6, 0.1, 24),
    ]
    assert distance_mismatches(records) == [5]


def test_write_report_persists_summary(tmp_path: Path) -> None:
    run_dir = tmp_path / "run"
    write_trace(run_dir, [_record(4, "rolling_row", 4, 0.01, 16) for _ in range(2)])

    target = write_report(run_dir)
    payload = json.loads(target.read_text())
    assert payload["summary"]["num_measurements"] == 2
    assert len(load_trace(run_dir)) == 2


def test_load_trace_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_trace(tmp_path)
