from __future__ import annotations

"""Reading, writing and summarising benchmark run artefacts."""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

TRACE_NAME = "trace.jsonl"
SUMMARY_NAME = "summary.json"
RESULTS_NAME = "results.tsv"
REPORT_NAME = "report.json"


def write_json(path: Path, payload: Any, *, indent: int = 2) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=indent, ensure_ascii=False)
        handle.write("\n")


def write_trace(run_dir: Path, rows: Iterable[Dict[str, Any]]) -> Path:
    trace_path = run_dir / TRACE_NAME
    trace_path.parent.mkdir(parents=True, exist_ok=True)
    with trace_path.open("w", encoding="utf-8") as handle:
        for row in rows:
            handle.write(json.dumps(row, ensure_ascii=False) + "\n")
    return trace_path


def load_trace(run_path: Path) -> List[Dict[str, Any]]:
    trace_path = run_path / TRACE_NAME
    if not trace_path.exists():
        raise FileNotFoundError(f"Trace not found at {trace_path}")
    records: List[Dict[str, Any]] = []
    with trace_path.open("r", encoding="utf-8") as handle:
        for line in handle:
            line = line.strip()
            if line:
                records.append(json.loads(line))
    return records


def distance_mismatches(records: List[Dict[str, Any]]) -> List[int]:
    """Sizes where completed variants disagree on the distance."""

    by_size: Dict[int, set] = {}
    for record in records:
        if record.get("skipped") or record.get("distance") is None:
            continue
        by_size.setdefault(record["size"], set()).add(record["distance"])
    return sorted(size for size, values in by_size.items() if len(values) > 1)


def _speed_ratio(records: List[Dict[str, Any]]) -> Optional[float]:
    """Total full-table time over rolling-row time on sizes both completed."""

    timings: Dict[str, Dict[int, float]] = {}
    for record in records:
        if record.get("skipped") or record.get("seconds") is None:
            continue
        timings.setdefault(record["variant"], {})[record["size"]] = record["seconds"]
    full = timings.get("full_table", {})
    rolling = timings.get("rolling_row", {})
    shared = set(full) & set(rolling)
    rolling_total = sum(rolling[size] for size in shared)
    if not shared or rolling_total <= 0:
        return None
    return sum(full[size] for size in shared) / rolling_total


def summarise(records: List[Dict[str, Any]]) -> Dict[str, Any]:
    variants: Dict[str, Dict[str, Any]] = {}
    for record in records:
        stats = variants.setdefault(
            record["variant"],
            {
                "runs": 0,
                "skipped": 0,
                "total_seconds": 0.0,
                "max_seconds": 0.0,
                "max_size": 0,
                "peak_memory_bytes": 0,
            },
        )
        if record.get("skipped"):
            stats["skipped"] += 1
            continue
        seconds = record.get("seconds") or 0.0
        stats["runs"] += 1
        stats["total_seconds"] += seconds
        stats["max_seconds"] = max(stats["max_seconds"], seconds)
        stats["max_size"] = max(stats["max_size"], record.get("size", 0))
        stats["peak_memory_bytes"] = max(
            stats["peak_memory_bytes"], record.get("memory_bytes", 0)
        )

    return {
        "num_measurements": len(records),
        "variants": variants,
        "full_over_rolling_time": _speed_ratio(records),
        "distance_mismatches": distance_mismatches(records),
    }


def write_report(run_path: Path, destination: Path | None = None) -> Path:
    records = load_trace(run_path)
    summary = summarise(records)
    target = destination or (run_path / REPORT_NAME)
    write_json(target, {"summary": summary, "records": records})
    return target
