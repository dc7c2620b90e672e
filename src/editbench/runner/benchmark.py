from __future__ import annotations

"""Benchmark driver timing each distance variant across input sizes."""

import logging
import time
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config import BenchmarkConfig, select_sizes
from ..distance import get_variant, theoretical_cells
from ..reports import RESULTS_NAME, SUMMARY_NAME, summarise, write_json, write_trace
from ..workloads import random_pair, worst_case_pair

logger = logging.getLogger(__name__)


@dataclass
class Measurement:
    size: int
    variant: str
    workload: str
    distance: Optional[int]
    seconds: Optional[float]
    mean_seconds: Optional[float]
    repeats: int
    memory_cells: int
    memory_bytes: int
    skipped: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class BenchmarkRunner:
    def __init__(self, config: Optional[BenchmarkConfig] = None):
        self.config = config or BenchmarkConfig()

    def run(
        self,
        *,
        sizes: Optional[List[int]] = None,
        limit: Optional[int] = None,
        run_dir: Optional[Path] = None,
    ) -> List[Measurement]:
        if sizes:
            invalid = [size for size in sizes if size < 1]
            if invalid:
                raise ValueError(f"Sizes must be positive integers, got {invalid}")
        chosen = select_sizes(list(sizes or self.config.sizes), limit=limit)
        results: List[Measurement] = []
        for size in chosen:
            a, b = self._inputs(size)
            for variant in self.config.variants:
                results.append(self._measure(variant, a, b, size))
        if run_dir is not None:
            persist_run(results, run_dir, config=self.config)
        return results

    def _inputs(self, size: int) -> Tuple[str, str]:
        if self.config.workload == "random":
            return random_pair(size, self.config.alphabet, seed=self.config.seed + size)
        return worst_case_pair(size, self.config.symbols)

    def _measure(self, variant: str, a: str, b: str, size: int) -> Measurement:
        cells = theoretical_cells(variant, len(a), len(b))
        memory_bytes = cells * self.config.cell_bytes
        limit = self.config.max_table_cells
        if variant == "full_table" and limit is not None and cells > limit:
            logger.warning(
                "Skipping full_table at size %d: %d cells exceeds limit %d",
                size,
                cells,
                limit,
            )
            return Measurement(
                size=size,
                variant=variant,
                workload=self.config.workload,
                distance=None,
                seconds=None,
                mean_seconds=None,
                repeats=0,
                memory_cells=cells,
                memory_bytes=memory_bytes,
                skipped=True,
            )

        fn = get_variant(variant)
        timings: List[float] = []
        distance = 0
        for _ in range(self.config.repeat):
            start = time.perf_counter()
            distance = fn(a, b)
            timings.append(time.perf_counter() - start)
        logger.debug(
            "%s size=%d distance=%d best=%.6fs", variant, size, distance, min(timings)
        )
        return Measurement(
            size=size,
            variant=variant,
            workload=self.config.workload,
            distance=distance,
            seconds=min(timings),
            mean_seconds=sum(timings) / len(timings),
            repeats=len(timings),
            memory_cells=cells,
            memory_bytes=memory_bytes,
        )


def persist_run(
    measurements: Iterable[Measurement],
    run_dir: Path,
    *,
    config: BenchmarkConfig,
) -> Dict[str, Any]:
    records = [measurement.to_dict() for measurement in measurements]
    run_dir.mkdir(parents=True, exist_ok=True)
    write_trace(run_dir, records)

    rows: List[str] = ["size\tvariant\tdistance\tseconds\tmemory_cells\tmemory_bytes"]
    for record in records:
        seconds = f"{record['seconds']:.6f}" if record["seconds"] is not None else ""
        distance = record["distance"] if record["distance"] is not None else ""
        rows.append(
            f"{record['size']}\t{record['variant']}\t{distance}\t{seconds}"
            f"\t{record['memory_cells']}\t{record['memory_bytes']}"
        )
    (run_dir / RESULTS_NAME).write_text("\n".join(rows) + "\n", encoding="utf-8")

    summary = summarise(records)
    summary["generated_at"] = datetime.now(timezone.utc).isoformat()
    summary["config"] = config.model_dump(mode="json")
    write_json(run_dir / SUMMARY_NAME, summary)
    logger.info("Wrote %d measurements to %s", len(records), run_dir)
    return summary
