"""Side-by-side comparison of the search strategies across board sizes."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import json
import logging
import os

from tqdm import tqdm

from ..solvers import Algorithm, create_solver


logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single strategy on a single board size."""
    size: int
    algorithm: str
    solutions: int
    attempts: int
    backtracks: int
    time_seconds: float
    memory_bytes: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "size": self.size,
            "algorithm": self.algorithm,
            "solutions": self.solutions,
            "attempts": self.attempts,
            "backtracks": self.backtracks,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            **self.extra
        }


class Benchmark:
    """
    Runs every strategy on every board size without pacing and records how
    much work each one did.

    Brute force is N^N: N=7 is about 820k boards and N=8 about 16.7M, so
    keep the default sizes small.
    """

    DEFAULT_SIZES = [4, 5, 6]

    def __init__(
        self,
        sizes: Optional[List[int]] = None,
        algorithms: Optional[List[Algorithm]] = None,
        track_memory: bool = True,
    ):
        """
        Initialize the benchmark.

        Args:
            sizes: Board sizes to run (default: 4, 5, 6).
            algorithms: Strategies to compare (default: all).
            track_memory: Measure peak memory with tracemalloc (slower).
        """
        self.sizes = sizes or list(self.DEFAULT_SIZES)
        self.algorithms = algorithms or list(Algorithm)
        self.track_memory = track_memory
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full comparison.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []

        pbar = tqdm(total=len(self.sizes) * len(self.algorithms),
                    desc="Benchmarking", disable=not show_progress)

        for size in self.sizes:
            for algorithm in self.algorithms:
                pbar.set_postfix(N=size, algorithm=algorithm.value)
                self.results.append(self._run_single(size, algorithm))
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(self, size: int, algorithm: Algorithm) -> BenchmarkResult:
        """Run one strategy on one board size."""
        solver = create_solver(algorithm, size)
        _, stats = solver.solve(track_memory=self.track_memory)
        logger.debug("%s N=%d: %d solutions, %d attempts in %.4fs",
                     solver.name, size, stats.solutions, stats.attempts, stats.time_seconds)

        return BenchmarkResult(
            size=size,
            algorithm=solver.name,
            solutions=stats.solutions,
            attempts=stats.attempts,
            backtracks=stats.backtracks,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            extra=stats.extra
        )

    def get_summary(self) -> Dict[str, Any]:
        """
        Summarize results per board size.

        For each size: the per-strategy counters, whether every strategy found
        the same number of solutions, and brute force attempts divided by
        backtracking attempts.
        """
        summary: Dict[str, Any] = {
            "sizes": self.sizes,
            "algorithms": [a.label for a in self.algorithms],
            "results_by_size": {}
        }

        for size in self.sizes:
            size_results = [r for r in self.results if r.size == size]
            if not size_results:
                continue

            by_algo = {
                r.algorithm: {
                    "solutions": r.solutions,
                    "attempts": r.attempts,
                    "time_seconds": r.time_seconds,
                }
                for r in size_results
            }
            entry: Dict[str, Any] = {
                "by_algorithm": by_algo,
                "solutions_agree": len({r.solutions for r in size_results}) == 1,
            }

            bt = by_algo.get(Algorithm.BACKTRACKING.label)
            bf = by_algo.get(Algorithm.BRUTE_FORCE.label)
            if bt and bf and bt["attempts"]:
                entry["attempt_ratio"] = bf["attempts"] / bt["attempts"]

            summary["results_by_size"][str(size)] = entry

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save raw results and the summary as JSON."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        logger.info("Results saved to %s", output_dir)
