"""Charts comparing the work done by each strategy."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for benchmark results.

    Creates grouped bar charts (one group per board size, one bar per
    strategy) and a markdown summary table.
    """

    COLORS = {
        "Backtracking": "#2ecc71",  # Green
        "Brute Force": "#e74c3c",   # Red
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_attempts_by_size(),
            self.plot_time_by_size(),
        ]

    def _grouped_bars(self, metric: str, ylabel: str, title: str, filename: str,
                      log_scale: bool = False) -> str:
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = sorted(set(r.algorithm for r in self.results))
        sizes = sorted(set(r.size for r in self.results))

        x = np.arange(len(sizes))
        width = 0.8 / len(algorithms)

        for i, algo in enumerate(algorithms):
            values = []
            for size in sizes:
                matching = [getattr(r, metric) for r in self.results
                            if r.algorithm == algo and r.size == size]
                values.append(np.mean(matching) if matching else 0)

            offset = (i - len(algorithms) / 2 + 0.5) * width
            bars = ax.bar(x + offset, values, width,
                          label=algo,
                          color=self.COLORS.get(algo, "#95a5a6"),
                          edgecolor='black', linewidth=0.5)

            for bar, value in zip(bars, values):
                height = bar.get_height()
                if height > 0:
                    label = f'{int(value):,}' if metric == "attempts" else f'{value:.3f}s'
                    ax.annotate(label,
                                xy=(bar.get_x() + bar.get_width() / 2, height),
                                xytext=(0, 3),
                                textcoords="offset points",
                                ha='center', va='bottom', fontsize=8)

        ax.set_xlabel('Board size (N)', fontsize=12)
        ax.set_ylabel(ylabel, fontsize=12)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_xticks(x)
        ax.set_xticklabels([str(s) for s in sizes])
        ax.legend(title='Algorithm')

        # Brute force grows as N^N, so attempts span orders of magnitude
        if log_scale:
            ax.set_yscale('log')
        else:
            ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, filename)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_attempts_by_size(self) -> str:
        """Create grouped bar chart of attempts per board size (log scale)."""
        return self._grouped_bars(
            "attempts", "Attempts (log scale)",
            "Placement Attempts by Board Size", "attempts_by_size.png",
            log_scale=True,
        )

    def plot_time_by_size(self) -> str:
        """Create grouped bar chart of search time per board size."""
        return self._grouped_bars(
            "time_seconds", "Time (seconds)",
            "Search Time by Board Size", "time_by_size.png",
        )

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| N | Algorithm | Solutions | Attempts | Time |",
            "|---|-----------|-----------|----------|------|"
        ]

        for r in sorted(self.results, key=lambda r: (r.size, r.algorithm)):
            lines.append(
                f"| {r.size} | {r.algorithm} | {r.solutions} | {r.attempts:,} | {r.time_seconds:.4f}s |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
