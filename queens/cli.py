"""Command-line interface for the N-Queens visualizer."""

import argparse
import logging
import sys

from .core.board import Board
from .errors import QueensError
from .solvers import Algorithm, create_solver
from .runner import RunController, RunParameters, ObserverGroup
from .display import ConsoleObserver, AnimationRecorder
from .benchmark import Benchmark
from .benchmark.visualizer import Visualizer


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="N-Queens Visualizer: watch brute force and backtracking search step by step",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Animate backtracking on a 5x5 board, 300ms per step
  python -m queens.cli animate --size 5 --speed 300

  # Animate brute force and save the run as a GIF
  python -m queens.cli animate --size 4 --algorithm bruteforce --gif out/bf4.gif

  # Print every 6x6 solution with both strategies
  python -m queens.cli solve --size 6 --algorithm all --verbose

  # Compare the work done on N = 4..6
  python -m queens.cli compare --sizes 4 5 6 --output results/
        """
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    algorithm_choices = [a.value for a in Algorithm]

    # Animate command
    anim_parser = subparsers.add_parser("animate", help="Run a paced, step-by-step search")
    anim_parser.add_argument(
        "--size", "-n", type=int, default=4,
        help="Board size N (default: 4)"
    )
    anim_parser.add_argument(
        "--algorithm", "-a", choices=algorithm_choices, default="backtrack",
        help="Search strategy (default: backtrack)"
    )
    anim_parser.add_argument(
        "--speed", "-s", type=int, default=500,
        help="Base delay between steps in ms (default: 500)"
    )
    anim_parser.add_argument(
        "--quiet", "-q", action="store_true",
        help="Hide routine attempt lines"
    )
    anim_parser.add_argument(
        "--gif", type=str, default=None,
        help="Also save the run as an animated GIF"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Find every solution without pacing")
    solve_parser.add_argument(
        "--size", "-n", type=int, default=8,
        help="Board size N (default: 8)"
    )
    solve_parser.add_argument(
        "--algorithm", "-a", choices=algorithm_choices + ["all"], default="backtrack",
        help="Search strategy (default: backtrack)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Print every solution board and detailed statistics"
    )

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Compare strategies across board sizes")
    compare_parser.add_argument(
        "--sizes", type=int, nargs="+", default=Benchmark.DEFAULT_SIZES,
        help="Board sizes to compare (default: 4 5 6)"
    )
    compare_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output directory for JSON results and charts"
    )
    compare_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "animate":
            cmd_animate(args)
        elif args.command == "solve":
            cmd_solve(args)
        elif args.command == "compare":
            cmd_compare(args)
    except QueensError as e:
        print(f"Error: {e}")
        sys.exit(2)


def cmd_animate(args):
    """Handle the animate command."""
    parameters = RunParameters(
        size=args.size,
        algorithm=Algorithm.from_name(args.algorithm),
        interval_ms=args.speed,
    )

    console = ConsoleObserver(show_attempts=not args.quiet)
    recorder = AnimationRecorder() if args.gif else None
    observer = ObserverGroup(console, recorder) if recorder else console

    controller = RunController(observer=observer)

    print(f"{parameters.algorithm.label} on a {parameters.size}x{parameters.size} board "
          f"({parameters.interval_ms}ms per step). Press Ctrl-C to stop.")
    controller.start(parameters)

    try:
        while not controller.join(timeout=0.2):
            pass
    except KeyboardInterrupt:
        controller.cancel()
        controller.join()

    if recorder is not None and recorder.frames:
        path = recorder.save(args.gif, interval_ms=parameters.interval_ms)
        print(f"Animation saved to {path}")


def cmd_solve(args):
    """Handle the solve command."""
    if args.size < 1:
        print(f"Error: board size must be at least 1, got {args.size}")
        sys.exit(2)

    if args.algorithm == "all":
        algorithms = list(Algorithm)
    else:
        algorithms = [Algorithm.from_name(args.algorithm)]

    for algorithm in algorithms:
        solver = create_solver(algorithm, args.size)
        print(f"Solving N={args.size} with {solver.name}...")
        solutions, stats = solver.solve()

        print(f"✓ {stats.solutions} solution(s), {stats.attempts:,} attempts "
              f"in {stats.time_seconds:.4f}s")
        if args.verbose:
            print(f"  Placements: {stats.placements:,}")
            print(f"  Backtracks: {stats.backtracks:,}")
            print(f"  Invalid configurations: {stats.invalid_configurations:,}")
            print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
            for i, columns in enumerate(solutions, 1):
                print(f"\n--- Solution {i}: {columns} ---")
                print(Board.from_columns(columns))
        print()


def cmd_compare(args):
    """Handle the compare command."""
    print("=" * 60)
    print("N-QUEENS STRATEGY COMPARISON")
    print("=" * 60)
    print(f"Board sizes: {args.sizes}")

    benchmark = Benchmark(sizes=args.sizes)
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)

    for size, entry in summary["results_by_size"].items():
        print(f"\nN = {size}:")
        for algo, stats in entry["by_algorithm"].items():
            print(f"  {algo}: {stats['solutions']} solutions, "
                  f"{stats['attempts']:,} attempts, {stats['time_seconds']:.4f}s")
        if not entry["solutions_agree"]:
            print("  ! Strategies disagree on the solution count")
        if "attempt_ratio" in entry:
            print(f"  Brute force made {entry['attempt_ratio']:.1f}x as many attempts")

    if args.output:
        benchmark.save_results(args.output)
        print(f"\nResults saved to {args.output}")

        if not args.no_charts:
            print("\nGenerating charts...")
            visualizer = Visualizer(results, args.output)
            charts = visualizer.generate_all()
            visualizer.generate_summary_table()
            for chart in charts:
                print(f"  - {chart}")

    print("\n" + "=" * 60)
    print("Comparison complete!")


if __name__ == "__main__":
    main()
