"""Command-line interface for the sequence benchmarks.

Usage:
    python -m seqarrays.benchmarks.cli run
    python -m seqarrays.benchmarks.cli run --sizes 100 1000 10000 --structures doubling blocked
    python -m seqarrays.benchmarks.cli run --config suite.yaml --plot timings.png
    python -m seqarrays.benchmarks.cli info
"""

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from seqarrays.benchmarks.analysis import format_summary
from seqarrays.benchmarks.harness import run_benchmark
from seqarrays.config.enums import BenchmarkOperation, StructureKind
from seqarrays.config.sequence_config import create_default_config, load_suite_config
from seqarrays.config.validation import validate_and_warn

logger = logging.getLogger(__name__)


def cmd_run(args: argparse.Namespace) -> None:
    """Run the benchmark and report timings."""
    if args.config:
        logger.info(f"Loading suite config from {args.config}")
        config = load_suite_config(args.config)
    else:
        config = create_default_config()

    if args.sizes:
        config.benchmark.sizes = list(args.sizes)
    if args.structures:
        config.benchmark.structures = [StructureKind(s) for s in args.structures]
    if args.repeats is not None:
        config.benchmark.repeats = args.repeats
    if args.operation:
        config.benchmark.operation = BenchmarkOperation(args.operation)

    validate_and_warn(config)

    logger.info(
        f"Timing {config.benchmark.operation.value} for "
        f"{len(config.benchmark.structures)} structures at sizes {config.benchmark.sizes}"
    )
    result = run_benchmark(config)

    print(format_summary(result))

    if args.json:
        path = Path(args.json)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"config": config.to_dict(), "result": result.to_dict()}, f, indent=2)
        logger.info(f"Results saved to {path}")

    if args.plot:
        from seqarrays.benchmarks.visualization import plot_timings

        plot_timings(result, save_path=args.plot)


def cmd_info(args: argparse.Namespace) -> None:
    """Display available structures and the default configuration."""
    config = create_default_config()

    print("\n" + "=" * 60)
    print("SEQARRAYS BENCHMARK INFORMATION")
    print("=" * 60)

    print("\n[Structures]")
    for i, kind in enumerate(StructureKind, 1):
        print(f"  {i:2d}. {kind.value}")

    print("\n[Operations]")
    for op in BenchmarkOperation:
        print(f"  - {op.value}")

    print("\n[Defaults]")
    for section, values in config.to_dict().items():
        print(f"  {section}:")
        for key, value in values.items():
            print(f"    {key}: {value}")

    print("\n" + "=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Timing comparison of the seqarrays sequence structures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Push benchmark with the default sizes
  python -m seqarrays.benchmarks.cli run

  # Front-insert benchmark for two structures
  python -m seqarrays.benchmarks.cli run --operation insert_front \\
      --structures doubling blocked --sizes 100 1000

  # Suite file, JSON results and a plot
  python -m seqarrays.benchmarks.cli run --config suite.yaml \\
      --json results/timings.json --plot results/timings.png

  # Show information
  python -m seqarrays.benchmarks.cli info
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    run_parser = subparsers.add_parser("run", help="Run the timing benchmark")
    run_parser.add_argument(
        "--config",
        default=None,
        help="YAML suite config (default: packaged defaults.yaml)",
    )
    run_parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=None,
        help="Sequence sizes to time",
    )
    run_parser.add_argument(
        "--structures",
        choices=[k.value for k in StructureKind],
        nargs="+",
        default=None,
        help="Structures to time (default: all)",
    )
    run_parser.add_argument(
        "--repeats",
        type=int,
        default=None,
        help="Timings per structure and size; the fastest is kept",
    )
    run_parser.add_argument(
        "--operation",
        choices=[op.value for op in BenchmarkOperation],
        default=None,
        help="Operation to time (default: push)",
    )
    run_parser.add_argument(
        "--json",
        default=None,
        help="Write config and timings to this JSON file",
    )
    run_parser.add_argument(
        "--plot",
        default=None,
        help="Save a log-log timing plot to this file",
    )

    subparsers.add_parser("info", help="Display structures and defaults")

    args = parser.parse_args(argv)

    if args.command == "run":
        cmd_run(args)
    elif args.command == "info":
        cmd_info(args)
    else:
        parser.print_help()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
