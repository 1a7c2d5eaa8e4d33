"""
Main entry point for running word-search benchmarks.

Usage:
    python -m src.main config.yaml
    python -m src.main config.yaml --output results/run1.json --verbose
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

import yaml

from .environment import WordSearchBench, BenchmarkConfig
from .wordsearch import ConfigurationError


def load_config(config_path: str) -> BenchmarkConfig:
    """Load benchmark configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return BenchmarkConfig(**data)


def main():
    parser = argparse.ArgumentParser(
        description="Run a word-search benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  grid_size: 12
  max_turns: 40
  seed: 42
  vocabulary: [JUPITER, MARTE, VENUS, TIERRA, LUNA, SOL, ESTRELLA, GALAXIA]
  players:
    - model: gpt-4o
      temperature: 0.7
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON (default: results/<timestamp>.json)"
    )
    parser.add_argument(
        "--progress",
        help="Append completion records to this JSON-lines file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("results") / f"benchmark_{timestamp}.json"

    try:
        bench = WordSearchBench.create(config=config, progress_path=args.progress)
    except ConfigurationError as e:
        print(f"Error setting up puzzle: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Config: {args.config}")
        print(f"Output: {output_path}")
        print()

    try:
        result = bench.run(verbose=args.verbose)
    except KeyboardInterrupt:
        print("\nBenchmark interrupted by user")
        bench.end_reason = "Interrupted by user"
        result = bench.get_result()
    except Exception as e:
        print(f"Error during benchmark: {e}", file=sys.stderr)
        bench.end_reason = f"Error: {str(e)}"
        result = bench.get_result()

    bench.save_result(output_path)

    if args.verbose:
        print()
        print(f"Results saved to: {output_path}")

    print()
    print("=== Benchmark Summary ===")
    print(f"Total turns: {result.total_turns}")
    print(f"End reason: {result.end_reason}")
    print(f"Duration: {result.duration_seconds:.2f}s")
    if result.winner:
        print(f"Winner: {result.winner}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
