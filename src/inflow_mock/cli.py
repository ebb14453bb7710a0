"""
Command line interface: generate an entity graph and write it out.

Examples:
  # Small preset, seed 42, validate and write seed.sql
  inflow-mock

  # Medium preset, JSON output
  inflow-mock --preset=medium --format=json --output=fixtures/medium.json

  # Explicit counts over a preset, fixed reference date
  inflow-mock --preset=large --products=250 --as-of=2024-06-30

  # Options from a YAML file (command line flags win)
  inflow-mock --config=run.yaml --seed=7

  # Generate and validate only
  inflow-mock --validate-only
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .builder import EntityGraphBuilder
from .config import PRESETS, load_config_file, resolve_config
from .exceptions import InflowMockError
from .validation import GraphValidator
from .writer import write_json, write_sql

DEFAULT_SEED = 42
DEFAULT_OUTPUTS = {"sql": Path("seed.sql"), "json": Path("seed.json")}


def non_negative_int(value: str) -> int:
    """argparse type: integer >= 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inflow-mock",
        description="Generate deterministic mock data for a manufacturing inventory schema.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:" + __doc__.split("Examples:", 1)[1],
    )

    counts = parser.add_argument_group("sizes")
    counts.add_argument("--preset", choices=sorted(PRESETS), help="Size preset (default: small)")
    for name in ("products", "vendors", "customers", "locations"):
        counts.add_argument(
            f"--{name}",
            type=non_negative_int,
            metavar="N",
            help=f"Number of {name} (overrides preset)",
        )

    parser.add_argument(
        "--seed",
        type=int,
        help=f"Random seed for reproducibility (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--as-of",
        dest="as_of",
        metavar="YYYY-MM-DD",
        help="Reference date for generated dates and timestamps (default: today, UTC)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="FILE.yaml",
        help="YAML file of generation options; command line flags win",
    )

    parser.add_argument(
        "--output",
        type=Path,
        help="Output path (default: seed.sql or seed.json)",
    )
    parser.add_argument(
        "--format",
        choices=sorted(DEFAULT_OUTPUTS),
        default="sql",
        help="Output format (default: sql)",
    )
    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Generate and validate data without writing output",
    )
    parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Skip validation checks after generation",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Generate data with CLI interface.

    Returns:
        0 on success, 1 on a generation error or validation failure
    """
    args = build_parser().parse_args(argv)

    try:
        options = load_config_file(args.config) if args.config else {}
        if args.seed is None and options.get("seed") is None:
            options["seed"] = DEFAULT_SEED
        if args.quiet:
            options["verbose"] = False
        elif options.get("verbose") is None:
            options["verbose"] = True

        config = resolve_config(
            options,
            preset=args.preset,
            products=args.products,
            vendors=args.vendors,
            customers=args.customers,
            locations=args.locations,
            seed=args.seed,
            as_of=args.as_of,
        )
        graph = EntityGraphBuilder(config).build()
    except InflowMockError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.skip_validation:
        validator = GraphValidator(graph, config)
        if config.verbose:
            all_passed = validator.print_validation_report()
        else:
            all_passed = all(passed for _, passed, _ in validator.run_all_validations())
    else:
        all_passed = True
        if config.verbose:
            print("\nValidation skipped.")

    if not all_passed:
        print("Validation failed; no output written.", file=sys.stderr)
        return 1

    if not args.validate_only:
        output = args.output or DEFAULT_OUTPUTS[args.format]
        writer = write_json if args.format == "json" else write_sql
        try:
            writer(graph, output, verbose=config.verbose)
        except OSError as e:
            print(f"Error: cannot write {output}: {e}", file=sys.stderr)
            return 1
        if config.verbose:
            print(f"\nOutput: {output}")

    if config.verbose:
        print("\nSuccess!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
