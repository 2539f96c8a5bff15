"""Command line interface for LottoPick."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from lottopick.config import ConfigLoadError, GeneratorConfig, load_config
from lottopick.data import export_csv
from lottopick.engine.generator import CombinationGenerator
from lottopick.storage import JsonFileStore

DEFAULT_STORE_DIR = ".lottopick"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lottopick",
        description="Generate lottery combinations that avoid commonly played patterns.",
    )
    parser.add_argument("--store-dir", default=DEFAULT_STORE_DIR, help="Directory holding the saved archive.")
    parser.add_argument("--config", default=None, help="YAML/JSON generator config file.")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Re-draw limit for common patterns (overrides the config file).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate and save combinations.")
    generate.add_argument("-n", "--count", type=int, default=1, help="Number of combinations.")
    generate.add_argument("--no-filters", action="store_true", help="Disable common-pattern filters.")

    subparsers.add_parser("list", help="Show saved combinations.")

    delete = subparsers.add_parser("delete", help="Delete a saved combination by id.")
    delete.add_argument("id", type=int)

    subparsers.add_parser("clear", help="Delete all saved combinations.")

    export = subparsers.add_parser("export", help="Write saved combinations to CSV.")
    export.add_argument("csv", help="Output CSV path.")
    return parser


def build_generator(
    store_dir: str | Path,
    config_path: str | None,
    *,
    max_attempts: int | None = None,
) -> CombinationGenerator:
    if config_path:
        config = load_config(config_path, max_attempts=max_attempts)
    elif max_attempts is not None:
        config = GeneratorConfig(max_attempts=max_attempts)
    else:
        config = GeneratorConfig()
    return CombinationGenerator(config=config, store=JsonFileStore(store_dir))


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        generator = build_generator(args.store_dir, args.config, max_attempts=args.max_attempts)
    except (FileNotFoundError, ConfigLoadError, ValidationError) as exc:
        print(f"[ERROR] Invalid configuration: {exc}", file=sys.stderr)
        return 2

    if args.command == "generate":
        if args.count <= 0:
            print("[ERROR] --count must be > 0.", file=sys.stderr)
            return 2
        if args.no_filters:
            generator.set_smart_filters(False)
        for combination in generator.generate_and_save(args.count):
            print(f"#{combination.id}  {generator.format_combination(combination)}")
    elif args.command == "list":
        combinations = generator.get_all_combinations()
        if not combinations:
            print("No saved combinations.")
        for combination in combinations:
            print(f"#{combination.id}  {generator.format_combination(combination)}")
    elif args.command == "delete":
        before = len(generator.get_all_combinations())
        generator.delete_combination(args.id)
        removed = before - len(generator.get_all_combinations())
        print(f"Deleted {removed} combination(s).")
    elif args.command == "clear":
        generator.clear_combinations()
        print("Cleared all combinations.")
    elif args.command == "export":
        path = export_csv(generator.get_all_combinations(), args.csv)
        print(f"[OK] Saved to {path}")

    if not generator.last_save_ok:
        print("[WARN] Changes could not be written to storage.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
