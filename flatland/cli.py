# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Load one CSV file into a DataSetCache and report what was
#   inferred. The cache itself reports through the logging module;
#   this script only adds a short summary.
#
# USAGE:
# ------
#   python -m flatland.cli                       (uses DATA_FILE)
#   python -m flatland.cli data/sales.csv
#   python -m flatland.cli data/sales.tsv --delimiter "\t"
#   python -m flatland.cli data/sales.csv --seed-type unknown
#
# EXIT STATUS:
# ------------
#   0 → import succeeded
#   1 → import failed (error printed to stderr)
#
# ==============================================

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from flatland.cache import CacheImportError, DataSetCache
from flatland.config import get_config
from flatland.inference import SEED_TYPES, FieldType


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flatland",
        description="Load a CSV file into memory and infer a type per column.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="CSV file to import (default: DATA_FILE from the environment)",
    )
    parser.add_argument(
        "--delimiter",
        default=None,
        help="Field delimiter (default: CSV_DELIMITER or ',')",
    )
    parser.add_argument(
        "--seed-type",
        choices=[t.value for t in SEED_TYPES],
        default=None,
        help="Type every field starts from before the first row (default: integer)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(message)s",
    )

    if args.delimiter is not None:
        delimiter = args.delimiter
        if delimiter.isascii():
            # Allow "\t" to be passed literally from a shell
            delimiter = delimiter.encode().decode("unicode_escape")
        config = replace(config, csv=replace(config.csv, delimiter=delimiter))

    seed_type = FieldType(args.seed_type) if args.seed_type else None
    path = args.path or config.data_file

    cache = DataSetCache(config=config, seed_type=seed_type)
    try:
        cache.import_csv(path)
    except CacheImportError as e:
        print(f"✗ Import failed: {e}", file=sys.stderr)
        return 1

    print(f"✓ Imported {cache.row_count} rows, {len(cache.field_names)} fields from {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
