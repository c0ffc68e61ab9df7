#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from salesmr.analyses import ANALYSES, low_selling_products
from salesmr.analyses.base import configure_logging, run_analysis
from salesmr.ingest import DatasetError, read_dataset, to_records
from salesmr.utils.config import load_config

logger = logging.getLogger(__name__)


def inspect_dataset(records: pd.DataFrame, preview_rows: int = 3) -> str:
    lines = []
    for idx, record in enumerate(to_records(records.head(preview_rows)), start=1):
        lines.append(f"Row {idx}: {record}")
    lines.append(f"✅ Processed {len(records)} rows")
    if "ITEM TYPE" in records.columns:
        item_types = [t for t in records["ITEM TYPE"].unique() if t]
    else:
        item_types = []
    lines.append(f"📊 Item types found: {item_types}")
    return "\n".join(lines)


def cmd_inspect(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config) if args.config else load_config()
    except (FileNotFoundError, ValidationError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1
    configure_logging(config)
    path = args.dataset or config.dataset.path
    try:
        records = read_dataset(path, encoding=config.dataset.encoding)
    except (OSError, DatasetError) as exc:
        logger.error("Error inspecting dataset: %s", exc)
        return 1
    print(inspect_dataset(records))
    return 0


def cmd_analysis(args: argparse.Namespace) -> int:
    module = ANALYSES[args.cmd]
    if args.cmd == "low-selling-products":
        build = lambda sales, config: module.build(sales, config, args.threshold)  # noqa: E731
    else:
        build = module.build
    return run_analysis(module.TITLE, build, dataset=args.dataset, config_path=args.config)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sales map/reduce analytics")
    parser.add_argument("--dataset", type=Path, help="CSV dataset (defaults to dataset.path in config)")
    parser.add_argument("--config", type=Path, help="Optional path to analytics.yml")
    sub = parser.add_subparsers(dest="cmd", required=True)

    for name, module in ANALYSES.items():
        p = sub.add_parser(name, help=module.TITLE)
        if name == "low-selling-products":
            p.add_argument(
                "threshold", nargs="?", type=low_selling_products.threshold_value, default=None, help="Sales threshold"
            )
        p.set_defaults(func=cmd_analysis)

    p = sub.add_parser("inspect", help="row count, item types and first rows of the dataset")
    p.set_defaults(func=cmd_inspect)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
