"""
Shared runner for the analysis programs: config, logging, dataset loading and
the single top-level error boundary.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Union

import pandas as pd
from pydantic import ValidationError

from salesmr.ingest import DatasetError, normalize_sales, read_dataset
from salesmr.utils.config import AppConfig, load_config

logger = logging.getLogger(__name__)

ReportBuilder = Callable[[pd.DataFrame, AppConfig], str]


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(level=config.logging.level, format=config.logging.format)


def load_sales(path: Union[str, Path], encoding: str = "utf-8") -> pd.DataFrame:
    records = read_dataset(path, encoding=encoding)
    logger.info("Dataset loaded successfully: %s", path)
    logger.info("Total records: %d", len(records))
    return normalize_sales(records)


def run_analysis(
    title: str,
    build: ReportBuilder,
    dataset: Optional[Union[str, Path]] = None,
    config_path: Optional[Union[str, Path]] = None,
) -> int:
    try:
        config = load_config(config_path) if config_path else load_config()
    except (FileNotFoundError, ValidationError) as exc:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
        logger.error("Invalid configuration: %s", exc)
        return 1

    configure_logging(config)
    logger.info("Starting MapReduce analysis for %s", title)
    try:
        sales = load_sales(dataset or config.dataset.path, config.dataset.encoding)
    except (OSError, DatasetError) as exc:
        logger.error("Error processing data: %s", exc)
        return 1

    print(build(sales, config))
    return 0
