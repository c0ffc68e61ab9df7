"""
Configuration loader for the analytics package.

Reads `config/analytics.yml` (when present), loads `.env` overrides, expands
environment variables and validates the result into frozen settings models.
"""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = ROOT_DIR / "config" / "analytics.yml"

ENV_CONFIG_PATH = "SALESMR_CONFIG"
ENV_DATASET = "SALES_DATASET"
ENV_THRESHOLD = "LOW_SALES_THRESHOLD"


def load_env() -> None:
    # Load .env then .env.local (allow local overrides)
    load_dotenv(ROOT_DIR / ".env")
    load_dotenv(ROOT_DIR / ".env.local", override=True)


def _expand_env(value: Any) -> Any:
    """Recursively expand environment variables inside config values."""
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    if isinstance(value, dict):
        return {key: _expand_env(val) for key, val in value.items()}
    return value


class DatasetSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str = "dataset.csv"
    encoding: str = "utf-8"


class ReportSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    top_products: int = Field(10, ge=1)
    top_suppliers: int = Field(15, ge=1)
    supplier_formatted_rows: int = Field(10, ge=1)
    low_selling_threshold: float = Field(100.0, allow_inf_nan=False)
    low_selling_display_rows: int = Field(20, ge=1)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s %(levelname)s %(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    dataset: DatasetSettings = DatasetSettings()
    reports: ReportSettings = ReportSettings()
    logging: LoggingSettings = LoggingSettings()


def _apply_env_overrides(raw: Dict[str, Any]) -> Dict[str, Any]:
    dataset = os.environ.get(ENV_DATASET)
    if dataset:
        raw.setdefault("dataset", {})["path"] = dataset
    threshold = os.environ.get(ENV_THRESHOLD)
    if threshold:
        raw.setdefault("reports", {})["low_selling_threshold"] = threshold
    return raw


@lru_cache(maxsize=1)
def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Load the configuration file and convert it into typed settings.

    Parameters
    ----------
    path: Optional path override; defaults to $SALESMR_CONFIG or
        config/analytics.yml. An explicit path that does not exist is an error,
        a missing default file falls back to built-in defaults.
    """
    load_env()
    explicit = path or os.environ.get(ENV_CONFIG_PATH)
    cfg_path = Path(explicit) if explicit else DEFAULT_CONFIG_PATH
    if explicit and not cfg_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {cfg_path}")

    raw_data: Dict[str, Any] = {}
    if cfg_path.exists():
        with cfg_path.open("r", encoding="utf-8") as fh:
            raw_data = yaml.safe_load(fh) or {}

    expanded = _apply_env_overrides(_expand_env(raw_data))
    return AppConfig.model_validate(expanded)


__all__ = [
    "AppConfig",
    "DatasetSettings",
    "LoggingSettings",
    "ReportSettings",
    "load_config",
    "load_env",
]
