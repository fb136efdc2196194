"""Configuration file loading helpers."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def read_yaml(path: str | Path) -> dict[str, Any]:
    """Read a YAML mapping from ``path``.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty or does not hold a mapping
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)

    if not data or not isinstance(data, dict):
        raise ValueError(f"Empty or invalid YAML in {config_path}")
    return data


def read_optional_yaml(path: str | None) -> dict[str, Any]:
    if not path:
        return {}
    if not os.path.exists(path):
        logger.info("Dispatcher configuration %s not found; defaults will be used", path)
        return {}
    return read_yaml(path)


def write_yaml(path: str | Path, payload: dict[str, Any]) -> None:
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(payload, handle, default_flow_style=False, sort_keys=False)
