"""Configuration and runtime bootstrapping."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

HOME_ENV = "GOALS_WIZARD_HOME"

DEFAULT_CONFIG: dict[str, Any] = {
    "paths": {
        "db_path": "workspace/goals.db",
        "journal_path": "logs/writes.jsonl",
    },
    "logging": {"level": "WARNING"},
    "prompts": {"confirm_default": False},
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def resolve_root(root: Path | None = None) -> Path:
    """Pick the runtime root: explicit, then environment, then the repository."""
    if root is not None:
        return root.expanduser().resolve()
    raw = os.environ.get(HOME_ENV)
    if raw:
        return Path(raw).expanduser().resolve()
    return Path(__file__).resolve().parents[1]


def ensure_runtime_dirs(root: Path, config: dict[str, Any]) -> dict[str, Path]:
    """Ensure database and log directories exist and return resolved paths."""
    paths_cfg = config.get("paths", {})
    db_path = (root / paths_cfg.get("db_path", "workspace/goals.db")).resolve()
    journal_path = (root / paths_cfg.get("journal_path", "logs/writes.jsonl")).resolve()

    db_path.parent.mkdir(parents=True, exist_ok=True)
    journal_path.parent.mkdir(parents=True, exist_ok=True)

    return {
        "db_path": db_path,
        "journal_path": journal_path,
    }


def load_effective_config(root: Path) -> dict[str, Any]:
    """Load the config file under ``root`` over the built-in defaults."""
    return merge_dicts(DEFAULT_CONFIG, load_yaml(root / "config" / "default.yaml"))


def configure_logging(config: dict[str, Any]) -> None:
    """Set the level of the ``gw`` logger tree from config."""
    level_name = str(config.get("logging", {}).get("level", "WARNING")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {level_name}")
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("gw").setLevel(level)
