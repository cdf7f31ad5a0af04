"""Load and expose task table column sets from YAML (with fallbacks)."""

from __future__ import annotations

from pathlib import Path

import yaml

from .config import OVERDUE_TABLE_COLUMNS, TASK_CORE_COLUMNS, TASK_TABLE_COLUMNS

_CACHE: dict[str, list[str]] | None = None


def _defaults() -> dict[str, list[str]]:
    return {
        "core": list(TASK_CORE_COLUMNS),
        "table": list(TASK_TABLE_COLUMNS),
        "overdue": list(OVERDUE_TABLE_COLUMNS),
    }


def load_column_sets(base_path: str | Path | None = None, *, reload: bool = False):
    global _CACHE
    if _CACHE is not None and not reload:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "columns.yaml"
    if not yaml_path.exists():
        _CACHE = _defaults()
        return _CACHE
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
    except yaml.YAMLError:
        _CACHE = _defaults()
        return _CACHE
    sets = data.get("sets", {}) or {}
    defaults = _defaults()
    _CACHE = {name: list(sets.get(name) or cols) for name, cols in defaults.items()}
    return _CACHE


def get_columns(set_name: str) -> list[str]:
    sets = load_column_sets()
    return sets.get(set_name, [])
