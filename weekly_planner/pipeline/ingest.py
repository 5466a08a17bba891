from __future__ import annotations

import json
import re
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Mapping

from ..config import DEFAULT_CONFIG
from ..models import PlannerConfig


BOOL_FIELDS = {"show_header", "show_grid"}
STR_FIELDS = {"paper_size", "language", "hour_format"}
FIELD_NAMES = {f.name for f in fields(PlannerConfig)}


def snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _coerce_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "1", "yes", "on"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"false", "0", "no", "off"}:
        return False
    if isinstance(value, int):
        return bool(value)
    raise ValueError(f"{key} must be a boolean (got {value!r})")


def _coerce(key: str, value: Any) -> Any:
    if key in BOOL_FIELDS:
        return _coerce_bool(key, value)
    if key in STR_FIELDS:
        text = str(value).strip()
        if key == "paper_size":
            return text.upper()
        if key == "language":
            return text.lower()
        return text
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer (got {value!r})")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be an integer (got {value!r})") from None


def config_from_mapping(data: Mapping[str, Any]) -> PlannerConfig:
    """
    Build a :class:`PlannerConfig` from UI-style (``startMonth``) or snake_case keys.

    Keys that are missing take their value from ``DEFAULT_CONFIG``.
    """
    values: Dict[str, Any] = dict(DEFAULT_CONFIG)
    unknown = []
    for raw_key, value in data.items():
        key = snake_case(str(raw_key))
        if key not in FIELD_NAMES:
            unknown.append(str(raw_key))
            continue
        values[key] = _coerce(key, value)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
    return PlannerConfig(**values)


def load_config(path: Path) -> PlannerConfig:
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Config is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("Config must be a JSON object")
    return config_from_mapping(data)
