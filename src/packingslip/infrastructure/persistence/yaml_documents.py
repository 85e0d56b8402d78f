"""Shared helpers for the YAML-backed repositories."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from packingslip.domain.exceptions import ValidationError


def load_mapping(file_path: Path) -> dict[str, Any]:
    """Parse a YAML file whose top level must be a mapping."""
    with Path(file_path).open("r", encoding="utf-8") as fp:
        try:
            raw = yaml.safe_load(fp)
        except yaml.YAMLError as exc:
            raise ValidationError(f"Malformed YAML in {file_path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ValidationError(f"{file_path} is not valid UTF-8: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValidationError(f"Expected a mapping at the top of {file_path}")
    return raw


def require(raw: dict[str, Any], key: str, file_path: Path) -> Any:
    if key not in raw:
        raise ValidationError(f"Missing required key '{key}' in {file_path}")
    return raw[key]


def as_text(value: Any) -> str:
    """YAML may hand back dates or numbers for free-form fields."""
    if value is None:
        return ""
    return str(value)
