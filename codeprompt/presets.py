"""YAML preset files holding a task type and its option set."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from .core.exceptions import PresetError
from .core.model import SharedConfig


def load_preset(path: Union[str, Path]) -> SharedConfig:
    """Load a preset file.

    Example file::

        type: feature
        options:
          feature: user login
          pattern: service

    Raises:
        PresetError: If the file is missing, is not valid YAML or has no type
    """
    path = Path(path)
    if not path.exists():
        raise PresetError(f"Preset file not found: {path}")

    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise PresetError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict) or not data.get("type"):
        raise PresetError(f"{path} missing 'type'")
    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise PresetError(f"{path}: 'options' must be a mapping")

    try:
        return SharedConfig.model_validate({"type": str(data["type"]), "options": options})
    except PydanticValidationError as e:
        raise PresetError(f"Invalid preset {path}: {e}") from e


def dump_preset(path: Union[str, Path], task_type: str, options: Mapping[str, Any]) -> Path:
    path = Path(path)
    data: Dict[str, Any] = {"type": task_type, "options": dict(options)}
    path.write_text(
        yaml.safe_dump(data, sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )
    return path
