"""Template registry backed by the YAML files shipped with the package."""

from __future__ import annotations

from functools import lru_cache
from importlib.resources import files
from typing import Any, Dict, Optional

import yaml

from .model import TASK_TYPES, SharedPhrases, TemplateSpec

__all__ = ["TemplateRegistry", "get_registry"]


class TemplateRegistry:
    """Read-only lookup of phrasing templates by task type.

    Each task type lives in ``{id}.yaml``; constraint phrases common to every
    task type live in ``shared.yaml``. Files are parsed on first access.
    """

    def __init__(self, package: str = "codeprompt", directory: str = "templates") -> None:
        self._root = files(package) / directory
        self._cache: Dict[str, TemplateSpec] = {}
        self._shared: Optional[SharedPhrases] = None

    def _read(self, name: str) -> Dict[str, Any]:
        data = yaml.safe_load((self._root / name).read_text(encoding="utf-8"))
        return data or {}

    def get(self, task_type: Any) -> Optional[TemplateSpec]:
        """Return the template for ``task_type`` or None when it is not a known tag."""
        if task_type not in TASK_TYPES:
            return None
        spec = self._cache.get(task_type)
        if spec is None:
            spec = TemplateSpec.model_validate(self._read(f"{task_type}.yaml"))
            self._cache[task_type] = spec
        return spec

    @property
    def shared(self) -> SharedPhrases:
        if self._shared is None:
            self._shared = SharedPhrases.model_validate(self._read("shared.yaml"))
        return self._shared


@lru_cache(maxsize=1)
def get_registry() -> TemplateRegistry:
    return TemplateRegistry()
