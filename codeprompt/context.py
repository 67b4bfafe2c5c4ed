"""Project context detection from a package.json manifest."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .core.model import ProjectContext

logger = logging.getLogger(__name__)

LOCKFILES = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
)


def _declares(pkg: Dict[str, Any], name: str) -> bool:
    deps = pkg.get("dependencies") or {}
    dev_deps = pkg.get("devDependencies") or {}
    return bool(deps.get(name) or dev_deps.get(name))


def detect_package_manager(root: Path) -> str:
    for lockfile, manager in LOCKFILES:
        if (root / lockfile).exists():
            return manager
    return "npm"


def analyze_project_context(project_path: Optional[Union[str, Path]] = None) -> ProjectContext:
    """Inspect a project directory and report what it already uses.

    Never raises: an unreadable or malformed manifest yields an empty context.

    Args:
        project_path: Directory to inspect (defaults to the working directory)
    """
    root = Path(project_path) if project_path else Path.cwd()
    facts: Dict[str, Any] = {}

    try:
        manifest = root / "package.json"
        if manifest.exists():
            pkg = json.loads(manifest.read_text(encoding="utf-8"))
            dev_deps = pkg.get("devDependencies") or {}
            scripts = pkg.get("scripts") or {}

            facts["has_type_script"] = _declares(pkg, "typescript")
            facts["has_react"] = _declares(pkg, "react")
            facts["package_manager"] = detect_package_manager(root)
            facts["has_linting"] = bool(scripts.get("lint") or dev_deps.get("eslint"))
            facts["has_formatting"] = bool(scripts.get("format") or dev_deps.get("prettier"))
            facts["has_testing"] = bool(
                scripts.get("test") or dev_deps.get("jest") or dev_deps.get("vitest")
            )

        facts["has_gitignore"] = (root / ".gitignore").exists()
        facts["has_readme"] = (root / "README.md").exists()
    except (OSError, ValueError, AttributeError, TypeError) as e:
        logger.warning("Could not analyze project context in %s: %s", root, e)
        return ProjectContext()

    return ProjectContext(**facts)
