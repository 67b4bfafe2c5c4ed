"""Shared fixtures for CodePrompt tests"""

import json

import pytest
from typer.testing import CliRunner


@pytest.fixture
def express_options():
    """The init option set used throughout the examples."""
    return {
        "projectType": "node",
        "framework": "express",
        "packageManager": "pnpm",
        "structure": "layered",
        "outputFormat": "code",
        "complexity": "simple",
    }


@pytest.fixture
def node_project(tmp_path):
    """A project directory with a TypeScript/React package.json and a pnpm lockfile."""
    (tmp_path / "package.json").write_text(
        json.dumps(
            {
                "dependencies": {"react": "^18.2.0"},
                "devDependencies": {"typescript": "^5.4.0", "eslint": "^8.57.0"},
                "scripts": {"test": "vitest"},
            }
        )
    )
    (tmp_path / "pnpm-lock.yaml").write_text("lockfileVersion: '9.0'\n")
    (tmp_path / "README.md").write_text("# demo\n")
    return tmp_path


@pytest.fixture
def runner():
    return CliRunner()
