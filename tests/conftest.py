"""Shared pytest fixtures for the component-gen test suite.

Provides reusable fixtures for:
- A temporary project root with a template directory
- Writing ``cg.config.json`` files
- A loaded ``Config`` for the sample project
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from component_gen.config import CONFIG_FILENAME, Config


SAMPLE_CONFIG: dict[str, str] = {
    "COMPONENTS_DIR": "./src/components",
    "TEMPLATE_DIR": "./template",
    "COMPONENT_NAME_PLACEHOLDER": "COMPONENT_NAME",
}


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty project directory (auto-cleanup)."""
    root = tmp_path / "my-app"
    root.mkdir()
    return root


@pytest.fixture
def write_config(project_root: Path):
    """Return a helper that writes ``cg.config.json`` into the project root.

    Accepts either a dict (serialised as JSON) or a raw string.
    """

    def _write(data: dict[str, Any] | str = SAMPLE_CONFIG) -> Path:
        path = project_root / CONFIG_FILENAME
        text = data if isinstance(data, str) else json.dumps(data, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def template_dir(project_root: Path) -> Path:
    """Template directory with a small React-style component template."""
    directory = project_root / "template"
    directory.mkdir()
    (directory / "COMPONENT_NAME.js").write_text(
        "export const COMPONENT_NAME = () => {};", encoding="utf-8"
    )
    (directory / "COMPONENT_NAME.test.js").write_text(
        "import { COMPONENT_NAME } from './COMPONENT_NAME';\n"
        "test('COMPONENT_NAME renders', () => COMPONENT_NAME());\n",
        encoding="utf-8",
    )
    (directory / "index.js").write_text(
        "export * from './COMPONENT_NAME';\n", encoding="utf-8"
    )
    return directory


@pytest.fixture
def sample_project(project_root: Path, write_config, template_dir: Path) -> Path:
    """Project root with both a config file and a template directory."""
    write_config()
    return project_root


@pytest.fixture
def sample_config() -> Config:
    """The ``Config`` equivalent of ``SAMPLE_CONFIG``."""
    return Config.model_validate(SAMPLE_CONFIG)
