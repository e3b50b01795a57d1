"""component-gen configuration.

The configuration lives in ``cg.config.json`` at the project root and is read
fresh on every run.  It is parsed into a frozen Pydantic v2 model so missing
or mistyped keys are reported up front instead of surfacing later as odd
path errors.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from component_gen.errors import ConfigInvalidError, ConfigMissingError
from component_gen.utils import load_json

CONFIG_FILENAME = "cg.config.json"

REMEDIATION = f"""\
Please create a "{CONFIG_FILENAME}" in your project root directory and add the following config:

  {{
    "COMPONENTS_DIR": "the path to your components folder, e.g., src/components",
    "TEMPLATE_DIR": "the path to your template folder",
    "COMPONENT_NAME_PLACEHOLDER": "the placeholder to be replaced with the actual component name in the template"
  }}

Example:

  {{
    "COMPONENTS_DIR": "./src/components",
    "TEMPLATE_DIR": "./templates",
    "COMPONENT_NAME_PLACEHOLDER": "COMPONENT_NAME"
  }}
"""


class Config(BaseModel):
    """Settings read from ``cg.config.json``.

    Field names follow Python conventions; the JSON keys are the upper-case
    aliases.  Paths are kept as the opaque strings the user wrote and only
    resolved against a base directory on demand.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    components_dir: str = Field(
        ..., alias="COMPONENTS_DIR", description="Directory new components are created in"
    )
    template_dir: str = Field(
        ..., alias="TEMPLATE_DIR", description="Flat directory holding the template files"
    )
    placeholder: str = Field(
        ...,
        alias="COMPONENT_NAME_PLACEHOLDER",
        min_length=1,
        description="Literal token replaced by the component name",
    )

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def components_path(self, base_dir: Path) -> Path:
        """Directory that holds every generated component."""
        return Path(base_dir) / self.components_dir

    def template_path(self, base_dir: Path) -> Path:
        """Directory the template files are read from."""
        return Path(base_dir) / self.template_dir

    def component_path(self, base_dir: Path, component_name: str) -> Path:
        """Destination directory for *component_name*."""
        return self.components_path(base_dir) / component_name


def config_path(base_dir: str | Path | None = None) -> Path:
    """Return the location of ``cg.config.json`` for *base_dir* (default: cwd)."""
    return Path(base_dir if base_dir is not None else Path.cwd()) / CONFIG_FILENAME


def load_config(base_dir: str | Path | None = None) -> Config:
    """Read and validate ``cg.config.json`` from *base_dir*.

    Args:
        base_dir: Directory containing the config file.  Defaults to the
            current working directory.

    Returns:
        A validated, immutable ``Config``.

    Raises:
        ConfigMissingError: The file does not exist.
        ConfigInvalidError: The file cannot be read, is not a JSON object,
            or is missing required keys.
    """
    path = config_path(base_dir)
    try:
        data = load_json(path)
    except FileNotFoundError as exc:
        raise ConfigMissingError(path, REMEDIATION) from exc
    except json.JSONDecodeError as exc:
        raise ConfigInvalidError(path, str(exc)) from exc
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise ConfigInvalidError(path, str(exc)) from exc

    if not isinstance(data, dict):
        raise ConfigInvalidError(
            path, f"expected a JSON object, got {type(data).__name__}"
        )

    try:
        return Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigInvalidError(path, _describe_validation_error(exc)) from exc


def _describe_validation_error(exc: ValidationError) -> str:
    """Flatten a Pydantic error into ``KEY: message; KEY: message``."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
