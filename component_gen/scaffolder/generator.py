"""Component materialization.

Takes a loaded ``Config`` and a component name and produces the component
directory by rendering every template file into it.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from component_gen.config import Config
from component_gen.errors import WriteFailureError
from component_gen.utils import ensure_dir, error_reason

from .templates import TemplateSet


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class MaterializeResult(BaseModel):
    """What a single materialization wrote and what it ignored."""

    component_name: str
    component_dir: Path
    written: list[Path] = Field(default_factory=list)
    skipped: list[Path] = Field(
        default_factory=list,
        description="Template subdirectories that were not copied",
    )


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ComponentGenerator:
    """Creates or updates a component directory from the configured templates.

    Paths in the config are resolved against *base_dir*, which defaults to
    the current working directory at construction time.
    """

    def __init__(self, config: Config, base_dir: str | Path | None = None) -> None:
        self.config = config
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self.templates = TemplateSet(
            config.template_path(self.base_dir), config.placeholder
        )

    def generate(self, component_name: str) -> MaterializeResult:
        """Materialize *component_name*.

        Files already written stay in place if a later template fails; there
        is no rollback.

        Raises:
            TemplateReadError: The template directory or a template file
                could not be read.
            WriteFailureError: The component directory or an output file
                could not be written.
        """
        component_dir = self.config.component_path(self.base_dir, component_name)
        try:
            ensure_dir(component_dir)
        except (OSError, ValueError) as exc:
            raise WriteFailureError(component_dir, error_reason(exc)) from exc

        files, subdirs = self.templates.list_templates()

        result = MaterializeResult(
            component_name=component_name,
            component_dir=component_dir,
            skipped=subdirs,
        )
        for template_file in files:
            result.written.append(
                self.templates.render_to_file(template_file, component_dir, component_name)
            )
        return result


def materialize(
    component_name: str,
    config: Config,
    base_dir: str | Path | None = None,
) -> MaterializeResult:
    """Shortcut for ``ComponentGenerator(config, base_dir).generate(component_name)``."""
    return ComponentGenerator(config, base_dir).generate(component_name)
