"""Placeholder substitution for component templates.

Provides the TemplateSet class which enumerates the files of a flat template
directory and renders each one by replacing a literal placeholder token in
both the file name and the file content.  Every filesystem failure is
converted into ``TemplateReadError`` or ``WriteFailureError``.
"""

from __future__ import annotations

from pathlib import Path

from component_gen.errors import TemplateReadError, WriteFailureError
from component_gen.utils import error_reason, replace_placeholder


# ---------------------------------------------------------------------------
# TemplateSet
# ---------------------------------------------------------------------------


class TemplateSet:
    """The template files found directly inside *template_dir*.

    Only one directory level is considered.  Subdirectories are reported
    separately by :meth:`list_templates` so the caller can warn about them.
    """

    def __init__(self, template_dir: str | Path, placeholder: str) -> None:
        self.template_dir = Path(template_dir)
        self.placeholder = placeholder

    # -- Discovery ---------------------------------------------------------

    def list_templates(self) -> tuple[list[Path], list[Path]]:
        """Return ``(files, subdirectories)`` found in the template directory.

        Both lists are sorted by name so repeated runs visit entries in the
        same order.

        Raises:
            TemplateReadError: The directory is missing or cannot be listed.
        """
        try:
            entries = sorted(self.template_dir.iterdir())
        except FileNotFoundError as exc:
            raise TemplateReadError(self.template_dir, "template directory not found") from exc
        except (OSError, ValueError) as exc:
            raise TemplateReadError(self.template_dir, error_reason(exc)) from exc

        files: list[Path] = []
        subdirs: list[Path] = []
        for entry in entries:
            if entry.is_dir():
                subdirs.append(entry)
            else:
                files.append(entry)
        return files, subdirs

    # -- Rendering ---------------------------------------------------------

    def render_name(self, template_file: Path, component_name: str) -> str:
        """Output file name for *template_file*."""
        return replace_placeholder(template_file.name, self.placeholder, component_name)

    def render(self, template_file: Path, component_name: str) -> str:
        """Read *template_file* and substitute the placeholder in its content.

        Line endings are preserved exactly as stored in the template.
        """
        try:
            with template_file.open("r", encoding="utf-8", newline="") as fh:
                content = fh.read()
        except UnicodeDecodeError as exc:
            raise TemplateReadError(template_file, f"not valid UTF-8 text ({exc.reason})") from exc
        except (OSError, ValueError) as exc:
            raise TemplateReadError(template_file, error_reason(exc)) from exc
        return replace_placeholder(content, self.placeholder, component_name)

    def render_to_file(
        self,
        template_file: Path,
        output_dir: str | Path,
        component_name: str,
    ) -> Path:
        """Render *template_file* into *output_dir*, overwriting any existing file.

        Returns the path that was written.
        """
        content = self.render(template_file, component_name)
        out = Path(output_dir) / self.render_name(template_file, component_name)
        _write_file(out, content)
        return out


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Write *content* verbatim, mapping OS failures to ``WriteFailureError``."""
    try:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except (OSError, ValueError) as exc:
        raise WriteFailureError(path, error_reason(exc)) from exc
