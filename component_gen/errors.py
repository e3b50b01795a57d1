"""Exception hierarchy for component-gen.

Library code raises these; only the CLI entry point turns them into a
console message and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path


class ComponentGenError(Exception):
    """Base class for every failure component-gen reports to the user."""


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigMissingError(ComponentGenError):
    """Raised when ``cg.config.json`` does not exist in the base directory."""

    def __init__(self, path: Path, remediation: str) -> None:
        self.path = path
        self.remediation = remediation
        super().__init__(f"Config file not found: {path}\n{remediation}")


class ConfigInvalidError(ComponentGenError):
    """Raised when the config file cannot be read, parsed, or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading the config file {path}: {reason}")


# ---------------------------------------------------------------------------
# Materialization errors
# ---------------------------------------------------------------------------


class TemplateReadError(ComponentGenError):
    """Raised when the template directory or a template file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read template {path}: {reason}")


class WriteFailureError(ComponentGenError):
    """Raised when the component directory or an output file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")
