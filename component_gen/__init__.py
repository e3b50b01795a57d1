"""component-gen: create component directories from a template folder."""

__version__ = "0.1.0"
