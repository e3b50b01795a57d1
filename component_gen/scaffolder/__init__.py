"""component-gen scaffolder -- renders templates into a component directory.

Quick usage::

    from component_gen.config import load_config
    from component_gen.scaffolder import materialize

    config = load_config()
    result = materialize("Button", config)
    print(result.written)
"""

from component_gen.scaffolder.generator import (
    ComponentGenerator,
    MaterializeResult,
    materialize,
)
from component_gen.scaffolder.templates import TemplateSet

__all__ = [
    "ComponentGenerator",
    "MaterializeResult",
    "TemplateSet",
    "materialize",
]
