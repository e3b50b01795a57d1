"""Allow ``python -m component_gen``."""

from component_gen.cli import main

main()
