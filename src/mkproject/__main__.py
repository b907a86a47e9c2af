"""Permite ejecutar `python -m mkproject`."""

import sys

from mkproject.modules.scaffolding.entry_points.cli import main

if __name__ == "__main__":
    sys.exit(main())
