"""CLI entry point -- python -m judging_canvas."""
from __future__ import annotations

from cli.jcanvas import main

if __name__ == "__main__":
    main()
