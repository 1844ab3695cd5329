"""Allow ``python -m assmus_menu`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m assmus_menu`` behaves identically to the
``assmus-menu`` console script.
"""

from __future__ import annotations

from assmus_menu.cli.app import cli

if __name__ == "__main__":
    cli()
