"""Allow ``python -m prompto`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m prompto`` behaves identically to the ``prompto``
console script.
"""

from __future__ import annotations

from prompto.cli.app import cli

if __name__ == "__main__":
    cli()
