"""Allow ``python -m tasklist`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m tasklist`` behaves identically to the ``tasklist`` console
script.
"""

from __future__ import annotations

from tasklist.cli.app import cli

if __name__ == "__main__":
    cli()
