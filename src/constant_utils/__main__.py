"""Allow ``python -m constant_utils`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m constant_utils`` behaves identically to the
``constant-utils`` console script.
"""

from __future__ import annotations

from constant_utils.cli.app import cli

if __name__ == "__main__":
    cli()
