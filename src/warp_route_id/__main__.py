"""Allow ``python -m warp_route_id`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m warp_route_id`` behaves identically to the
``warp-route-id`` console script.
"""

from __future__ import annotations

from warp_route_id.cli.app import cli

if __name__ == "__main__":
    cli()
