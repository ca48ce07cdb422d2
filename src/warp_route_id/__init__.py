"""warp-route-id — deterministic warp route and token identifiers.

Derives the warp route ID and the synthetic token ID that an EVM chain
and a Sovereign SDK chain must agree on, without talking to either.
"""

from warp_route_id.version import __version__

__all__: list[str] = ["__version__"]
