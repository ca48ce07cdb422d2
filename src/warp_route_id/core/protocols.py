"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from warp_route_id.core.hex_bytes import Hash32


class TokenIdFormatter(Protocol):
    """Contract for rendering a token ID as text.

    Any object that implements :meth:`format_token_id` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def format_token_id(self, token_id: Hash32) -> str:
        """Render *token_id* for display.

        Implementations must map all backend-specific exceptions to
        :class:`~warp_route_id.exceptions.WarpRouteIdError` subclasses.

        Raises
        ------
        EncodingError
            When the backend rejects the token ID.
        """
        ...  # pragma: no cover
