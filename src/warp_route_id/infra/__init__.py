"""Infrastructure layer — third-party codec integration.

This layer wraps all interaction with embit.  Every raw third-party
exception must be caught here and re-raised as a
:class:`~warp_route_id.exceptions.WarpRouteIdError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from warp_route_id.infra.bech32_formatter import (
    Bech32mTokenIdFormatter,
    decode_token_id,
    format_token_id,
)

__all__: list[str] = [
    "Bech32mTokenIdFormatter",
    "decode_token_id",
    "format_token_id",
]
