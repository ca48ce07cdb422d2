"""Core / service layer — pure derivation logic and value types.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from warp_route_id.core.derivation import get_token_id, get_warp_route_id
from warp_route_id.core.hex_bytes import Address, FixedBytes, Hash32, SerializationMode
from warp_route_id.core.identifier_service import IdentifierService
from warp_route_id.core.models import DerivedIdentifiers
from warp_route_id.core.protocols import TokenIdFormatter

__all__: list[str] = [
    "Address",
    "DerivedIdentifiers",
    "FixedBytes",
    "Hash32",
    "IdentifierService",
    "SerializationMode",
    "TokenIdFormatter",
    "get_token_id",
    "get_warp_route_id",
]
