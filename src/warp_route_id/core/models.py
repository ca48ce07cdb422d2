"""Domain models for warp-route-id.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and rendering.  They carry zero I/O and
must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass

from warp_route_id.core.hex_bytes import Address, Hash32, SerializationMode


@dataclass(frozen=True, slots=True)
class DerivedIdentifiers:
    """Inputs and outputs of one warp route derivation."""

    token_address: Address
    """Address of the token on the EVM chain."""

    deployer: Address
    """Address deploying the warp route on the Sovereign SDK chain."""

    decimals: int
    """Token precision hashed into :attr:`token_id`."""

    warp_route_id: Hash32
    """``sha256(pad32(token_address) || 0x00 || deployer)``."""

    token_id: Hash32
    """Synthetic token ID derived from :attr:`warp_route_id`."""

    token_id_bech32: str
    """:attr:`token_id` rendered as bech32m with the ``token_`` prefix."""

    def to_dict(self) -> dict[str, str | int]:
        """Return a JSON-ready dict with byte values as hex text."""
        mode = SerializationMode.HUMAN_READABLE
        return {
            "token_address": self.token_address.encode(mode),
            "deployer": self.deployer.encode(mode),
            "decimals": self.decimals,
            "warp_route_id": self.warp_route_id.encode(mode),
            "token_id": self.token_id_bech32,
            "token_id_hex": self.token_id.encode(mode),
        }
