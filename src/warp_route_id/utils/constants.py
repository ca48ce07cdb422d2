"""Protocol constants shared by the derivation and the formatter.

Changing any value here changes every derived identifier, so these are
fixed by the on-chain convention and must match the other side.
"""

from __future__ import annotations

ADDRESS_LENGTH: int = 20
"""Size of an EVM address in bytes."""

HASH_LENGTH: int = 32
"""Size of a SHA-256 digest in bytes."""

WARP_ROUTE_SEPARATOR: bytes = b"\x00"
"""Byte between the padded token address and the deployer address."""

SYNTHETIC_TOKEN_NAME_PREFIX: str = "Synthetic token for "
"""Leading text of the synthetic token name hashed into the token ID."""

TOKEN_ID_HRP: str = "token_"
"""Human-readable prefix of bech32m-encoded token IDs."""

DEFAULT_DECIMALS: int = 18
"""Decimals of the native Ether mapping."""

MAX_DECIMALS: int = 0xFF
"""Decimals are hashed as a single unsigned byte."""

ZERO_VECTOR_WARP_ROUTE_ID: str = (
    "0x353fd628b7f6e7d426e5d6a27d1bc3ac22fa7f812e7594cf2ec5ca1175785b50"
)
"""Warp route ID for an all-zero token address and deployer."""
