"""Deterministic warp route and token ID derivation.

Every function in this module is a **pure** transformation — no I/O,
no caching, fully deterministic.  Both chains compute the same IDs
independently, so the byte layouts below are a wire contract:

* warp route ID = ``sha256(pad32(token_address) || 0x00 || deployer)``
* token ID      = ``sha256(warp_route_id || name || decimals)`` where
  ``name = "Synthetic token for 0x<hex(warp_route_id)>"``
"""

from __future__ import annotations

import hashlib

from warp_route_id.core.hex_bytes import Address, Hash32
from warp_route_id.exceptions import InvalidDecimalsError
from warp_route_id.utils.constants import (
    ADDRESS_LENGTH,
    HASH_LENGTH,
    MAX_DECIMALS,
    SYNTHETIC_TOKEN_NAME_PREFIX,
    WARP_ROUTE_SEPARATOR,
)

_ADDRESS_PADDING = bytes(HASH_LENGTH - ADDRESS_LENGTH)


# ---------------------------------------------------------------------------
# Preimages
# ---------------------------------------------------------------------------

def pad_address(address: Address) -> bytes:
    """Left-pad a 20-byte address into a 32-byte slot (12 zero bytes first)."""
    return _ADDRESS_PADDING + address.value


def warp_route_preimage(token_address: Address, deployer: Address) -> bytes:
    """Return the 53 bytes hashed into the warp route ID."""
    return pad_address(token_address) + WARP_ROUTE_SEPARATOR + deployer.value


def synthetic_token_name(warp_route_id: Hash32) -> str:
    """Return the synthetic token name, e.g. ``Synthetic token for 0xab…``."""
    return f"{SYNTHETIC_TOKEN_NAME_PREFIX}{warp_route_id.to_hex()}"


def _decimals_byte(decimals: int) -> bytes:
    # bool is an int subclass; reject it so True does not mean 1 decimal.
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidDecimalsError(
            f"Decimals must be an integer, got {type(decimals).__name__}",
        )
    if not 0 <= decimals <= MAX_DECIMALS:
        raise InvalidDecimalsError(
            f"Decimals must be between 0 and {MAX_DECIMALS}, got {decimals}",
            hint="Decimals are hashed as a single unsigned byte.",
        )
    return bytes((decimals,))


def token_id_preimage(warp_route_id: Hash32, decimals: int) -> bytes:
    """Return the bytes hashed into the token ID.

    Raises
    ------
    InvalidDecimalsError
        If *decimals* does not fit in one unsigned byte.
    """
    name = synthetic_token_name(warp_route_id)
    return warp_route_id.value + name.encode("utf-8") + _decimals_byte(decimals)


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------

def get_warp_route_id(token_address: Address, deployer: Address) -> Hash32:
    """Derive the warp route ID for *token_address* deployed by *deployer*."""
    digest = hashlib.sha256(warp_route_preimage(token_address, deployer)).digest()
    return Hash32(digest)


def get_token_id(warp_route_id: Hash32, decimals: int) -> Hash32:
    """Derive the synthetic token ID for *warp_route_id* with *decimals*.

    Raises
    ------
    InvalidDecimalsError
        If *decimals* does not fit in one unsigned byte.
    """
    digest = hashlib.sha256(token_id_preimage(warp_route_id, decimals)).digest()
    return Hash32(digest)
