"""embit-backed bech32m rendering of token IDs.

This module is the **only** place in the codebase that imports
``embit``.  The import is deferred so that ``--help``, ``--version`` and
``doctor`` keep working when embit is missing; the encoding path then
fails with a typed :class:`~warp_route_id.exceptions.EnvironmentError`.
Nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

from types import ModuleType

from warp_route_id.core.hex_bytes import Hash32
from warp_route_id.exceptions import EncodingError, EnvironmentError, FormatError
from warp_route_id.utils.constants import HASH_LENGTH, TOKEN_ID_HRP


def _load_bech32() -> ModuleType:
    """Return ``embit.bech32`` or raise ``EnvironmentError``."""
    try:
        from embit import bech32
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "embit is not installed. Install with: pip install embit",
        ) from exc
    return bech32


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def format_token_id(token_id: Hash32) -> str:
    """Encode *token_id* as bech32m with the ``token_`` prefix.

    The result always starts with ``token_1``.

    Raises
    ------
    EncodingError
        If the encoder rejects the payload.  With a constant prefix and a
        32-byte payload this indicates a defect, not bad input.
    EnvironmentError
        If embit is not installed.
    """
    bech32 = _load_bech32()

    try:
        data = bech32.convertbits(token_id.value, 8, 5)
        if data is None:
            raise EncodingError(
                f"Failed to convert token ID {token_id} to 5-bit groups.",
            )
        return bech32.bech32_encode(bech32.Encoding.BECH32M, TOKEN_ID_HRP, data)
    except EncodingError:
        raise
    except Exception as exc:
        raise EncodingError(f"Failed to format bech32m token ID: {exc}") from exc


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def decode_token_id(text: str) -> Hash32:
    """Decode a ``token_1…`` bech32m string back to its 32-byte token ID.

    Raises
    ------
    FormatError
        If *text* is not valid bech32m, uses another prefix, or does not
        carry exactly 32 bytes.
    EnvironmentError
        If embit is not installed.
    """
    bech32 = _load_bech32()

    encoding, hrp, data = bech32.bech32_decode(text)
    if encoding is None:
        raise FormatError(f"Invalid bech32 string: {text!r}")
    if encoding != bech32.Encoding.BECH32M:
        raise FormatError(
            f"Token ID must use bech32m, not plain bech32: {text!r}",
        )
    if hrp != TOKEN_ID_HRP:
        raise FormatError(
            f"Unexpected token ID prefix {hrp!r}, expected {TOKEN_ID_HRP!r}",
        )

    payload = bech32.convertbits(data, 5, 8, False)
    if payload is None or len(payload) != HASH_LENGTH:
        raise FormatError(
            f"Token ID payload must be {HASH_LENGTH} bytes: {text!r}",
        )
    return Hash32(bytes(payload))


# ---------------------------------------------------------------------------
# Protocol adapter
# ---------------------------------------------------------------------------

class Bech32mTokenIdFormatter:
    """Concrete :class:`~warp_route_id.core.protocols.TokenIdFormatter`.

    Usage::

        formatter = Bech32mTokenIdFormatter()
        text = formatter.format_token_id(token_id)

    Satisfies the protocol structurally — no explicit inheritance required.
    """

    def format_token_id(self, token_id: Hash32) -> str:
        """Delegate to :func:`format_token_id`."""
        return format_token_id(token_id)
