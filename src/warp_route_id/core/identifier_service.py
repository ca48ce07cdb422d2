"""Core identifier service — orchestrates parsing, derivation and formatting.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~warp_route_id.core.protocols.TokenIdFormatter`
injected at construction time (dependency inversion), keeping the core
free of any third-party codec imports.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no filesystem access.
* Only :class:`~warp_route_id.exceptions.WarpRouteIdError` subclasses escape.
"""

from __future__ import annotations

from warp_route_id.core.derivation import get_token_id, get_warp_route_id
from warp_route_id.core.hex_bytes import Address, Hash32
from warp_route_id.core.models import DerivedIdentifiers
from warp_route_id.core.protocols import TokenIdFormatter
from warp_route_id.exceptions import EncodingError, FormatError, WarpRouteIdError
from warp_route_id.utils.constants import DEFAULT_DECIMALS


class IdentifierService:
    """Stateless service deriving the warp route ID and token ID.

    Parameters
    ----------
    formatter:
        Any object satisfying the :class:`TokenIdFormatter` protocol.
    """

    def __init__(self, formatter: TokenIdFormatter) -> None:
        self._formatter: TokenIdFormatter = formatter

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def derive(
        self,
        token_address: Address | str | bytes,
        deployer: Address | str | bytes,
        decimals: int = DEFAULT_DECIMALS,
    ) -> DerivedIdentifiers:
        """Derive both identifiers for one warp route.

        Addresses may be given already parsed, as hex text, or as raw bytes.

        Raises
        ------
        FormatError
            If an address is not 20 bytes of valid hex or raw data.
        InvalidDecimalsError
            If *decimals* does not fit in one unsigned byte.
        EncodingError
            If the formatter rejects the token ID.
        """
        token = self._coerce_address(token_address)
        deployer_address = self._coerce_address(deployer)

        warp_route_id = get_warp_route_id(token, deployer_address)
        token_id = get_token_id(warp_route_id, decimals)

        return DerivedIdentifiers(
            token_address=token,
            deployer=deployer_address,
            decimals=decimals,
            warp_route_id=warp_route_id,
            token_id=token_id,
            token_id_bech32=self._format(token_id),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _coerce_address(value: Address | str | bytes) -> Address:
        """Accept a parsed address, hex text, or 20 raw bytes."""
        if isinstance(value, Address):
            return value
        if isinstance(value, str):
            return Address.from_hex(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return Address(value)
        raise FormatError(
            f"Expected an address as hex text or raw bytes, "
            f"got {type(value).__name__}",
        )

    def _format(self, token_id: Hash32) -> str:
        """Call the formatter and ensure only our exceptions escape."""
        try:
            return self._formatter.format_token_id(token_id)
        except WarpRouteIdError:
            # Already one of ours — let it propagate unchanged.
            raise
        except Exception as exc:
            raise EncodingError(
                f"Unexpected formatter error: {exc}",
            ) from exc
