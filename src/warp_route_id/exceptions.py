"""Custom exception hierarchy for warp-route-id.

All exceptions that cross layer boundaries must inherit from
:class:`WarpRouteIdError`.  Raw third-party exceptions (e.g. from embit)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
WarpRouteIdError
├── FormatError
├── InvalidDecimalsError
├── EncodingError
└── EnvironmentError
"""

from __future__ import annotations


class WarpRouteIdError(Exception):
    """Base exception for all warp-route-id errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input parsing ---------------------------------------------------------

class FormatError(WarpRouteIdError):
    """Raised when text or bytes cannot be turned into a fixed-size value.

    Covers invalid hex digits, odd-length hex strings, and decoded
    lengths that differ from the expected size.
    """


class InvalidDecimalsError(WarpRouteIdError):
    """Raised when a decimals value does not fit in a single byte."""


# --- Encoding --------------------------------------------------------------

class EncodingError(WarpRouteIdError):
    """Raised when the bech32m encoder rejects a token ID.

    The prefix is a constant and the payload is always 32 bytes, so this
    indicates a defect rather than bad user input.
    """


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(WarpRouteIdError):
    """Raised when a required runtime dependency is not available."""
