"""Fixed-size byte values with hex and binary renderings.

:class:`FixedBytes` is an abstract, immutable wrapper around exactly
``LENGTH`` bytes.  Concrete sizes are dedicated subclasses
(:class:`Address`, :class:`Hash32`) so a value of the wrong size can
never be constructed: every construction path funnels through the same
validating ``__post_init__``.

Two renderings exist and the caller always picks one explicitly:

* **human-readable** — ``0x`` followed by lowercase hex, used for the
  console and for JSON-like transports;
* **binary** — the raw bytes, unchanged, used for compact transports.

The value itself carries no format preference; see
:class:`SerializationMode`.
"""

from __future__ import annotations

import binascii
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, ClassVar, TypeVar

from warp_route_id.exceptions import FormatError
from warp_route_id.utils.constants import ADDRESS_LENGTH, HASH_LENGTH

_T = TypeVar("_T", bound="FixedBytes")

_HEX_PREFIX = "0x"


class SerializationMode(Enum):
    """Which rendering :meth:`FixedBytes.encode` / ``decode`` should use."""

    HUMAN_READABLE = "human_readable"
    """``0x``-prefixed lowercase hex text."""

    BINARY = "binary"
    """Raw bytes, in order."""


def parse_hex(text: str) -> bytes:
    """Decode *text* as hex, accepting an optional ``0x`` prefix.

    Both upper and lower case digits are accepted and may be mixed.
    Whitespace, non-ASCII characters and odd digit counts are rejected.

    Raises
    ------
    FormatError
        If *text* is not a valid hex string.
    """
    digits = text[len(_HEX_PREFIX):] if text.startswith(_HEX_PREFIX) else text
    try:
        return binascii.unhexlify(digits.encode("ascii"))
    except UnicodeEncodeError as exc:
        raise FormatError(
            f"Failed to decode hex string {digits!r}: non-ASCII character",
        ) from exc
    except binascii.Error as exc:
        raise FormatError(
            f"Failed to decode hex string {digits!r}: {exc}",
        ) from exc


# ---------------------------------------------------------------------------
# Fixed-size value
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, order=True, repr=False)
class FixedBytes:
    """Immutable sequence of exactly :attr:`LENGTH` bytes.

    Not intended to be used directly — subclass it and set ``LENGTH``.
    Equality, hashing and ordering are byte-wise and only defined
    between values of the same concrete class.
    """

    LENGTH: ClassVar[int]

    value: bytes
    """The raw bytes.  Always exactly ``LENGTH`` long."""

    def __post_init__(self) -> None:
        length: int | None = getattr(type(self), "LENGTH", None)
        if length is None:
            raise TypeError(
                f"{type(self).__name__} has no LENGTH; use a sized subclass",
            )

        raw = self.value
        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"{type(self).__name__} requires a bytes-like value, "
                f"got {type(raw).__name__}",
            )
        raw = bytes(raw)
        if len(raw) != length:
            raise FormatError(
                f"Invalid length for {type(self).__name__}: "
                f"expected {length} bytes, got {len(raw)}",
                hint=f"Provide exactly {length * 2} hex digits.",
            )
        object.__setattr__(self, "value", raw)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_bytes(cls: type[_T], data: bytes | bytearray | memoryview) -> _T:
        """Wrap *data*, failing with :class:`FormatError` on a size mismatch."""
        return cls(data)

    @classmethod
    def from_hex(cls: type[_T], text: str) -> _T:
        """Parse ``0x``-prefixed or bare hex text.

        Raises
        ------
        FormatError
            On invalid digits, odd length, or a decoded length that is
            not ``LENGTH``.
        """
        return cls(parse_hex(text))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_hex(self) -> str:
        """Return ``0x`` followed by exactly ``2 * LENGTH`` lowercase hex digits."""
        return _HEX_PREFIX + self.value.hex()

    def __bytes__(self) -> bytes:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return self.to_hex()

    # ------------------------------------------------------------------
    # Dual-mode serialization
    # ------------------------------------------------------------------

    def encode(self, mode: SerializationMode) -> str | bytes:
        """Render the value in the representation selected by *mode*."""
        if mode is SerializationMode.HUMAN_READABLE:
            return self.to_hex()
        if mode is SerializationMode.BINARY:
            return self.value
        raise ValueError(f"Unknown serialization mode: {mode!r}")

    @classmethod
    def decode(
        cls: type[_T],
        data: str | bytes | bytearray | memoryview | Iterable[int],
        mode: SerializationMode,
    ) -> _T:
        """Inverse of :meth:`encode`.

        In binary mode *data* may be any bytes-like object or a sequence
        of ints in ``0..255`` (the shape a generic sequence decoder
        produces).

        Raises
        ------
        FormatError
            If *data* does not match the shape expected by *mode* or has
            the wrong length.
        """
        if mode is SerializationMode.HUMAN_READABLE:
            if not isinstance(data, str):
                raise FormatError(
                    f"Expected a hex string for {cls.__name__}, "
                    f"got {type(data).__name__}",
                )
            return cls.from_hex(data)

        if mode is SerializationMode.BINARY:
            if isinstance(data, (bytes, bytearray, memoryview)):
                return cls(data)
            if isinstance(data, (str, int)):
                raise FormatError(
                    f"Expected raw bytes for {cls.__name__}, "
                    f"got {type(data).__name__}",
                )
            try:
                raw = bytes(data)
            except (TypeError, ValueError) as exc:
                raise FormatError(
                    f"Invalid byte sequence for {cls.__name__}: {exc}",
                ) from exc
            return cls(raw)

        raise ValueError(f"Unknown serialization mode: {mode!r}")

    # ------------------------------------------------------------------
    # Stream layout (fixed array, no length prefix)
    # ------------------------------------------------------------------

    def write_to(self, stream: BinaryIO) -> None:
        """Write the raw ``LENGTH`` bytes to *stream*."""
        stream.write(self.value)

    @classmethod
    def read_from(cls: type[_T], stream: BinaryIO) -> _T:
        """Read exactly ``LENGTH`` bytes from *stream*.

        Raises
        ------
        FormatError
            If the stream ends early.
        """
        raw = stream.read(cls.LENGTH)
        if len(raw) != cls.LENGTH:
            raise FormatError(
                f"Unexpected end of stream reading {cls.__name__}: "
                f"expected {cls.LENGTH} bytes, got {len(raw)}",
            )
        return cls(raw)


# ---------------------------------------------------------------------------
# Concrete sizes
# ---------------------------------------------------------------------------

class Address(FixedBytes):
    """A 20-byte EVM account or contract address."""

    __slots__ = ()
    LENGTH = ADDRESS_LENGTH


class Hash32(FixedBytes):
    """A 32-byte SHA-256 digest, also used as an opaque identifier."""

    __slots__ = ()
    LENGTH = HASH_LENGTH
