"""Tests for fixed-size byte values (core/hex_bytes.py).

Covers hex parsing and rendering, length enforcement, malformed input
rejection, dual-mode serialization, stream layout, and comparison.
"""

from __future__ import annotations

import io
from dataclasses import FrozenInstanceError

import pytest

from warp_route_id.core.hex_bytes import (
    Address,
    FixedBytes,
    Hash32,
    SerializationMode,
    parse_hex,
)
from warp_route_id.exceptions import FormatError

_ADDRESS_HEX = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"


# ---------------------------------------------------------------------------
# parse_hex
# ---------------------------------------------------------------------------

class TestParseHex:
    def test_with_prefix(self) -> None:
        assert parse_hex("0x00ff") == b"\x00\xff"

    def test_without_prefix(self) -> None:
        assert parse_hex("00ff") == b"\x00\xff"

    def test_mixed_case(self) -> None:
        assert parse_hex("0xAbCd") == b"\xab\xcd"

    def test_empty_after_prefix(self) -> None:
        assert parse_hex("0x") == b""

    @pytest.mark.parametrize(
        "text",
        ["0xzz", "0x0g", "0x00 ff", " 00ff", "0x00ff\n", "0x00é0", "0x0x00"],
    )
    def test_invalid_characters_rejected(self, text: str) -> None:
        with pytest.raises(FormatError, match="Failed to decode hex string"):
            parse_hex(text)

    @pytest.mark.parametrize("text", ["0x0", "0x000", "abc"])
    def test_odd_length_rejected(self, text: str) -> None:
        with pytest.raises(FormatError):
            parse_hex(text)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_from_hex(self) -> None:
        address = Address.from_hex(_ADDRESS_HEX)
        assert address.value == bytes.fromhex(_ADDRESS_HEX[2:])

    def test_from_hex_without_prefix(self) -> None:
        assert Address.from_hex(_ADDRESS_HEX[2:]) == Address.from_hex(_ADDRESS_HEX)

    def test_from_hex_uppercase(self) -> None:
        upper = "0x" + _ADDRESS_HEX[2:].upper()
        assert Address.from_hex(upper) == Address.from_hex(_ADDRESS_HEX)

    def test_from_bytes(self) -> None:
        assert Hash32.from_bytes(bytes(range(32))).value == bytes(range(32))

    def test_bytearray_is_normalised_to_bytes(self) -> None:
        address = Address(bytearray(20))
        assert type(address.value) is bytes

    def test_memoryview_accepted(self) -> None:
        assert Address(memoryview(bytes(20))) == Address(bytes(20))

    @pytest.mark.parametrize("length", [0, 1, 19, 21, 32])
    def test_wrong_raw_length_rejected(self, length: int) -> None:
        with pytest.raises(FormatError, match="expected 20 bytes"):
            Address(bytes(length))

    def test_non_bytes_rejected(self) -> None:
        with pytest.raises(TypeError):
            Address(20)  # type: ignore[arg-type]

    def test_base_class_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError, match="no LENGTH"):
            FixedBytes(b"")

    def test_lengths(self) -> None:
        assert Address.LENGTH == 20
        assert Hash32.LENGTH == 32
        assert len(Address(bytes(20))) == 20
        assert len(Hash32(bytes(32))) == 32


# ---------------------------------------------------------------------------
# Length enforcement through text
# ---------------------------------------------------------------------------

class TestLengthEnforcement:
    @pytest.mark.parametrize("prefix", ["", "0x"])
    @pytest.mark.parametrize("digits", ["ab" * 19, "AB" * 21, "aB" * 32, ""])
    def test_wrong_decoded_length(self, prefix: str, digits: str) -> None:
        with pytest.raises(FormatError):
            Address.from_hex(prefix + digits)

    def test_address_hex_is_not_a_hash(self) -> None:
        with pytest.raises(FormatError, match="expected 32 bytes, got 20"):
            Hash32.from_hex(_ADDRESS_HEX)

    def test_error_carries_hint(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            Hash32.from_hex("0x00")
        assert exc_info.value.hint == "Provide exactly 64 hex digits."


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

class TestRendering:
    def test_to_hex_is_lowercase_and_prefixed(self) -> None:
        upper = "0x" + _ADDRESS_HEX[2:].upper()
        assert Address.from_hex(upper).to_hex() == _ADDRESS_HEX

    def test_to_hex_length(self) -> None:
        assert len(Hash32(bytes(32)).to_hex()) == 2 + 64

    def test_leading_zeros_kept(self) -> None:
        assert Address(bytes(20)).to_hex() == "0x" + "00" * 20

    def test_str_and_repr_match(self) -> None:
        address = Address.from_hex(_ADDRESS_HEX)
        assert str(address) == repr(address) == _ADDRESS_HEX

    def test_bytes(self) -> None:
        raw = bytes(range(20))
        assert bytes(Address(raw)) == raw

    @pytest.mark.parametrize(
        "raw",
        [bytes(32), b"\xff" * 32, bytes(range(32)), bytes(range(255, 223, -1))],
    )
    def test_text_round_trip(self, raw: bytes) -> None:
        value = Hash32(raw)
        assert Hash32.from_hex(value.to_hex()).value == raw


# ---------------------------------------------------------------------------
# Dual-mode serialization
# ---------------------------------------------------------------------------

class TestSerializationMode:
    def test_human_readable_encode(self) -> None:
        address = Address.from_hex(_ADDRESS_HEX)
        assert address.encode(SerializationMode.HUMAN_READABLE) == _ADDRESS_HEX

    def test_binary_encode(self) -> None:
        address = Address.from_hex(_ADDRESS_HEX)
        assert address.encode(SerializationMode.BINARY) == address.value

    def test_human_readable_decode(self) -> None:
        decoded = Address.decode(_ADDRESS_HEX, SerializationMode.HUMAN_READABLE)
        assert decoded == Address.from_hex(_ADDRESS_HEX)

    def test_binary_decode_bytes(self) -> None:
        raw = bytes(range(20))
        assert Address.decode(raw, SerializationMode.BINARY).value == raw

    def test_binary_decode_int_sequence(self) -> None:
        assert Address.decode(list(range(20)), SerializationMode.BINARY).value == bytes(
            range(20)
        )

    def test_binary_decode_rejects_out_of_range_ints(self) -> None:
        with pytest.raises(FormatError, match="Invalid byte sequence"):
            Address.decode([256] * 20, SerializationMode.BINARY)

    def test_binary_decode_rejects_text(self) -> None:
        with pytest.raises(FormatError, match="Expected raw bytes"):
            Address.decode(_ADDRESS_HEX, SerializationMode.BINARY)

    def test_binary_decode_rejects_int(self) -> None:
        with pytest.raises(FormatError, match="Expected raw bytes"):
            Address.decode(20, SerializationMode.BINARY)  # type: ignore[arg-type]

    def test_human_readable_decode_rejects_bytes(self) -> None:
        with pytest.raises(FormatError, match="Expected a hex string"):
            Address.decode(bytes(20), SerializationMode.HUMAN_READABLE)

    def test_binary_decode_wrong_length(self) -> None:
        with pytest.raises(FormatError):
            Hash32.decode(bytes(20), SerializationMode.BINARY)

    @pytest.mark.parametrize("mode", list(SerializationMode))
    def test_round_trip(self, mode: SerializationMode) -> None:
        value = Hash32(bytes(range(32)))
        assert Hash32.decode(value.encode(mode), mode) == value


# ---------------------------------------------------------------------------
# Stream layout
# ---------------------------------------------------------------------------

class TestStreamLayout:
    def test_write_is_raw_bytes_without_prefix(self) -> None:
        stream = io.BytesIO()
        Address(bytes(range(20))).write_to(stream)
        assert stream.getvalue() == bytes(range(20))

    def test_read_consumes_exactly_length(self) -> None:
        stream = io.BytesIO(bytes(range(20)) + b"tail")
        assert Address.read_from(stream).value == bytes(range(20))
        assert stream.read() == b"tail"

    def test_sequential_values(self) -> None:
        stream = io.BytesIO()
        Address(b"\x01" * 20).write_to(stream)
        Hash32(b"\x02" * 32).write_to(stream)
        stream.seek(0)
        assert Address.read_from(stream) == Address(b"\x01" * 20)
        assert Hash32.read_from(stream) == Hash32(b"\x02" * 32)

    def test_short_read_rejected(self) -> None:
        with pytest.raises(FormatError, match="Unexpected end of stream"):
            Hash32.read_from(io.BytesIO(bytes(31)))


# ---------------------------------------------------------------------------
# Comparison and immutability
# ---------------------------------------------------------------------------

class TestComparison:
    def test_equality(self) -> None:
        assert Address(bytes(20)) == Address(bytes(20))

    def test_inequality(self) -> None:
        assert Address(bytes(20)) != Address(b"\x01" + bytes(19))

    def test_different_sizes_never_equal(self) -> None:
        assert Address(bytes(20)) != Hash32(bytes(32))

    def test_not_equal_to_plain_bytes(self) -> None:
        assert Address(bytes(20)) != bytes(20)

    def test_hashable(self) -> None:
        assert len({Address(bytes(20)), Address(bytes(20))}) == 1

    def test_lexicographic_order(self) -> None:
        low = Address(b"\x00" + b"\xff" * 19)
        mid = Address(b"\x01" + bytes(19))
        high = Address(b"\x01" + b"\x00" * 18 + b"\x01")
        assert sorted([high, low, mid]) == [low, mid, high]

    def test_ordering_across_sizes_unsupported(self) -> None:
        with pytest.raises(TypeError):
            _ = Address(bytes(20)) < Hash32(bytes(32))  # type: ignore[operator]

    def test_frozen(self) -> None:
        address = Address(bytes(20))
        with pytest.raises(FrozenInstanceError):
            address.value = bytes(20)  # type: ignore[misc]
