"""
Transform library tests.

Property tests (hypothesis) for the round-trip and totality guarantees,
plus example-based tests for the decoder failure modes.
"""

import pytest
from hypothesis import given, settings, strategies as st

from core.domain.errors import DecodeError, EncodingError, TransformError
from core.domain.models import Operation
from core.interfaces.transform import ByteTransform
from core.transforms import (
    apply_operation,
    apply_operation_safe,
    base64_decode,
    base64_encode,
    hex_decode,
    hex_encode,
    transform_for,
)


# ============================================================================
# Properties
# ============================================================================

@settings(max_examples=200)
@given(st.binary())
def test_base64_round_trip(data):
    assert base64_decode(base64_encode(data)) == data


@settings(max_examples=200)
@given(st.binary())
def test_hex_round_trip(data):
    assert hex_decode(hex_encode(data)) == data


@given(st.binary())
def test_hex_encode_is_two_lowercase_digits_per_byte(data):
    encoded = hex_encode(data)
    assert len(encoded) == 2 * len(data)
    assert all(c in b"0123456789abcdef" for c in encoded)


@given(st.binary())
def test_base64_encode_is_padded_ascii(data):
    encoded = base64_encode(data)
    assert len(encoded) % 4 == 0
    encoded.decode("ascii")


def test_encoders_accept_empty_input():
    assert base64_encode(b"") == b""
    assert hex_encode(b"") == b""


# ============================================================================
# Known vectors
# ============================================================================

def test_known_vectors():
    assert base64_encode(b"hello") == b"aGVsbG8="
    assert base64_decode(b"aGVsbG8=") == b"hello"
    assert hex_encode(b"hello") == b"68656c6c6f"
    assert hex_decode(b"68656c6c6f") == b"hello"


def test_hex_decode_accepts_uppercase_digits():
    assert hex_decode(b"68656C6C6F") == b"hello"


def test_empty_inputs_decode_to_empty():
    assert base64_decode(b"") == b""
    assert hex_decode(b"") == b""


# ============================================================================
# Decoder failures
# ============================================================================

@pytest.mark.parametrize(
    "payload",
    [
        b"not valid base64!!",
        b"aGVsbG8",  # missing padding
        b"aGVs bG8=",  # whitespace
        b"aGVsbG8=aGVs",  # data after padding
        b"aGVsbG9=",  # non-zero trailing bits
        b"=aGVsbG8",
        "héllo==".encode("utf-8"),
    ],
)
def test_base64_decode_rejects_malformed_input(payload):
    with pytest.raises(DecodeError) as excinfo:
        base64_decode(payload)
    assert excinfo.value.operation is Operation.BASE64_DECODE
    assert excinfo.value.exit_code == 4


@pytest.mark.parametrize("payload", [b"xyz", b"abc", b"zz", b"68 65", "éé".encode("utf-8")])
def test_hex_decode_rejects_malformed_text(payload):
    with pytest.raises(DecodeError) as excinfo:
        hex_decode(payload)
    assert excinfo.value.operation is Operation.HEX_DECODE


def test_hex_decode_rejects_non_utf8_bytes():
    with pytest.raises(EncodingError) as excinfo:
        hex_decode(b"\xff\xfe")
    assert excinfo.value.exit_code == 5
    assert "UTF-8" in excinfo.value.message


# ============================================================================
# Dispatch
# ============================================================================

@pytest.mark.parametrize(
    "operation, expected",
    [
        (Operation.BASE64_ENCODE, base64_encode),
        (Operation.BASE64_DECODE, base64_decode),
        (Operation.HEX_ENCODE, hex_encode),
        (Operation.HEX_DECODE, hex_decode),
    ],
)
def test_transform_for_covers_every_operation(operation, expected):
    transform = transform_for(operation)
    assert transform is expected
    assert isinstance(transform, ByteTransform)


def test_operations_are_valued_by_cli_token():
    assert Operation("b64enc") is Operation.BASE64_ENCODE
    assert Operation("b64dec") is Operation.BASE64_DECODE
    assert Operation("hex2bin") is Operation.HEX_DECODE
    assert Operation("bin2hex") is Operation.HEX_ENCODE


def test_only_decoders_are_flagged():
    assert [op for op in Operation if op.is_decoder] == [Operation.BASE64_DECODE, Operation.HEX_DECODE]


def test_apply_operation_raises_and_safe_variant_returns_error():
    with pytest.raises(TransformError):
        apply_operation(Operation.HEX_DECODE, b"xyz")

    output, error = apply_operation_safe(Operation.HEX_DECODE, b"xyz")
    assert output is None
    assert isinstance(error, DecodeError)

    output, error = apply_operation_safe(Operation.BASE64_ENCODE, b"hello")
    assert output == b"aGVsbG8="
    assert error is None
