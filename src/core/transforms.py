"""Byte transforms: base64 and hex, both directions.

Encoders accept any buffer, including the empty one. Decoders are strict:
base64 must use the standard alphabet with canonical padding and hex must be
UTF-8 text made only of hex digits, with an even length.
"""

from __future__ import annotations

import base64
import binascii

from core.domain.errors import DecodeError, EncodingError, TransformError
from core.domain.models import Operation
from core.interfaces.transform import ByteTransform


def base64_encode(data: bytes) -> bytes:
    return base64.b64encode(data)


def base64_decode(data: bytes) -> bytes:
    """Decode standard, padded base64.

    `validate=True` rejects anything outside the alphabet (whitespace
    included) and misplaced padding. The re-encode check rejects inputs whose
    last character carries non-zero unused bits.
    """

    try:
        decoded = base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise DecodeError(f"Invalid base64 input: {exc}", operation=Operation.BASE64_DECODE) from exc

    if base64.b64encode(decoded) != data:
        raise DecodeError(
            "Invalid base64 input: non-canonical trailing bits",
            operation=Operation.BASE64_DECODE,
        )
    return decoded


def hex_encode(data: bytes) -> bytes:
    return data.hex().encode("ascii")


def hex_decode(data: bytes) -> bytes:
    """Decode hex text (either case) into raw bytes."""

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(
            f"Hex input is not valid UTF-8 text: {exc.reason} at byte {exc.start}",
            operation=Operation.HEX_DECODE,
        ) from exc

    try:
        return binascii.unhexlify(text)
    except ValueError as exc:
        # binascii.Error (odd length, bad digit) and non-ASCII text both land here.
        raise DecodeError(f"Invalid hex input: {exc}", operation=Operation.HEX_DECODE) from exc


def transform_for(operation: Operation) -> ByteTransform:
    """Return the transform implementing `operation`."""

    if operation is Operation.BASE64_ENCODE:
        return base64_encode
    elif operation is Operation.BASE64_DECODE:
        return base64_decode
    elif operation is Operation.HEX_ENCODE:
        return hex_encode
    elif operation is Operation.HEX_DECODE:
        return hex_decode
    raise ValueError(f"Unsupported operation: {operation!r}")


def apply_operation(operation: Operation, data: bytes) -> bytes:
    return transform_for(operation)(data)


def apply_operation_safe(
    operation: Operation,
    data: bytes,
) -> tuple[bytes | None, TransformError | None]:
    """Like `apply_operation`, but returns the failure instead of raising it."""

    try:
        return apply_operation(operation, data), None
    except TransformError as exc:
        return None, exc
