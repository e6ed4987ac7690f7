"""Contrato de un transform de bytes.

A transform is any callable `bytes -> bytes`. Decoders raise a
`TransformError` subclass when the input does not conform; encoders never
raise.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteTransform(Protocol):
    """Pure function mapping a buffer to a new buffer."""

    def __call__(self, data: bytes) -> bytes:
        ...
