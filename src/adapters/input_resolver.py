"""Lectura de la entrada del pipeline.

The resolver turns an already validated `InputSource` into the initial
buffer. Whether exactly one source was given is checked by the model and
the CLI, not here.
"""

from __future__ import annotations

import logging

from core.domain.errors import NotFoundError
from core.domain.models import InputSource

logger = logging.getLogger(__name__)


def resolve_input(source: InputSource) -> bytes:
    """Return the raw bytes of the file, or the UTF-8 bytes of the literal."""

    if source.is_file:
        assert source.file_path is not None
        path = source.file_path
        try:
            data = path.read_bytes()
        except FileNotFoundError as exc:
            raise NotFoundError(path) from exc
        except OSError as exc:
            raise NotFoundError(path, exc.strerror or str(exc)) from exc
        logger.debug("read %d bytes from %s", len(data), path)
        return data

    assert source.literal is not None
    data = source.literal.encode("utf-8")
    logger.debug("using %d bytes of literal input", len(data))
    return data
