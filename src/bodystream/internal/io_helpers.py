"""Helpers for detecting, creating and describing the resources behind a Stream."""

import io
import logging
import tempfile
from typing import IO, Any, BinaryIO, TypeGuard, cast

from bodystream.config import StreamConfig
from bodystream.types import TempBackend

logger = logging.getLogger(__name__)

TEMP_URI = "temp://"
MEMORY_URI = "memory://"

WRITE_MODE_CHARS = frozenset("waxc+")
READ_MODE_CHARS = frozenset("r+")


ALL_IO_METHODS = {
    "read",
    "write",
    "seek",
    "tell",
    "__enter__",
    "__exit__",
    "close",
    "flush",
    "readline",
    "readlines",
    "writelines",
}

ALL_IO_PROPERTIES = {
    "closed",
}


def is_stream(obj: Any) -> TypeGuard[BinaryIO]:
    """Check if an object can be adopted as the resource of a Stream."""

    # Text-mode files read and write str, not bytes.
    if isinstance(obj, io.TextIOBase):
        logger.debug("Object %r is a text stream, not a binary one", obj)
        return False

    # Before Python 3.11 SpooledTemporaryFile is not an IOBase and lacks
    # readable()/seekable(), but it is exactly what we open ourselves.
    if isinstance(obj, (io.IOBase, tempfile.SpooledTemporaryFile)):
        return True

    if isinstance(obj, (bytes, bytearray, memoryview, str)):
        return False

    missing_methods = {m for m in ALL_IO_METHODS if not callable(getattr(obj, m, None))}
    missing_properties = {p for p in ALL_IO_PROPERTIES if not hasattr(obj, p)}

    if missing_methods or missing_properties:
        logger.debug(
            "Object %r is not a file object: missing methods %r, missing properties %r",
            obj,
            missing_methods,
            missing_properties,
        )
        return False

    return True


def is_seekable(stream: IO[bytes]) -> bool:
    """Check if a stream is seekable."""
    if isinstance(stream, tempfile.SpooledTemporaryFile):
        # Backed by either a BytesIO or a real temporary file, both seekable.
        return True

    try:
        return stream.seekable() or False
    except AttributeError as e:
        logger.debug("Stream %s does not have a seekable method: %s", stream, e)
        return False


def open_temporary(config: StreamConfig) -> BinaryIO:
    """Open a fresh, empty, readable, writable and seekable resource."""
    if config.temp_backend == TempBackend.MEMORY:
        return io.BytesIO()
    if config.temp_backend == TempBackend.FILE:
        return cast(BinaryIO, tempfile.TemporaryFile("w+b"))
    return cast(
        BinaryIO,
        tempfile.SpooledTemporaryFile(max_size=config.spool_max_size, mode="w+b"),
    )


def _mode_of(handle: IO[bytes]) -> str | None:
    mode = getattr(handle, "mode", None)
    if isinstance(mode, str):
        return mode

    # BytesIO and most wrappers have no mode attribute; describe them in the
    # same vocabulary as open().
    try:
        readable = handle.readable()
        writable = handle.writable()
    except AttributeError:
        return None

    if readable and writable:
        return "r+b"
    if readable:
        return "rb"
    if writable:
        return "wb"
    return None


def _describe(handle: IO[bytes]) -> tuple[str, str, str | None]:
    if isinstance(handle, tempfile.SpooledTemporaryFile):
        return "tempfile", "TEMP", TEMP_URI
    if isinstance(handle, io.BytesIO):
        return "io", "MEMORY", MEMORY_URI

    name = getattr(handle, "name", None)
    if isinstance(name, str):
        return "plainfile", "STDIO", name
    if isinstance(name, int):
        return "plainfile", "STDIO", f"fd://{name}"

    handle_type = type(handle)
    return handle_type.__module__, handle_type.__name__, None


def get_resource_metadata(handle: IO[bytes]) -> dict[str, Any] | None:
    """Describe ``handle``, or return None if it can no longer be described.

    The mapping always has the keys listed in
    :data:`bodystream.types.METADATA_KEYS`.
    """
    try:
        if handle.closed:
            return None
        seekable = is_seekable(handle)
    except ValueError as e:
        # Raised by most file objects once closed.
        logger.debug("Unable to get metadata of %r: %s", handle, e)
        return None

    wrapper_type, stream_type, uri = _describe(handle)
    return {
        "wrapper_type": wrapper_type,
        "stream_type": stream_type,
        "mode": _mode_of(handle),
        "unread_bytes": 0,
        "seekable": seekable,
        "uri": uri,
    }


def capabilities_from_metadata(
    metadata: dict[str, Any] | None,
) -> tuple[bool, bool, bool]:
    """Return the ``(readable, writable, seekable)`` flags described by ``metadata``."""
    if metadata is None:
        return False, False, False

    mode = metadata.get("mode")
    if not isinstance(mode, str):
        mode = ""

    readable = any(c in READ_MODE_CHARS for c in mode)
    writable = any(c in WRITE_MODE_CHARS for c in mode)
    seekable = metadata.get("seekable") is True
    return readable, writable, seekable


def probe_size(handle: IO[bytes]) -> int:
    """Return the size of a seekable ``handle``, restoring its position."""
    pos = handle.tell()
    try:
        handle.seek(0, io.SEEK_END)
        return handle.tell()
    finally:
        handle.seek(pos)


def read_exact(stream: IO[bytes], n: int) -> bytes:
    """Read exactly ``n`` bytes, or all available bytes if the file ends."""

    if n < 0:
        raise ValueError("n must be non-negative")

    data = bytearray()
    while len(data) < n:
        chunk = stream.read(n - len(data))
        if not chunk:
            break
        data.extend(chunk)
    return bytes(data)
