"""Provides :class:`Stream`, a seekable message body over a temporary resource."""

import io
import logging
from typing import IO, Any, Callable, TypeVar, Union

from bodystream.config import StreamConfig, get_default_config
from bodystream.exceptions import (
    InvalidStreamInputError,
    StreamContentsError,
    StreamError,
    StreamNotOpenError,
    StreamNotReadableError,
    StreamNotWritableError,
    StreamPositionError,
    StreamReadError,
    StreamRewindError,
    StreamSeekError,
    StreamWriteError,
)
from bodystream.internal.io_helpers import (
    capabilities_from_metadata,
    get_resource_metadata,
    is_stream,
    open_temporary,
    probe_size,
    read_exact,
)

logger = logging.getLogger(__name__)

Content = Union[bytes, bytearray, memoryview, str]

T = TypeVar("T")


def run_with_exception_translation(
    func: Callable[[], T],
    make_error: Callable[[], StreamError],
) -> T:
    """Call ``func``, raising the error built by ``make_error`` if the I/O fails."""
    try:
        return func()
    except (OSError, ValueError) as e:
        translated = make_error()
        logger.debug("Translated exception: %r -> %r", e, translated)
        raise translated from e


class Stream:
    """
    A message body backed by a single binary resource.

    The resource is either a temporary one opened by the stream itself (when
    constructed from bytes or text) or a binary file object adopted as-is.
    Its readable, writable and seekable capabilities are captured once when it
    is attached and never re-read.

    The stream owns the resource: :meth:`close` (or leaving a ``with`` block,
    or garbage collection) closes it, while :meth:`detach` hands it back to the
    caller. Either way the stream is inert afterwards, and every operation that
    needs the resource raises :class:`StreamNotOpenError`.

    Args:
        body: The initial content, or an open binary file object to adopt.
        config: Overrides the default :class:`StreamConfig`.

    Raises:
        InvalidStreamInputError: If ``body`` is neither content nor a file
            object.
    """

    def __init__(
        self,
        body: Union[Content, IO[bytes]],
        *,
        config: StreamConfig | None = None,
    ):
        self._handle: IO[bytes] | None = None
        self._readable = False
        self._writable = False
        self._seekable = False
        self._eof = False
        self._config = config if config is not None else get_default_config()

        if isinstance(body, str):
            body = body.encode(self._config.encoding)

        if isinstance(body, (bytes, bytearray, memoryview)):
            handle = open_temporary(self._config)
            try:
                handle.write(body)
                handle.seek(0)
            except Exception:
                handle.close()
                raise
            self._attach(handle)
        elif is_stream(body):
            self._attach(body)
        else:
            raise InvalidStreamInputError(
                f"{type(self).__name__} must be constructed with a binary file "
                f"object or bytes; {type(body).__name__} given."
            )

    def _attach(self, handle: IO[bytes]) -> None:
        metadata = get_resource_metadata(handle)
        self._handle = handle
        self._readable, self._writable, self._seekable = capabilities_from_metadata(
            metadata
        )
        self._eof = False
        logger.debug(
            "Attached %r (readable=%s, writable=%s, seekable=%s)",
            handle,
            self._readable,
            self._writable,
            self._seekable,
        )

    def _require_open(self) -> IO[bytes]:
        if self._handle is None:
            raise StreamNotOpenError()
        return self._handle

    @property
    def closed(self) -> bool:
        return self._handle is None

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def __bytes__(self) -> bytes:
        """Return the whole content from the start, or ``b""`` on any failure."""
        if self._handle is None:
            return b""

        try:
            self.rewind()
            data = self.get_contents()
        except Exception as e:  # noqa: BLE001
            # Converting a body must never fail; callers have no way to handle it.
            logger.debug("Unable to convert %r to bytes: %s", self, e)
            return b""

        if not isinstance(data, bytes):
            logger.debug("Resource of %r returned %s, not bytes", self, type(data).__name__)
            return b""
        return data

    def __str__(self) -> str:
        try:
            return bytes(self).decode(self._config.encoding, self._config.errors)
        except Exception as e:  # noqa: BLE001
            logger.debug("Unable to decode %r: %s", self, e)
            return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._handle!r})"

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def detach(self) -> IO[bytes] | None:
        """Give up ownership of the resource and return it, or None if detached."""
        handle = self._handle
        self._handle = None
        self._readable = False
        self._writable = False
        self._seekable = False
        self._eof = False

        if handle is not None:
            logger.debug("Detached %r", handle)
        return handle

    def close(self) -> None:
        """Detach and close the resource. Safe to call any number of times."""
        handle = self.detach()
        if handle is None:
            return

        try:
            handle.close()
        except Exception as e:  # noqa: BLE001
            logger.warning("Error closing %r: %s", handle, e, exc_info=e)

    def __enter__(self) -> "Stream":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __del__(self) -> None:
        # __init__ may have failed before the attributes were set.
        if not hasattr(self, "_handle"):
            return
        self.close()

    # ------------------------------------------------------------------
    # Capabilities and metadata
    # ------------------------------------------------------------------
    def is_readable(self) -> bool:
        return self._readable

    def is_writable(self) -> bool:
        return self._writable

    def is_seekable(self) -> bool:
        return self._seekable

    def get_metadata(self, key: str | None = None) -> Any:
        """
        Return the metadata of the resource, or a single entry of it.

        Returns None when detached, when the resource can no longer be
        described (e.g. it was closed behind the stream's back), or when
        ``key`` is not a known entry.
        """
        if self._handle is None:
            return None

        metadata = get_resource_metadata(self._handle)
        if metadata is None or key is None:
            return metadata
        return metadata.get(key)

    def get_size(self) -> int | None:
        """Return the size of the resource in bytes, if it can be determined."""
        if self._handle is None or not self._seekable:
            return None

        try:
            return probe_size(self._handle)
        except (OSError, ValueError) as e:
            logger.debug("Unable to get size of %r: %s", self._handle, e)
            return None

    # ------------------------------------------------------------------
    # Positioning
    # ------------------------------------------------------------------
    def tell(self) -> int:
        handle = self._require_open()
        return run_with_exception_translation(
            handle.tell,
            lambda: StreamPositionError("Unable to get position of stream."),
        )

    def eof(self) -> bool:
        """Return True if a read has hit the end of the data, or if detached."""
        return self._handle is None or self._eof

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Move to ``offset`` relative to ``whence`` and return the new position."""
        handle = self._require_open()

        def do_seek() -> int:
            previous = handle.tell()
            handle.seek(offset, whence)
            position = handle.tell()
            if not self._config.allow_seek_past_end and position > probe_size(handle):
                handle.seek(previous)
                raise StreamSeekError(offset)
            return position

        position = run_with_exception_translation(
            do_seek, lambda: StreamSeekError(offset)
        )
        self._eof = False
        return position

    def rewind(self) -> None:
        handle = self._require_open()
        run_with_exception_translation(
            lambda: handle.seek(0),
            lambda: StreamRewindError("Failed to rewind stream."),
        )
        self._eof = False

    # ------------------------------------------------------------------
    # Transfer
    # ------------------------------------------------------------------
    def write(self, data: Union[bytes, bytearray, memoryview, str]) -> int:
        """Write ``data`` at the current position and return the bytes written."""
        handle = self._require_open()
        if not self._writable:
            raise StreamNotWritableError()

        if isinstance(data, str):
            data = data.encode(self._config.encoding)

        written = run_with_exception_translation(
            lambda: handle.write(data),
            lambda: StreamWriteError("Failed to write to stream."),
        )
        self._eof = False
        if written is None:
            return memoryview(data).nbytes
        return written

    def read(self, length: int) -> bytes:
        """Read up to ``length`` bytes; fewer are returned at the end of the data."""
        handle = self._require_open()
        if not self._readable:
            raise StreamNotReadableError()
        if length < 0:
            raise ValueError("length must be non-negative")

        data = run_with_exception_translation(
            lambda: read_exact(handle, length),
            lambda: StreamReadError("Failed to read from stream."),
        )
        if len(data) < length:
            self._eof = True
        return data

    def get_contents(self) -> bytes:
        """Return everything from the current position to the end."""
        handle = self._require_open()
        data = run_with_exception_translation(
            handle.read,
            lambda: StreamContentsError("Failed to get contents of stream."),
        )
        self._eof = True
        return data or b""
