"""Defines the exceptions raised by :class:`bodystream.Stream`."""

import io


class StreamError(Exception):
    """Base exception for all stream-related errors raised by bodystream."""

    pass


class InvalidStreamInputError(StreamError, TypeError):
    """Raised when a Stream is constructed from neither bytes nor a file object."""

    pass


class StreamNotOpenError(StreamError):
    """Raised when an operation needs a resource but the stream is detached."""

    def __init__(self, message: str = "Stream is not open."):
        super().__init__(message)


class StreamNotReadableError(StreamError, io.UnsupportedOperation):
    """Raised when reading from a resource that was not opened for reading."""

    def __init__(self, message: str = "Stream is not readable."):
        super().__init__(message)


class StreamNotWritableError(StreamError, io.UnsupportedOperation):
    """Raised when writing to a resource that was not opened for writing."""

    def __init__(self, message: str = "Stream is not writable."):
        super().__init__(message)


class StreamPositionError(StreamError):
    """Raised when the current position of the resource cannot be determined."""

    pass


class StreamSeekError(StreamError):
    """Raised when the resource cannot be moved to the requested offset."""

    def __init__(self, offset: int, message: str | None = None):
        super().__init__(message or f"Failed to seek to offset {offset}.")
        self.offset = offset


class StreamRewindError(StreamError):
    """Raised when the resource cannot be moved back to its start."""

    pass


class StreamContentsError(StreamError):
    """Raised when the remaining contents of the resource cannot be read."""

    pass


class StreamReadError(StreamError):
    """Raised when the underlying read call fails."""

    pass


class StreamWriteError(StreamError):
    """Raised when the underlying write call fails on a writable resource."""

    pass
