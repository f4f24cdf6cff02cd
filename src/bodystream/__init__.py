from bodystream.config import (
    StreamConfig,
    default_config,
    get_default_config,
    set_default_config,
)
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
from bodystream.json_body import JSON_CONTENT_TYPE, json_body
from bodystream.stream import Stream
from bodystream.types import METADATA_KEYS, StreamInterface, TempBackend

__all__ = [
    # Core
    "Stream",
    "StreamInterface",
    "json_body",
    "JSON_CONTENT_TYPE",
    "METADATA_KEYS",
    # Config
    "StreamConfig",
    "TempBackend",
    "default_config",
    "get_default_config",
    "set_default_config",
    # Exceptions
    "StreamError",
    "InvalidStreamInputError",
    "StreamNotOpenError",
    "StreamNotReadableError",
    "StreamNotWritableError",
    "StreamPositionError",
    "StreamSeekError",
    "StreamRewindError",
    "StreamContentsError",
    "StreamReadError",
    "StreamWriteError",
]

__version__ = "0.1.0"
