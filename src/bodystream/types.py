"""Shared types: the stream protocol, temp backends and metadata keys."""

from __future__ import annotations

import io
import sys
from typing import TYPE_CHECKING, Any, BinaryIO, Protocol, runtime_checkable

if TYPE_CHECKING:
    from enum import StrEnum
elif sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from backports.strenum import StrEnum


class TempBackend(StrEnum):
    """Where content-backed streams keep their bytes."""

    SPOOLED = "spooled"
    FILE = "file"
    MEMORY = "memory"


METADATA_KEYS = (
    "wrapper_type",
    "stream_type",
    "mode",
    "unread_bytes",
    "seekable",
    "uri",
)


@runtime_checkable
class StreamInterface(Protocol):
    """The operations a message body consumer may rely on."""

    def __str__(self) -> str: ...

    def __bytes__(self) -> bytes: ...

    def close(self) -> None: ...

    def detach(self) -> BinaryIO | None: ...

    def get_size(self) -> int | None: ...

    def tell(self) -> int: ...

    def eof(self) -> bool: ...

    def is_seekable(self) -> bool: ...

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int: ...

    def rewind(self) -> None: ...

    def is_writable(self) -> bool: ...

    def write(self, data: bytes | str) -> int: ...

    def is_readable(self) -> bool: ...

    def read(self, length: int) -> bytes: ...

    def get_contents(self) -> bytes: ...

    def get_metadata(self, key: str | None = None) -> Any: ...
