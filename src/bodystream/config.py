from __future__ import annotations

import codecs
import contextvars
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any

from bodystream.types import TempBackend


@dataclass
class StreamConfig:
    """Configuration for :class:`bodystream.Stream`."""

    temp_backend: TempBackend = TempBackend.SPOOLED
    # Content larger than this rolls over from memory to a real temporary file.
    spool_max_size: int = 2 * 1024 * 1024

    encoding: str = "utf-8"
    errors: str = "replace"

    allow_seek_past_end: bool = False

    def __post_init__(self) -> None:
        # Raises LookupError for unknown codecs or error handlers.
        codecs.lookup(self.encoding)
        codecs.lookup_error(self.errors)


_default_config_var: contextvars.ContextVar[StreamConfig] = contextvars.ContextVar(
    "bodystream_default_config", default=StreamConfig()
)


def get_default_config() -> StreamConfig:
    """Return the configuration used by streams created without one."""
    return _default_config_var.get()


def set_default_config(config: StreamConfig) -> None:
    _default_config_var.set(config)


@contextmanager
def default_config(config: StreamConfig | None = None, **overrides: Any):
    """Create streams inside the block with ``config``, updated by ``overrides``.

    Without ``config`` the overrides apply to the current default.
    """
    config = replace(config or get_default_config(), **overrides)
    token = _default_config_var.set(config)
    try:
        yield config
    finally:
        _default_config_var.reset(token)
