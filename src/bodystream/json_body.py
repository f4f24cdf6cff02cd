"""Builds message bodies holding JSON documents."""

import json
from typing import Any

from bodystream.config import StreamConfig
from bodystream.stream import Stream

JSON_CONTENT_TYPE = "application/json"


def json_body(value: Any, *, config: StreamConfig | None = None, **dumps_kwargs: Any) -> Stream:
    """Serialize ``value`` to JSON and return it as a stream positioned at the start.

    Extra keyword arguments are passed on to :func:`json.dumps`.
    """
    return Stream(json.dumps(value, **dumps_kwargs), config=config)
