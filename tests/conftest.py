import logging
import uuid

import pytest

from bodystream.config import StreamConfig, set_default_config

logger = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def reset_default_config():
    """Keep tests that change the default configuration from leaking it."""
    set_default_config(StreamConfig())
    yield
    set_default_config(StreamConfig())


@pytest.fixture
def content() -> str:
    """Return a unique ASCII string to use as stream content."""
    return f"content{uuid.uuid4().hex}"


@pytest.fixture
def write_only_handle(tmp_path):
    """Return a file opened for writing only; the test decides when to close it."""
    handle = open(str(tmp_path / "write_only.bin"), "wb")
    yield handle
    handle.close()


@pytest.fixture
def read_only_handle(tmp_path, content):
    path = tmp_path / "read_only.bin"
    path.write_bytes(content.encode())
    handle = open(str(path), "rb")
    logger.info(f"Opened {path} read-only")
    yield handle
    handle.close()
