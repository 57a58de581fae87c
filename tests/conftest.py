"""
Pytest configuration for c_h2_core tests.

This file contains shared fixtures and configuration
for all tests in the project.
"""

import errno

import pytest

from c_h2_core import proto
from c_h2_core.frame import Reason, StreamId


@pytest.fixture
def stream_id():
    """A client-initiated stream id."""
    return StreamId(1)


@pytest.fixture
def remote_reset(stream_id):
    """A RST_STREAM(PROTOCOL_ERROR) received from the peer."""
    return proto.remote_reset(stream_id, Reason.PROTOCOL_ERROR)


@pytest.fixture
def local_go_away():
    """A GOAWAY(NO_ERROR) sent by this side with debug data."""
    return proto.library_go_away(Reason.NO_ERROR, b"\x01\x02\x03")


@pytest.fixture
def connection_reset():
    """A transport fault as raised by a socket read."""
    return ConnectionResetError(errno.ECONNRESET, "Connection reset by peer")


@pytest.fixture
def make_io_error():
    """Create OSError instances for a given errno."""
    def _create(code: int, message: str) -> OSError:
        return OSError(code, message)
    return _create
