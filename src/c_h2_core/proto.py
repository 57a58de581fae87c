"""
Protocol engine error shapes for c_h2_core.

The connection state machine reports failures as one of three values:
a stream reset, a connection-wide GOAWAY, or a transport fault. They are
plain immutable data; ``c_h2_core.error.Error`` converts them into the
public error type.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .frame import Reason, StreamId


class Initiator(Enum):
    """Side of the connection that triggered a reset or GOAWAY."""
    LOCAL = "local"     # This library detected the fault
    REMOTE = "remote"   # The peer sent the frame

    def is_local(self) -> bool:
        return self is Initiator.LOCAL

    def is_remote(self) -> bool:
        return self is Initiator.REMOTE

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Reset:
    """A RST_STREAM frame was received or sent."""

    stream_id: StreamId
    reason: Reason
    initiator: Initiator


@dataclass(frozen=True)
class GoAway:
    """A GOAWAY frame was received or sent."""

    debug_data: bytes
    reason: Reason
    initiator: Initiator

    def __post_init__(self) -> None:
        """Freeze the debug payload to bytes."""
        if isinstance(self.debug_data, (bytearray, memoryview)):
            object.__setattr__(self, "debug_data", bytes(self.debug_data))
        elif not isinstance(self.debug_data, bytes):
            raise ValueError("debug_data must be bytes")


@dataclass(frozen=True)
class Io:
    """
    The transport failed while reading or writing.

    The ``OSError`` is held by reference. Every error built from this
    value shares the same fault object.
    """

    error: OSError


ProtoError = Union[Reset, GoAway, Io]


def library_reset(stream_id: StreamId, reason: Reason) -> Reset:
    """Reset a stream because of a fault detected locally."""
    return Reset(stream_id, reason, Initiator.LOCAL)


def remote_reset(stream_id: StreamId, reason: Reason) -> Reset:
    """Record a RST_STREAM frame received from the peer."""
    return Reset(stream_id, reason, Initiator.REMOTE)


def library_go_away(reason: Reason, debug_data: bytes = b"") -> GoAway:
    """Terminate the connection because of a fault detected locally."""
    return GoAway(debug_data, reason, Initiator.LOCAL)


def remote_go_away(reason: Reason, debug_data: bytes = b"") -> GoAway:
    """Record a GOAWAY frame received from the peer."""
    return GoAway(debug_data, reason, Initiator.REMOTE)


def io_error(error: OSError) -> Io:
    return Io(error)
