"""
Unified error type for c_h2_core.

``Error`` covers protocol errors caused by the peer, errors detected by
this library, transport (I/O) failures, and errors caused by the user of
the library. Every upstream error is converted into exactly one internal
kind, so callers can classify a failure without knowing which subsystem
produced it:

- ``reason()`` is set when a stream or the connection was terminated with
  a protocol error code.
- ``is_io()`` / ``get_io()`` expose transport failures.
- ``str(error)`` gives a stable, human readable description.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from typing_extensions import assert_never

from . import codec, proto
from .codec import SendError, UserError
from .frame import Reason, StreamId
from .proto import Initiator, ProtoError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Reset:
    stream_id: StreamId
    reason: Reason
    initiator: Initiator


@dataclass(frozen=True)
class _GoAway:
    debug_data: bytes
    reason: Reason
    initiator: Initiator


@dataclass(frozen=True)
class _Reason:
    reason: Reason


@dataclass(frozen=True)
class _User:
    user: UserError


@dataclass(frozen=True)
class _Io:
    # Shared by every copy of the error; never rebuilt.
    error: OSError


_Kind = Union[_Reset, _GoAway, _Reason, _User, _Io]
_KIND_TYPES = (_Reset, _GoAway, _Reason, _User, _Io)


class Error(Exception):
    """
    Represents HTTP/2 operation errors.

    Instances are created through the ``from_*`` constructors (or
    ``convert``) and never change afterwards. They are safe to share
    between threads and tasks, and copying one shares the wrapped
    transport fault instead of duplicating it.

    If the error was caused by a stream reset or a GOAWAY, the protocol
    error code can be obtained with ``reason()``.
    """

    def __init__(self, kind: _Kind) -> None:
        if not isinstance(kind, _KIND_TYPES):
            raise TypeError(f"unsupported error kind: {type(kind).__name__}")
        self._kind = kind
        super().__init__(_render(kind))

    def __setattr__(self, name: str, value) -> None:
        if name == "_kind" and "_kind" in self.__dict__:
            raise AttributeError("Error is immutable")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name == "_kind":
            raise AttributeError("Error is immutable")
        super().__delattr__(name)

    # ===== Conversions =====

    @classmethod
    def from_proto(cls, src: ProtoError) -> "Error":
        """Convert an error reported by the protocol engine."""
        if isinstance(src, proto.Reset):
            return cls(_Reset(src.stream_id, src.reason, src.initiator))
        if isinstance(src, proto.GoAway):
            return cls(_GoAway(src.debug_data, src.reason, src.initiator))
        if isinstance(src, proto.Io):
            return cls(_Io(src.error))
        assert_never(src)

    @classmethod
    def from_reason(cls, reason: Reason) -> "Error":
        """Create an error from a bare protocol error code."""
        return cls(_Reason(reason))

    @classmethod
    def from_send_error(cls, src: SendError) -> "Error":
        """
        Convert a send-path error.

        A send error is not a kind of its own: user errors become ``User``
        errors and connection errors go through ``from_proto``.
        """
        if isinstance(src, codec.SendUserError):
            logger.debug(f"Send rejected by local validation: {src.user}")
            return cls.from_user(src.user)
        if isinstance(src, codec.SendConnectionError):
            logger.debug(f"Send failed on connection error: {src.error!r}")
            return cls.from_proto(src.error)
        assert_never(src)

    @classmethod
    def from_user(cls, user: UserError) -> "Error":
        """Create an error for invalid use of the library API."""
        return cls(_User(user))

    @classmethod
    def from_io(cls, error: OSError) -> "Error":
        """Wrap a transport failure."""
        logger.debug(f"Wrapping transport fault: {error!r}")
        return cls(_Io(error))

    @classmethod
    def convert(
        cls,
        src: Union["Error", ProtoError, Reason, SendError, UserError, OSError],
    ) -> "Error":
        """
        Convert any supported upstream error into an ``Error``.

        An ``Error`` is returned unchanged so that a fault is never
        wrapped twice.

        Raises:
            TypeError: If ``src`` is not a supported error source
        """
        if isinstance(src, Error):
            return src
        if isinstance(src, (proto.Reset, proto.GoAway, proto.Io)):
            return cls.from_proto(src)
        if isinstance(src, Reason):
            return cls.from_reason(src)
        if isinstance(src, (codec.SendUserError, codec.SendConnectionError)):
            return cls.from_send_error(src)
        if isinstance(src, UserError):
            return cls.from_user(src)
        if isinstance(src, OSError):
            return cls.from_io(src)
        raise TypeError(f"cannot convert {type(src).__name__} to Error")

    # ===== Inspection =====

    def reason(self) -> Optional[Reason]:
        """
        If the error was caused by a stream reset or GOAWAY, the reason.

        This is either an error code received from the peer or one sent
        by this library because the peer violated the protocol.
        """
        if isinstance(self._kind, (_Reset, _GoAway)):
            return self._kind.reason
        return None

    def is_io(self) -> bool:
        """Return True if the error is a transport failure."""
        return isinstance(self._kind, _Io)

    def get_io(self) -> Optional[OSError]:
        """Return the wrapped transport failure without copying it."""
        if isinstance(self._kind, _Io):
            return self._kind.error
        return None

    def into_io(self) -> Optional[OSError]:
        """
        Return a new ``OSError`` equivalent to the wrapped transport failure.

        The new exception has the same class, errno, message and file
        names. The original fault is attached as its ``__cause__`` so the
        full chain stays reachable.
        """
        if not isinstance(self._kind, _Io):
            return None

        original = self._kind.error
        # Bypass subclass constructors: only args are known to be replayable
        rebuilt = OSError.__new__(type(original), *original.args)
        OSError.__init__(rebuilt, *original.args)
        # An explicit None filename changes how OSError renders
        if original.filename is not None:
            rebuilt.filename = original.filename
        if original.filename2 is not None:
            rebuilt.filename2 = original.filename2
        # Attributes set by the skipped constructor, which __str__ may read
        rebuilt.__dict__.update(original.__dict__)
        rebuilt.__cause__ = original
        return rebuilt

    def is_reset(self) -> bool:
        return isinstance(self._kind, _Reset)

    def is_go_away(self) -> bool:
        return isinstance(self._kind, _GoAway)

    def is_user(self) -> bool:
        return isinstance(self._kind, _User)

    def is_remote(self) -> bool:
        """Return True if a reset or GOAWAY was received from the peer."""
        if isinstance(self._kind, (_Reset, _GoAway)):
            return self._kind.initiator.is_remote()
        return False

    def is_library(self) -> bool:
        """Return True if a reset or GOAWAY was sent by this library."""
        if isinstance(self._kind, (_Reset, _GoAway)):
            return self._kind.initiator.is_local()
        return False

    def stream_id(self) -> Optional[StreamId]:
        if isinstance(self._kind, _Reset):
            return self._kind.stream_id
        return None

    def debug_data(self) -> Optional[bytes]:
        if isinstance(self._kind, _GoAway):
            return self._kind.debug_data
        return None

    # ===== Value semantics =====

    def __str__(self) -> str:
        return _render(self._kind)

    def __repr__(self) -> str:
        return f"Error({self._kind!r})"

    def __copy__(self) -> "Error":
        return Error(self._kind)

    def __deepcopy__(self, memo: dict) -> "Error":
        # The kind is immutable, and the transport fault must stay shared
        return Error(self._kind)

    def __reduce__(self):
        return (Error, (self._kind,))


def _render(kind: _Kind) -> str:
    if isinstance(kind, _Reset):
        return f"stream reset by {kind.initiator}: {kind.reason}"
    if isinstance(kind, _GoAway):
        text = f"go away from {kind.initiator}: {kind.reason}"
        if kind.debug_data:
            text += f" ({list(kind.debug_data)})"
        return text
    if isinstance(kind, _Reason):
        return f"protocol error: {kind.reason}"
    if isinstance(kind, _User):
        return f"user error: {kind.user}"
    if isinstance(kind, _Io):
        return str(kind.error)
    assert_never(kind)
