"""
Frame-level primitives for c_h2_core.

This module defines the protocol error code (``Reason``) and the stream
identifier (``StreamId``) carried by RST_STREAM and GOAWAY frames.
Both are immutable values and safe to share between tasks.
"""

from dataclasses import dataclass
from typing import ClassVar, Dict


# https://datatracker.ietf.org/doc/html/rfc9113#name-error-codes
_REASON_NAMES: Dict[int, str] = {
    0x0: "NO_ERROR",
    0x1: "PROTOCOL_ERROR",
    0x2: "INTERNAL_ERROR",
    0x3: "FLOW_CONTROL_ERROR",
    0x4: "SETTINGS_TIMEOUT",
    0x5: "STREAM_CLOSED",
    0x6: "FRAME_SIZE_ERROR",
    0x7: "REFUSED_STREAM",
    0x8: "CANCEL",
    0x9: "COMPRESSION_ERROR",
    0xA: "CONNECT_ERROR",
    0xB: "ENHANCE_YOUR_CALM",
    0xC: "INADEQUATE_SECURITY",
    0xD: "HTTP_1_1_REQUIRED",
}

_REASON_DESCRIPTIONS: Dict[int, str] = {
    0x0: "no error",
    0x1: "protocol error",
    0x2: "internal error",
    0x3: "flow control error",
    0x4: "settings timeout",
    0x5: "stream closed",
    0x6: "frame size error",
    0x7: "refused stream",
    0x8: "cancel",
    0x9: "compression error",
    0xA: "connect error",
    0xB: "enhance your calm",
    0xC: "inadequate security",
    0xD: "http/1.1 required",
}


@dataclass(frozen=True, repr=False)
class Reason:
    """
    HTTP/2 error code.

    Error codes share a common code space between stream and connection
    errors. Codes not listed in RFC 9113 are still valid values, since
    peers may send extension codes, and render as ``unknown reason code``.
    """

    MAX_CODE: ClassVar[int] = 0xFFFFFFFF

    NO_ERROR: ClassVar["Reason"]
    PROTOCOL_ERROR: ClassVar["Reason"]
    INTERNAL_ERROR: ClassVar["Reason"]
    FLOW_CONTROL_ERROR: ClassVar["Reason"]
    SETTINGS_TIMEOUT: ClassVar["Reason"]
    STREAM_CLOSED: ClassVar["Reason"]
    FRAME_SIZE_ERROR: ClassVar["Reason"]
    REFUSED_STREAM: ClassVar["Reason"]
    CANCEL: ClassVar["Reason"]
    COMPRESSION_ERROR: ClassVar["Reason"]
    CONNECT_ERROR: ClassVar["Reason"]
    ENHANCE_YOUR_CALM: ClassVar["Reason"]
    INADEQUATE_SECURITY: ClassVar["Reason"]
    HTTP_1_1_REQUIRED: ClassVar["Reason"]

    code: int

    def __post_init__(self) -> None:
        """Validate the code is an unsigned 32-bit integer."""
        if not isinstance(self.code, int) or isinstance(self.code, bool):
            raise ValueError("reason code must be int")

        if not 0 <= self.code <= self.MAX_CODE:
            raise ValueError(f"reason code out of range: {self.code}")

    @property
    def name(self) -> str:
        """RFC name of the code, or its hex value for unknown codes."""
        return _REASON_NAMES.get(self.code, f"{self.code:#x}")

    @property
    def description(self) -> str:
        """Human readable description of the code."""
        description = _REASON_DESCRIPTIONS.get(self.code)
        if description is None:
            return f"unknown reason code: {self.code}"
        return description

    def is_known(self) -> bool:
        return self.code in _REASON_NAMES

    def __int__(self) -> int:
        return self.code

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"Reason({self.name})"


for _code, _name in _REASON_NAMES.items():
    setattr(Reason, _name, Reason(_code))
del _code, _name


@dataclass(frozen=True, repr=False)
class StreamId:
    """
    Identifier of a stream multiplexed over one connection.

    Stream ids are unsigned 31-bit integers. Clients open odd-numbered
    streams, servers open even-numbered ones, and stream 0 is reserved
    for connection control frames.
    """

    MAX: ClassVar[int] = (1 << 31) - 1

    ZERO: ClassVar["StreamId"]

    value: int

    def __post_init__(self) -> None:
        """Validate the id fits in 31 bits."""
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueError("stream id must be int")

        if not 0 <= self.value <= self.MAX:
            raise ValueError(f"stream id out of range: {self.value}")

    def is_zero(self) -> bool:
        return self.value == 0

    def is_client_initiated(self) -> bool:
        return self.value % 2 == 1

    def is_server_initiated(self) -> bool:
        return self.value != 0 and self.value % 2 == 0

    def next_id(self) -> "StreamId":
        """
        Get the next id opened by the same side.

        Raises:
            OverflowError: If the id space is exhausted
        """
        if self.value + 2 > self.MAX:
            raise OverflowError(f"stream id {self.value} has no successor")
        return StreamId(self.value + 2)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"StreamId({self.value})"


StreamId.ZERO = StreamId(0)
