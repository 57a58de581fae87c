"""
Send-path error shapes for c_h2_core.

Sending a frame fails either because the caller used the API incorrectly
(``UserError``) or because the connection itself already failed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .proto import ProtoError


class UserError(Enum):
    """Errors caused by invalid use of the library by the local caller."""

    INACTIVE_STREAM_ID = "inactive stream"
    UNEXPECTED_FRAME_TYPE = "unexpected frame type"
    PAYLOAD_TOO_BIG = "payload too big"
    REJECTED = "rejected"
    RELEASE_CAPACITY_TOO_BIG = "release capacity too big"
    OVERFLOWED_STREAM_ID = "stream ID overflowed"
    MALFORMED_HEADERS = "malformed headers"
    MISSING_URI_SCHEME_AND_AUTHORITY = "request URI missing scheme and authority"
    POLL_RESET_AFTER_SEND_RESPONSE = "poll_reset after send_response is illegal"
    SEND_PING_WHILE_PENDING = "send_ping before received previous pong"
    SEND_SETTINGS_WHILE_PENDING = "sending SETTINGS before received previous ACK"
    PEER_DISABLED_SERVER_PUSH = "sending PUSH_PROMISE to peer who disabled server push"
    INVALID_INFORMATIONAL_STATUS_CODE = "invalid informational status code"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SendUserError:
    """The send was rejected because of invalid local API usage."""

    user: UserError


@dataclass(frozen=True)
class SendConnectionError:
    """The send failed because the connection reported an error."""

    error: ProtoError


SendError = Union[SendUserError, SendConnectionError]
