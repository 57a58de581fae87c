"""
Error classification example using c_h2_core.

This example demonstrates how a caller can decide what to do with
an Error without knowing which subsystem produced it.
"""

import errno
import logging

from c_h2_core import Error, Reason, StreamId, UserError
from c_h2_core import proto
from c_h2_core.codec import SendConnectionError, SendUserError

# Configure logging
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


def classify(error: Error) -> str:
    """Map an error to a recovery action."""
    if error.is_io():
        return "reconnect"
    if error.is_user():
        return "fail fast"
    if error.reason() == Reason.REFUSED_STREAM:
        return "retry"
    if error.is_remote():
        return "log peer fault"
    return "log and crash"


def main() -> None:
    """Build one error per origin and classify it."""
    sources = [
        proto.remote_reset(StreamId(1), Reason.REFUSED_STREAM),
        proto.remote_go_away(Reason.ENHANCE_YOUR_CALM, b"too many streams"),
        proto.library_reset(StreamId(3), Reason.PROTOCOL_ERROR),
        Reason.INTERNAL_ERROR,
        UserError.INACTIVE_STREAM_ID,
        SendUserError(UserError.PAYLOAD_TOO_BIG),
        SendConnectionError(proto.io_error(BrokenPipeError(errno.EPIPE, "Broken pipe"))),
        ConnectionResetError(errno.ECONNRESET, "Connection reset by peer"),
    ]

    for source in sources:
        error = Error.convert(source)
        logger.info(f"{error} -> {classify(error)}")


if __name__ == "__main__":
    main()
