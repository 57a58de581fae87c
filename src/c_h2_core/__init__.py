"""
c_h2_core - HTTP/2 error model

A single, classifiable error type for HTTP/2 connections, unifying
stream resets, GOAWAY termination, library misuse and transport
failures.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

# Import main components for easy access
from .frame import Reason, StreamId
from .proto import Initiator, ProtoError
from .codec import SendError, SendConnectionError, SendUserError, UserError
from .error import Error

__all__ = [
    "Error",
    "Reason",
    "StreamId",
    "Initiator",
    "ProtoError",
    "UserError",
    "SendError",
    "SendUserError",
    "SendConnectionError",
]
