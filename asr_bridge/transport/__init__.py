from .heartbeat import Heartbeat
from .reconnect import ReconnectPolicy
from .connection import ConnectionTransport
from .auth import mask_credential, build_auth_headers

__all__ = [
    "ConnectionTransport",
    "Heartbeat",
    "ReconnectPolicy",
    "build_auth_headers",
    "mask_credential",
]
