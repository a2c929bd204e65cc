"""Connection status changes reported by persistent client connections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ConnStatusID(IntEnum):
    """Kind of connection status change."""

    CONNECTED = 1
    DISCONNECTED = 2
    CONNECTION_FAILED = 3
    BIND_FAILED = 4

    def __str__(self) -> str:
        return _STATUS_TEXT[self]


_STATUS_TEXT = {
    ConnStatusID.CONNECTED: "Connected",
    ConnStatusID.DISCONNECTED: "Disconnected",
    ConnStatusID.CONNECTION_FAILED: "Connection failed",
    ConnStatusID.BIND_FAILED: "Bind failed",
}


@dataclass(frozen=True)
class ConnStatus:
    """A connection status change and the error that caused it, if any."""

    status: ConnStatusID
    error: BaseException | None = None