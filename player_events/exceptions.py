"""Custom exceptions for Player Events with structured error codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error reporting."""

    # Generic errors
    PLAYER_EVENTS_ERROR = "PLAYER_EVENTS_ERROR"

    # Player errors
    PLAYER_CONNECTION_ERROR = "PLAYER_CONNECTION_ERROR"
    SNAPSHOT_PARSE_ERROR = "SNAPSHOT_PARSE_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class PlayerEventsException(Exception):
    """Base exception for player event errors.

    All custom exceptions should inherit from this class so consumers can
    catch everything raised by this package with a single handler.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.PLAYER_EVENTS_ERROR,
        details: dict[str, Any] | None = None,
    ):
        """Initialize player events exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class PlayerConnectionException(PlayerEventsException):
    """Reading the player's state failed.

    Player disappearance is not reported with this exception; a stream
    signals it with a ``PlayerShutDown`` event instead.
    """

    def __init__(
        self,
        message: str = "Failed to read player state",
        code: ErrorCode = ErrorCode.PLAYER_CONNECTION_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class SnapshotParseException(PlayerConnectionException):
    """Player returned properties that do not form a valid snapshot."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.SNAPSHOT_PARSE_ERROR,
            details=details,
        )


class ConfigurationException(PlayerEventsException):
    """Configuration errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.CONFIG_ERROR, details=details)
