"""
Custom exceptions for the shadow bridge.

Exception Hierarchy:
    BridgeError (base)
    ├── ConfigurationError - Invalid configuration values
    ├── ShadowServiceError - Device shadow unreachable or malformed
    └── EventStoreError - Record insert rejected by the event store
"""

from typing import Optional


class BridgeError(Exception):
    """
    Base exception for all bridge errors.

    Attributes:
        message: Human-readable error description
        thing_name: Optional IoT thing involved in the failure
        signal_id: Optional PLC signal involved in the failure
    """

    def __init__(
        self,
        message: str,
        thing_name: Optional[str] = None,
        signal_id: Optional[str] = None
    ):
        self.message = message
        self.thing_name = thing_name
        self.signal_id = signal_id

        details = []
        if thing_name:
            details.append(f"thing={thing_name}")
        if signal_id:
            details.append(f"signal={signal_id}")

        if details:
            full_message = f"{message} [{', '.join(details)}]"
        else:
            full_message = message

        super().__init__(full_message)


class ConfigurationError(BridgeError):
    """Raised when a configuration value is present but unusable."""
    pass


class ShadowServiceError(BridgeError):
    """
    Raised when the device shadow cannot be read or updated.

    Covers transport failures reported by botocore as well as shadow
    documents that are not valid JSON objects.
    """
    pass


class EventStoreError(BridgeError):
    """
    Raised when the event store rejects a record.

    Attributes:
        status_code: HTTP status returned by the store, if any
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        signal_id: Optional[str] = None
    ):
        self.status_code = status_code
        super().__init__(message, signal_id=signal_id)
