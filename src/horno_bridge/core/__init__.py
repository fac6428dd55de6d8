"""
Core types for the shadow bridge.

Modules:
    signals: PLC signal catalogue and the OFF/ON level enum
    state: PreviousValueCache injected into each processing pass
    models: Reading and event records written to the event log
    exceptions: Error hierarchy shared by the gateway, store and handler
"""

from .exceptions import BridgeError, ConfigurationError, ShadowServiceError, EventStoreError
from .models import EventRecord, ReadingRecord, Record, ShadowAttributeUpdate
from .signals import MONITORED_SIGNALS, Signal, SignalCategory, SignalLevel
from .state import PreviousValueCache

__all__ = [
    # Exceptions
    "BridgeError",
    "ConfigurationError",
    "ShadowServiceError",
    "EventStoreError",
    # Records
    "EventRecord",
    "ReadingRecord",
    "Record",
    "ShadowAttributeUpdate",
    # Signals
    "MONITORED_SIGNALS",
    "Signal",
    "SignalCategory",
    "SignalLevel",
    # State
    "PreviousValueCache",
]
