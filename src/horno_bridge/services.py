"""
Process-wide collaborators.

Both the Lambda handler and the FastAPI dev server resolve the shadow gateway,
event store, processor and previous-value cache through these getters, so one
warm process keeps exactly one cache.
"""

from horno_bridge.config import get_settings
from horno_bridge.core.state import PreviousValueCache
from horno_bridge.event_store import EventStore
from horno_bridge.processor import ChangeProcessor
from horno_bridge.shadow import ShadowGateway

# Lazy-loaded, reused while the container stays warm
_gateway = None
_store = None
_processor = None

# Previous values survive only as long as this process
_cache = PreviousValueCache()


def get_gateway() -> ShadowGateway:
    global _gateway
    if _gateway is None:
        _gateway = ShadowGateway()
    return _gateway


def get_store() -> EventStore:
    global _store
    if _store is None:
        _store = EventStore(get_settings())
    return _store


def get_processor() -> ChangeProcessor:
    global _processor
    if _processor is None:
        _processor = ChangeProcessor(get_gateway(), get_store())
    return _processor


def get_cache() -> PreviousValueCache:
    return _cache


def set_gateway(gateway: ShadowGateway) -> None:
    """Install a specific gateway (e.g. one built around a stubbed client)."""
    global _gateway, _processor
    _gateway = gateway
    _processor = None


def set_store(store: EventStore) -> None:
    global _store, _processor
    _store = store
    _processor = None


def reset_services():
    """Drop collaborators and previous values (useful for tests)."""
    global _gateway, _store, _processor, _cache
    _gateway = None
    _store = None
    _processor = None
    _cache = PreviousValueCache()
    get_settings.cache_clear()
