"""
API Dependencies - Shared collaborators for API endpoints.
"""

from horno_bridge import services
from horno_bridge.core.state import PreviousValueCache
from horno_bridge.processor import ChangeProcessor
from horno_bridge.shadow import ShadowGateway


def get_gateway() -> ShadowGateway:
    return services.get_gateway()


def get_processor() -> ChangeProcessor:
    return services.get_processor()


def get_cache() -> PreviousValueCache:
    return services.get_cache()
