"""
Shadow API - read the merged shadow state and patch desired attributes.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from horno_bridge import constants as CONSTANTS
from horno_bridge.api.dependencies import get_gateway
from horno_bridge.core.models import ShadowAttributeUpdate
from horno_bridge.shadow import ShadowGateway

router = APIRouter()


@router.get(CONSTANTS.ROUTE_SHADOW, tags=["Shadow"])
def read_shadow(gateway: ShadowGateway = Depends(get_gateway)) -> Dict[str, Any]:
    """
    Current shadow state.

    Reported attributes merged with desired ones; desired wins on collisions.
    """
    return gateway.read_shadow()


@router.post(CONSTANTS.ROUTE_SHADOW, tags=["Shadow"])
def write_shadow_attribute(
    update: ShadowAttributeUpdate,
    gateway: ShadowGateway = Depends(get_gateway)
) -> Dict[str, bool]:
    """Request a new desired value for one attribute. Does not wait for the device."""
    gateway.write_shadow_attribute(update.attribute, update.value)
    return {"ok": True}
