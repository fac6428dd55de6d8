"""
Processing API - run one change-detection pass over the reported PLC signals.
"""

from typing import Dict

from fastapi import APIRouter, Depends

from horno_bridge import constants as CONSTANTS
from horno_bridge.api.dependencies import get_cache, get_processor
from horno_bridge.core.state import PreviousValueCache
from horno_bridge.processor import ChangeProcessor

router = APIRouter()


@router.post(CONSTANTS.ROUTE_PROCESS, tags=["Processing"])
def run_processing_pass(
    processor: ChangeProcessor = Depends(get_processor),
    cache: PreviousValueCache = Depends(get_cache)
) -> Dict[str, bool]:
    """Run one change-processing pass over the reported PLC signals."""
    processor.process(cache)
    return {"ok": True}
