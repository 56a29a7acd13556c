"""
Statistics API - Aggregate counts over all applications
"""

import logging
from fastapi import APIRouter, Depends, status

from ..core import messages
from ..core.config import settings
from ..core.errors import error_response
from ..schemas.stats import ApplicationStats
from ..services.statistics import compute_statistics
from ..services.store import ApplicationStore, get_store

logger = logging.getLogger(__name__)

# Registered before the detail router so "stats" is not taken as an ID
router = APIRouter(prefix=f"{settings.API_PREFIX}/applications", tags=["statistics"])


@router.get("/stats", response_model=ApplicationStats)
async def get_application_stats(store: ApplicationStore = Depends(get_store)):
    """
    Totals by status, generation and submission month, plus approval rate.
    """
    try:
        return compute_statistics(store.list_all())
    except Exception:
        logger.exception("Failed to compute application statistics")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.STATS_FAILED)
