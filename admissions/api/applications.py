"""
Applications API - Submit and list cohort applications
"""

import logging
import math
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from ..core import messages
from ..core.config import settings
from ..core.errors import ApplicationError, application_error_response, error_response
from ..schemas.applications import (
    ApplicationCreate,
    ApplicationCreated,
    ApplicationList,
    ApplicationStatus,
    ApplicationSummary,
    Pagination,
    STATUS_FILTER_ALL,
    StatusFilter,
)
from ..services.store import ApplicationStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_PREFIX}/applications", tags=["applications"])


def _parse_int(value: Optional[str]) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None


def resolve_page(page: Optional[str], limit: Optional[str]) -> tuple[int, int]:
    """
    Normalize pagination query values.

    Non-integer input falls back to the defaults; page is floored at 1 and
    limit is clamped to [1, MAX_PAGE_SIZE].
    """
    page_number = _parse_int(page)
    page_size = _parse_int(limit)

    if page_number is None:
        page_number = 1
    if page_size is None:
        page_size = settings.DEFAULT_PAGE_SIZE

    return max(1, page_number), min(settings.MAX_PAGE_SIZE, max(1, page_size))


@router.get("", response_model=ApplicationList)
async def list_applications(
    status_filter: Optional[StatusFilter] = Query(None, alias="status"),
    generation: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: ApplicationStore = Depends(get_store),
):
    """
    List applications, newest first.

    Optional filtering by status (or ALL) and generation (or all).
    Paginated with page/limit.
    """
    try:
        page_number, page_size = resolve_page(page, limit)

        status_value = None
        if status_filter and status_filter != STATUS_FILTER_ALL:
            status_value = ApplicationStatus(status_filter)

        # "all" and any non-integer value mean no generation filter
        generation_value = _parse_int(generation)

        applications, total = store.query(
            status=status_value,
            generation=generation_value,
            offset=(page_number - 1) * page_size,
            limit=page_size,
        )

        return ApplicationList(
            applications=applications,
            pagination=Pagination(
                page=page_number,
                limit=page_size,
                total=total,
                total_pages=math.ceil(total / page_size),
            ),
        )
    except Exception:
        logger.exception("Failed to list applications")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.LIST_FAILED)


@router.post("", response_model=ApplicationCreated, status_code=status.HTTP_201_CREATED)
async def create_application(
    application_data: ApplicationCreate,
    store: ApplicationStore = Depends(get_store),
):
    """
    Submit a new application.

    The application starts as PENDING. A phone number may apply to each
    generation only once.
    """
    try:
        application = store.create(application_data)
    except ApplicationError as e:
        # Applicant phone numbers stay out of the logs
        logger.info(f"Application rejected for generation {application_data.generation}: {type(e).__name__}")
        return application_error_response(e)
    except Exception:
        logger.exception("Failed to create application")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.SUBMIT_FAILED)

    logger.info(
        f"Application submitted: {application.id} (generation {application.generation})"
    )

    return ApplicationCreated(
        message=messages.APPLICATION_SUBMITTED,
        application=ApplicationSummary(
            id=application.id,
            name=application.name,
            generation=application.generation,
            status=application.status,
        ),
    )
