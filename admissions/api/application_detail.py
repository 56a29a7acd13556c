"""
Application detail API - Read, review and delete a single application
"""

import logging
from fastapi import APIRouter, Depends, status

from ..core import messages
from ..core.config import settings
from ..core.errors import (
    ApplicationError,
    ApplicationNotFoundError,
    application_error_response,
    error_response,
)
from ..schemas.applications import (
    Application,
    ApplicationUpdate,
    ApplicationUpdated,
    MessageResponse,
)
from ..services.store import ApplicationStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_PREFIX}/applications", tags=["applications"])


@router.get("/{application_id}", response_model=Application)
async def get_application(
    application_id: str,
    store: ApplicationStore = Depends(get_store),
):
    """Get application by ID."""
    try:
        application = store.get(application_id)
        if application is None:
            raise ApplicationNotFoundError(application_id)
        return application
    except ApplicationError as e:
        return application_error_response(e)
    except Exception:
        logger.exception(f"Failed to load application {application_id}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.LIST_FAILED)


@router.patch("/{application_id}", response_model=ApplicationUpdated)
async def update_application(
    application_id: str,
    update_data: ApplicationUpdate,
    store: ApplicationStore = Depends(get_store),
):
    """
    Record a review decision.

    Sets the status and stamps reviewedAt. adminNotes and reviewedBy are
    applied when present and left unchanged otherwise.
    """
    try:
        application = store.update_status(application_id, update_data)
        if application is None:
            raise ApplicationNotFoundError(application_id)
    except ApplicationError as e:
        return application_error_response(e)
    except Exception:
        logger.exception(f"Failed to update application {application_id}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.UPDATE_FAILED)

    logger.info(f"Application {application_id} moved to {application.status.value}")

    return ApplicationUpdated(message=messages.APPLICATION_UPDATED, application=application)


@router.delete("/{application_id}", response_model=MessageResponse)
async def delete_application(
    application_id: str,
    store: ApplicationStore = Depends(get_store),
):
    """Delete an application."""
    try:
        if not store.delete(application_id):
            raise ApplicationNotFoundError(application_id)
    except ApplicationError as e:
        return application_error_response(e)
    except Exception:
        logger.exception(f"Failed to delete application {application_id}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.DELETE_FAILED)

    logger.info(f"Application {application_id} deleted")

    return MessageResponse(message=messages.APPLICATION_DELETED)
