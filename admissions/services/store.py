"""
Application storage - store interface and in-memory implementation
"""
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request

from ..core.errors import DuplicateApplicationError
from ..schemas.applications import (
    Application,
    ApplicationCreate,
    ApplicationStatus,
    ApplicationUpdate,
)


def new_application_id() -> str:
    return f"app_{uuid.uuid4().hex[:12]}"


class ApplicationStore(ABC):
    """
    Storage contract for applications.

    Implementations own the (phone, generation) uniqueness check so that the
    check and the insert happen atomically. Returned records are detached
    copies; mutating them never changes stored state.
    """

    @abstractmethod
    def create(self, data: ApplicationCreate) -> Application:
        """
        Store a new PENDING application.

        Raises:
            DuplicateApplicationError: phone already applied to the generation
        """

    @abstractmethod
    def get(self, application_id: str) -> Optional[Application]:
        """Return the application, or None when absent"""

    @abstractmethod
    def query(
        self,
        status: Optional[ApplicationStatus] = None,
        generation: Optional[int] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> tuple[list[Application], int]:
        """
        Filter newest-first by status then generation, and slice.

        Returns:
            (page of applications, total matching count)
        """

    @abstractmethod
    def update_status(self, application_id: str, data: ApplicationUpdate) -> Optional[Application]:
        """Apply a review decision; None when the application is absent"""

    @abstractmethod
    def delete(self, application_id: str) -> bool:
        """Remove the application; False when it was absent"""

    @abstractmethod
    def list_all(self) -> list[Application]:
        """All applications, newest first"""


class InMemoryApplicationStore(ApplicationStore):
    """Process-local store; all access is serialized by a lock"""

    def __init__(self, applications: Optional[list[Application]] = None):
        self._lock = threading.RLock()
        # Newest first
        self._applications: list[Application] = list(applications or [])

    def create(self, data: ApplicationCreate) -> Application:
        with self._lock:
            for existing in self._applications:
                if existing.phone == data.phone and existing.generation == data.generation:
                    raise DuplicateApplicationError(data.phone, data.generation)

            application = Application(
                id=new_application_id(),
                status=ApplicationStatus.PENDING,
                submitted_at=datetime.now(timezone.utc),
                **data.model_dump(),
            )
            self._applications.insert(0, application)
            return application.model_copy(deep=True)

    def get(self, application_id: str) -> Optional[Application]:
        with self._lock:
            application = self._find(application_id)
            return application.model_copy(deep=True) if application else None

    def query(
        self,
        status: Optional[ApplicationStatus] = None,
        generation: Optional[int] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> tuple[list[Application], int]:
        with self._lock:
            matches = self._applications
            if status is not None:
                matches = [app for app in matches if app.status == status]
            if generation is not None:
                matches = [app for app in matches if app.generation == generation]

            end = None if limit is None else offset + limit
            page = [app.model_copy(deep=True) for app in matches[offset:end]]
            return page, len(matches)

    def update_status(self, application_id: str, data: ApplicationUpdate) -> Optional[Application]:
        with self._lock:
            application = self._find(application_id)
            if application is None:
                return None

            application.status = data.status
            application.reviewed_at = datetime.now(timezone.utc)
            if data.admin_notes is not None:
                application.admin_notes = data.admin_notes
            if data.reviewed_by is not None:
                application.reviewer = data.reviewed_by
            return application.model_copy(deep=True)

    def delete(self, application_id: str) -> bool:
        with self._lock:
            application = self._find(application_id)
            if application is None:
                return False
            self._applications.remove(application)
            return True

    def list_all(self) -> list[Application]:
        with self._lock:
            return [app.model_copy(deep=True) for app in self._applications]

    def _find(self, application_id: str) -> Optional[Application]:
        for application in self._applications:
            if application.id == application_id:
                return application
        return None


def sample_applications() -> list[Application]:
    """Two demo applications for the second generation"""
    now = datetime.now(timezone.utc)
    return [
        Application(
            id="1",
            name="김민수",
            phone="010-1234-5678",
            generation=2,
            status=ApplicationStatus.APPROVED,
            company_position="(주)테크스타트업 / 마케팅팀장",
            interests=["경제, 경영, 산업 전반"],
            golf="Yes",
            tax_invoice="발행",
            submitted_at=now,
        ),
        Application(
            id="2",
            name="이지영",
            phone="010-2345-6789",
            generation=2,
            status=ApplicationStatus.REVIEWING,
            company_position="(주)IT기업 / 프로덕트 매니저",
            interests=["미래기술 (AI, 챗GPT)", "경제, 경영, 산업 전반"],
            golf="No",
            tax_invoice="미발행",
            submitted_at=now - timedelta(days=1),
        ),
    ]


def get_store(request: Request) -> ApplicationStore:
    """FastAPI dependency for the application store"""
    return request.app.state.store
