"""
SQLAlchemy-backed application store
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError

from ..core.database import Database
from ..core.errors import DuplicateApplicationError
from ..db.models import ApplicationRecord
from ..schemas.applications import (
    Application,
    ApplicationCreate,
    ApplicationStatus,
    ApplicationUpdate,
)
from .store import ApplicationStore, new_application_id


class SqlAlchemyApplicationStore(ApplicationStore):
    """Each operation runs in its own transaction; failures roll back and propagate"""

    def __init__(self, database: Database):
        self.database = database

    def create(self, data: ApplicationCreate) -> Application:
        try:
            with self.database.session() as db:
                existing = db.query(ApplicationRecord).filter_by(
                    phone=data.phone,
                    generation=data.generation,
                ).first()
                if existing:
                    raise DuplicateApplicationError(data.phone, data.generation)

                record = ApplicationRecord(
                    id=new_application_id(),
                    status=ApplicationStatus.PENDING.value,
                    submitted_at=datetime.now(timezone.utc),
                    **data.model_dump(),
                )
                db.add(record)
                db.flush()
                return Application.model_validate(record)
        except IntegrityError as e:
            # Lost the race against a concurrent insert of the same pair
            raise DuplicateApplicationError(data.phone, data.generation) from e

    def get(self, application_id: str) -> Optional[Application]:
        with self.database.session() as db:
            record = db.query(ApplicationRecord).filter_by(id=application_id).first()
            return Application.model_validate(record) if record else None

    def query(
        self,
        status: Optional[ApplicationStatus] = None,
        generation: Optional[int] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> tuple[list[Application], int]:
        with self.database.session() as db:
            query = db.query(ApplicationRecord)

            if status is not None:
                query = query.filter_by(status=status.value)
            if generation is not None:
                query = query.filter_by(generation=generation)

            total = query.count()
            # Past the last row; also keeps huge offsets away from the driver's integer range
            if offset >= total:
                return [], total

            query = query.order_by(ApplicationRecord.pk.desc()).offset(offset)
            if limit is not None:
                query = query.limit(limit)

            return [Application.model_validate(record) for record in query.all()], total

    def update_status(self, application_id: str, data: ApplicationUpdate) -> Optional[Application]:
        with self.database.session() as db:
            record = db.query(ApplicationRecord).filter_by(id=application_id).first()
            if not record:
                return None

            record.status = data.status.value
            record.reviewed_at = datetime.now(timezone.utc)
            if data.admin_notes is not None:
                record.admin_notes = data.admin_notes
            if data.reviewed_by is not None:
                record.reviewer = data.reviewed_by

            db.flush()
            return Application.model_validate(record)

    def delete(self, application_id: str) -> bool:
        with self.database.session() as db:
            record = db.query(ApplicationRecord).filter_by(id=application_id).first()
            if not record:
                return False
            db.delete(record)
            return True

    def list_all(self) -> list[Application]:
        with self.database.session() as db:
            records = db.query(ApplicationRecord).order_by(ApplicationRecord.pk.desc()).all()
            return [Application.model_validate(record) for record in records]
