from sqlalchemy import Column, String, Integer, DateTime, JSON, Text, Index, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class ApplicationRecord(Base):
    """Admission applications to a program generation"""

    __tablename__ = "applications"

    # Surrogate key keeps insertion order for newest-first listing
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, nullable=False, unique=True)

    # Applicant
    name = Column(String(50), nullable=False)
    phone = Column(String(13), nullable=False)
    birth_date = Column(String, nullable=True)
    gender = Column(String, nullable=True)
    company_position = Column(String(200), nullable=False)
    address = Column(String(300), nullable=True)
    interests = Column(JSON, nullable=False)
    golf = Column(String, nullable=False)
    referrer = Column(String(100), nullable=True)
    tax_invoice = Column(String, nullable=False)
    generation = Column(Integer, nullable=False, index=True)

    # Review
    status = Column(String, nullable=False, default="PENDING", index=True)  # PENDING, REVIEWING, APPROVED, REJECTED, WAITLIST
    admin_notes = Column(Text, nullable=True)
    reviewer = Column(String, nullable=True)

    # Timestamps (UTC)
    submitted_at = Column(DateTime(timezone=True), nullable=False, index=True)
    reviewed_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        UniqueConstraint("phone", "generation", name="uq_applications_phone_generation"),
        Index("ix_applications_status_generation", "status", "generation"),
    )

    def __repr__(self) -> str:
        return f"<ApplicationRecord(id={self.id}, name={self.name}, status={self.status})>"
