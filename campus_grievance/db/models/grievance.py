from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from campus_grievance.db.session import Base
from campus_grievance.db.models.remark import GrievanceRemark


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Grievance(Base):
    __tablename__ = "grievances"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    # Infrastructure | Academic | Hostel | Other | IT | Mess
    category = Column(String(32), nullable=False, index=True)
    # Low | Medium | High | Urgent
    priority = Column(String(16), nullable=False, default="Low", index=True)
    location = Column(String, nullable=True)
    # Display hint only, submitted_by is always stored
    is_anonymous = Column(Boolean, nullable=False, default=False)
    submitted_by = Column(String, nullable=False, index=True)
    assigned_to = Column(String, nullable=True, index=True)
    # Submitted | Under Review | In Progress | Resolved | Closed
    status = Column(String(16), nullable=False, default="Submitted", index=True)
    # Bumped by the ORM on every UPDATE; a stale version aborts the flush
    version = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    remarks = relationship(
        GrievanceRemark,
        order_by=GrievanceRemark.id,
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    __mapper_args__ = {"version_id_col": version}
