from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from campus_grievance.db.session import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GrievanceRemark(Base):
    __tablename__ = "grievance_remarks"

    # Autoincrement id doubles as the insertion order of the timeline
    id = Column(Integer, primary_key=True, index=True)
    grievance_id = Column(Integer, ForeignKey("grievances.id", ondelete="CASCADE"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    added_by = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
