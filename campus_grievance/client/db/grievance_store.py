from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from campus_grievance.db.models.grievance import Grievance
from campus_grievance.service.grievance.access_policy import ListScope


class GrievanceStore:
    """Session-bound persistence port for grievances."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, grievance_id: int) -> Optional[Grievance]:
        return self.db.get(Grievance, grievance_id)

    def list(self, scope: ListScope) -> List[Grievance]:
        stmt = select(Grievance)
        if scope.submitted_by is not None:
            stmt = stmt.where(Grievance.submitted_by == scope.submitted_by)
        if scope.assigned_to is not None:
            stmt = stmt.where(Grievance.assigned_to == scope.assigned_to)
        filters = scope.filters
        if filters.status is not None:
            stmt = stmt.where(Grievance.status == filters.status.value)
        if filters.priority is not None:
            stmt = stmt.where(Grievance.priority == filters.priority.value)
        if filters.category is not None:
            stmt = stmt.where(Grievance.category == filters.category.value)
        stmt = stmt.order_by(Grievance.created_at.desc(), Grievance.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def add(self, grievance: Grievance) -> Grievance:
        self.db.add(grievance)
        # Flush so the caller sees the generated id before commit
        self.db.flush()
        return grievance

    def delete(self, grievance: Grievance) -> None:
        self.db.delete(grievance)
        self.db.flush()
