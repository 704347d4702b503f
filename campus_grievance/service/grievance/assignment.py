from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from campus_grievance.db.models.grievance import Grievance
from campus_grievance.db.models.user import User
from campus_grievance.model.actor.actor_context import ActorContext, Role
from campus_grievance.service.grievance.access_policy import Operation, authorize
from campus_grievance.service.grievance.errors import GrievanceValidationError

logger = logging.getLogger(__name__)


def _normalize_target(target: Optional[str]) -> Optional[str]:
    if target is None:
        return None
    target = target.strip()
    return target or None


def ensure_authority_user(db: Session, user_id: str) -> None:
    existing = db.execute(select(User).where(User.user_id == user_id)).scalar_one_or_none()
    if existing is None or existing.role != Role.AUTHORITY.value:
        raise GrievanceValidationError("Assignee must be an existing authority user")


def assign(
    db: Session,
    grievance: Grievance,
    target: Optional[str],
    actor: ActorContext,
    verify_assignee: bool = False,
) -> Grievance:
    """Set or clear the assignee. No remark is recorded for assignment changes."""
    authorize(actor, Operation.ASSIGN, grievance)
    target = _normalize_target(target)
    if target is not None and verify_assignee:
        ensure_authority_user(db, target)
    previous = grievance.assigned_to
    grievance.assigned_to = target
    grievance.updated_at = datetime.now(timezone.utc)
    logger.info("grievance assigned id=%s from=%s to=%s by=%s", grievance.id, previous, target, actor.id)
    return grievance
