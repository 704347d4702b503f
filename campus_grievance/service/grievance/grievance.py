from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.orm.exc import StaleDataError

import campus_grievance.config.config as configs
from campus_grievance.client.db.grievance_store import GrievanceStore
from campus_grievance.client.db.psql import session_scope
from campus_grievance.db.models.grievance import Grievance
from campus_grievance.model.actor.actor_context import ActorContext
from campus_grievance.model.grievance.grievance_enums import GrievancePriority, GrievanceStatus
from campus_grievance.model.grievance.grievance_request import (
    AssignRequest,
    CreateGrievanceRequest,
    GrievanceFilters,
    StatusChangeRequest,
)
from campus_grievance.model.grievance.grievance_response import GrievanceRecord
from campus_grievance.service.grievance import assignment
from campus_grievance.service.grievance.access_policy import Operation, authorize, list_scope, require_role
from campus_grievance.service.grievance.errors import (
    GrievanceAuthorizationError,
    GrievanceConflictError,
    GrievanceError,
    GrievanceNotFoundError,
    GrievancePersistenceError,
    GrievanceValidationError,
)
from campus_grievance.service.grievance.remark_timeline import append_remark
from campus_grievance.service.grievance.status_workflow import INITIAL_STATUS, StatusWorkflow

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _workflow_from_config() -> StatusWorkflow:
    try:
        return StatusWorkflow(configs.GRIEVANCE_LOCKED_STATUSES)
    except ValueError as exc:
        allowed = ", ".join(s.value for s in GrievanceStatus)
        raise ValueError(
            f"GRIEVANCE_LOCKED_STATUSES={configs.GRIEVANCE_LOCKED_STATUSES!r} is invalid, expected any of: {allowed}"
        ) from exc


class GrievanceService:
    def __init__(
        self,
        workflow: Optional[StatusWorkflow] = None,
        session_factory: Optional[sessionmaker] = None,
        verify_assignee: Optional[bool] = None,
    ):
        self.workflow = workflow or _workflow_from_config()
        self.session_factory = session_factory
        self.verify_assignee = configs.GRIEVANCE_VERIFY_ASSIGNEE if verify_assignee is None else verify_assignee

    @contextmanager
    def _store(self) -> Iterator[GrievanceStore]:
        try:
            with session_scope(self.session_factory) as db:
                yield GrievanceStore(db)
        except GrievanceError:
            raise
        except StaleDataError as exc:
            raise GrievanceConflictError("Grievance was modified concurrently, retry the request") from exc
        except SQLAlchemyError as exc:
            logger.exception("grievance store failure")
            raise GrievancePersistenceError() from exc

    def _load(self, store: GrievanceStore, grievance_id: int) -> Grievance:
        grievance = store.get(grievance_id)
        if grievance is None:
            raise GrievanceNotFoundError()
        return grievance

    @staticmethod
    def _snapshot(db: Session, grievance: Grievance) -> GrievanceRecord:
        # Re-read so a mutation returns exactly what a later read would
        db.flush()
        db.refresh(grievance)
        return GrievanceRecord.model_validate(grievance)

    def create(self, actor: ActorContext, req: CreateGrievanceRequest) -> GrievanceRecord:
        try:
            authorize(actor, Operation.CREATE)
        except GrievanceAuthorizationError:
            logger.warning("grievance create denied actor=%s role=%s", actor.id, actor.role.value)
            raise
        if _is_blank(req.title) or _is_blank(req.description) or req.category is None:
            raise GrievanceValidationError("Title, description and category are required")

        now = _utcnow()
        with self._store() as store:
            grievance = Grievance(
                title=req.title,
                description=req.description,
                category=req.category.value,
                priority=(req.priority or GrievancePriority.LOW).value,
                location=req.location,
                is_anonymous=bool(req.is_anonymous),
                submitted_by=actor.id,
                assigned_to=None,
                status=INITIAL_STATUS.value,
                created_at=now,
                updated_at=now,
            )
            store.add(grievance)
            record = self._snapshot(store.db, grievance)
        logger.info("grievance created id=%s by=%s category=%s", record.id, actor.id, record.category.value)
        return record

    def list_for_actor(self, actor: ActorContext, filters: Optional[GrievanceFilters] = None) -> List[GrievanceRecord]:
        scope = list_scope(actor, filters)
        with self._store() as store:
            return [GrievanceRecord.model_validate(g) for g in store.list(scope)]

    def list_all(self, actor: ActorContext, filters: Optional[GrievanceFilters] = None) -> List[GrievanceRecord]:
        authorize(actor, Operation.LIST_ALL)
        return self.list_for_actor(actor, filters)

    def list_mine(self, actor: ActorContext) -> List[GrievanceRecord]:
        authorize(actor, Operation.LIST_MINE)
        return self.list_for_actor(actor)

    def get_by_id(self, actor: ActorContext, grievance_id: int) -> GrievanceRecord:
        with self._store() as store:
            grievance = self._load(store, grievance_id)
            authorize(actor, Operation.READ, grievance)
            return GrievanceRecord.model_validate(grievance)

    def change_status(self, actor: ActorContext, grievance_id: int, req: StatusChangeRequest) -> GrievanceRecord:
        try:
            require_role(actor, Operation.CHANGE_STATUS)
        except GrievanceAuthorizationError:
            logger.warning("grievance status change denied id=%s actor=%s role=%s", grievance_id, actor.id, actor.role.value)
            raise
        if req.status is None or _is_blank(req.remark):
            raise GrievanceValidationError("Status and remark are required")
        with self._store() as store:
            grievance = self._load(store, grievance_id)
            try:
                authorize(actor, Operation.CHANGE_STATUS, grievance)
            except GrievanceAuthorizationError:
                logger.warning("grievance status change denied id=%s actor=%s", grievance_id, actor.id)
                raise
            previous = grievance.status
            target = self.workflow.validate(previous, req.status, req.remark)
            grievance.status = target.value
            append_remark(grievance, req.remark, actor)
            grievance.updated_at = _utcnow()
            record = self._snapshot(store.db, grievance)
        logger.info("grievance status changed id=%s from=%s to=%s by=%s", grievance_id, previous, target.value, actor.id)
        return record

    def assign(self, actor: ActorContext, grievance_id: int, req: AssignRequest) -> GrievanceRecord:
        require_role(actor, Operation.ASSIGN)
        with self._store() as store:
            grievance = self._load(store, grievance_id)
            assignment.assign(store.db, grievance, req.assigned_to, actor, verify_assignee=self.verify_assignee)
            return self._snapshot(store.db, grievance)

    def delete(self, actor: ActorContext, grievance_id: int) -> None:
        require_role(actor, Operation.DELETE)
        with self._store() as store:
            grievance = self._load(store, grievance_id)
            authorize(actor, Operation.DELETE, grievance)
            store.delete(grievance)
        logger.info("grievance deleted id=%s by=%s", grievance_id, actor.id)


grievance_service = GrievanceService()
