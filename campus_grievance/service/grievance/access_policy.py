"""
Who may read and write which grievance.

Every decision goes through one table keyed by ``(role, operation)``. A rule
either allows outright, denies outright, or defers to a per-record check
(ownership for submitters, assignment for authorities). Nothing here touches
storage; callers pass the freshly loaded record on every call.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

from campus_grievance.model.actor.actor_context import ActorContext, Role
from campus_grievance.model.grievance.grievance_request import GrievanceFilters
from campus_grievance.service.grievance.errors import GrievanceAuthorizationError


class Operation(str, Enum):
    CREATE = "create"
    LIST_MINE = "list_mine"
    LIST_ALL = "list_all"
    READ = "read"
    CHANGE_STATUS = "change_status"
    ASSIGN = "assign"
    DELETE = "delete"


class Rule(str, Enum):
    ALLOW = "allow"
    DENY = "deny"
    OWNER = "owner"
    ASSIGNEE = "assignee"


_SUBMITTER_RULES = {
    Operation.CREATE: Rule.ALLOW,
    Operation.LIST_MINE: Rule.ALLOW,
    Operation.READ: Rule.OWNER,
}

DECISION_TABLE: dict[Role, dict[Operation, Rule]] = {
    Role.STUDENT: dict(_SUBMITTER_RULES),
    Role.FACULTY: dict(_SUBMITTER_RULES),
    Role.AUTHORITY: {
        Operation.LIST_ALL: Rule.ASSIGNEE,
        Operation.READ: Rule.ASSIGNEE,
        Operation.CHANGE_STATUS: Rule.ASSIGNEE,
    },
    Role.ADMIN: {
        Operation.LIST_ALL: Rule.ALLOW,
        Operation.READ: Rule.ALLOW,
        Operation.CHANGE_STATUS: Rule.ALLOW,
        Operation.ASSIGN: Rule.ALLOW,
        Operation.DELETE: Rule.ALLOW,
    },
}

_DENIAL_MESSAGES = {
    Rule.OWNER: "Access denied",
    Rule.ASSIGNEE: "Access denied. This grievance is not assigned to you.",
}


class ListScope(BaseModel):
    """Row constraints a list query must apply for a given actor."""

    submitted_by: Optional[str] = None
    assigned_to: Optional[str] = None
    filters: GrievanceFilters = GrievanceFilters()


def rule_for(actor: ActorContext, operation: Operation) -> Rule:
    return DECISION_TABLE.get(actor.role, {}).get(operation, Rule.DENY)


def is_allowed(actor: ActorContext, operation: Operation, record: Any = None) -> bool:
    rule = rule_for(actor, operation)
    if rule is Rule.ALLOW:
        return True
    if rule is Rule.DENY:
        return False
    if record is None:
        # Record-level rules need a record; scope-only callers use list_scope()
        return operation in (Operation.LIST_ALL, Operation.LIST_MINE)
    if rule is Rule.OWNER:
        return record.submitted_by == actor.id
    return record.assigned_to is not None and record.assigned_to == actor.id


def authorize(actor: ActorContext, operation: Operation, record: Any = None) -> None:
    """Raise ``GrievanceAuthorizationError`` unless the actor may perform the operation."""
    if is_allowed(actor, operation, record):
        return
    rule = rule_for(actor, operation)
    raise GrievanceAuthorizationError(_DENIAL_MESSAGES.get(rule, "Access denied"))


def require_role(actor: ActorContext, operation: Operation) -> None:
    """Reject callers whose role can never perform the operation, before any lookup."""
    if rule_for(actor, operation) is Rule.DENY:
        raise GrievanceAuthorizationError("Access denied")


def list_scope(actor: ActorContext, filters: Optional[GrievanceFilters] = None) -> ListScope:
    """
    Translate an actor into the constraints of a list query.

    Admins get the requested filters applied verbatim. Authorities are pinned
    to their own assignments and submitters to their own submissions; query
    filters are ignored for both.
    """
    if actor.role is Role.ADMIN:
        return ListScope(filters=filters or GrievanceFilters())
    if actor.role is Role.AUTHORITY:
        return ListScope(assigned_to=actor.id)
    return ListScope(submitted_by=actor.id)
