import pytest

from campus_grievance.model.actor.actor_context import ActorContext, Role
from campus_grievance.model.grievance.grievance_enums import GrievanceStatus
from campus_grievance.model.grievance.grievance_request import GrievanceFilters
from campus_grievance.service.grievance.access_policy import (
    Operation,
    Rule,
    authorize,
    is_allowed,
    list_scope,
    require_role,
    rule_for,
)
from campus_grievance.service.grievance.errors import GrievanceAuthorizationError


class _StubRecord:
    def __init__(self, submitted_by: str, assigned_to=None):
        self.submitted_by = submitted_by
        self.assigned_to = assigned_to


def _actor(role: Role, actor_id: str = "U1") -> ActorContext:
    return ActorContext(id=actor_id, role=role)


@pytest.mark.parametrize("role", [Role.STUDENT, Role.FACULTY])
def test_submitters_may_create(role):
    authorize(_actor(role), Operation.CREATE)


@pytest.mark.parametrize("role", [Role.AUTHORITY, Role.ADMIN])
def test_non_submitters_may_not_create(role):
    with pytest.raises(GrievanceAuthorizationError):
        authorize(_actor(role), Operation.CREATE)


def test_visibility_partition():
    record = _StubRecord(submitted_by="S1", assigned_to="A1")

    assert is_allowed(_actor(Role.STUDENT, "S1"), Operation.READ, record)
    assert not is_allowed(_actor(Role.STUDENT, "S2"), Operation.READ, record)
    assert not is_allowed(_actor(Role.FACULTY, "F1"), Operation.READ, record)
    assert is_allowed(_actor(Role.AUTHORITY, "A1"), Operation.READ, record)
    assert not is_allowed(_actor(Role.AUTHORITY, "A2"), Operation.READ, record)
    assert is_allowed(_actor(Role.ADMIN, "X"), Operation.READ, record)


def test_authority_cannot_see_unassigned_record():
    record = _StubRecord(submitted_by="S1", assigned_to=None)
    assert not is_allowed(_actor(Role.AUTHORITY, "A1"), Operation.READ, record)


def test_submitter_that_is_not_owner_gets_access_denied_message():
    record = _StubRecord(submitted_by="S1")
    with pytest.raises(GrievanceAuthorizationError) as exc_info:
        authorize(_actor(Role.STUDENT, "S2"), Operation.READ, record)
    assert exc_info.value.message == "Access denied"


def test_unassigned_authority_message_mentions_assignment():
    record = _StubRecord(submitted_by="S1", assigned_to="A2")
    with pytest.raises(GrievanceAuthorizationError) as exc_info:
        authorize(_actor(Role.AUTHORITY, "A1"), Operation.CHANGE_STATUS, record)
    assert "not assigned to you" in exc_info.value.message


def test_status_change_rules():
    record = _StubRecord(submitted_by="S1", assigned_to="A1")
    assert is_allowed(_actor(Role.AUTHORITY, "A1"), Operation.CHANGE_STATUS, record)
    assert is_allowed(_actor(Role.ADMIN), Operation.CHANGE_STATUS, record)
    assert not is_allowed(_actor(Role.STUDENT, "S1"), Operation.CHANGE_STATUS, record)
    assert not is_allowed(_actor(Role.FACULTY, "S1"), Operation.CHANGE_STATUS, record)


@pytest.mark.parametrize("operation", [Operation.ASSIGN, Operation.DELETE])
def test_admin_only_operations(operation):
    record = _StubRecord(submitted_by="S1", assigned_to="A1")
    assert is_allowed(_actor(Role.ADMIN), operation, record)
    for role, actor_id in [(Role.STUDENT, "S1"), (Role.FACULTY, "S1"), (Role.AUTHORITY, "A1")]:
        assert not is_allowed(_actor(role, actor_id), operation, record)


def test_unlisted_combination_is_denied():
    assert rule_for(_actor(Role.STUDENT), Operation.DELETE) is Rule.DENY
    assert rule_for(_actor(Role.ADMIN), Operation.LIST_MINE) is Rule.DENY


def test_list_all_requires_authority_or_admin():
    assert is_allowed(_actor(Role.ADMIN), Operation.LIST_ALL)
    assert is_allowed(_actor(Role.AUTHORITY), Operation.LIST_ALL)
    assert not is_allowed(_actor(Role.STUDENT), Operation.LIST_ALL)


def test_list_scope_per_role():
    filters = GrievanceFilters(status=GrievanceStatus.RESOLVED)

    admin_scope = list_scope(_actor(Role.ADMIN), filters)
    assert admin_scope.submitted_by is None
    assert admin_scope.assigned_to is None
    assert admin_scope.filters.status is GrievanceStatus.RESOLVED

    authority_scope = list_scope(_actor(Role.AUTHORITY, "A1"), filters)
    assert authority_scope.assigned_to == "A1"
    assert authority_scope.filters.is_empty()

    student_scope = list_scope(_actor(Role.STUDENT, "S1"), filters)
    assert student_scope.submitted_by == "S1"
    assert student_scope.filters.is_empty()


def test_require_role_only_rejects_disqualified_roles():
    require_role(_actor(Role.AUTHORITY), Operation.CHANGE_STATUS)
    require_role(_actor(Role.ADMIN), Operation.ASSIGN)
    for role, operation in [
        (Role.STUDENT, Operation.ASSIGN),
        (Role.STUDENT, Operation.CHANGE_STATUS),
        (Role.FACULTY, Operation.DELETE),
        (Role.AUTHORITY, Operation.DELETE),
    ]:
        with pytest.raises(GrievanceAuthorizationError, match="Access denied"):
            require_role(_actor(role), operation)
