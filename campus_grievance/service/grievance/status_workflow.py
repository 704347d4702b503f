from __future__ import annotations

from typing import Iterable, Optional

from campus_grievance.model.grievance.grievance_enums import GrievanceStatus
from campus_grievance.service.grievance.errors import (
    GrievanceValidationError,
    TransitionNotAllowedError,
)

INITIAL_STATUS = GrievanceStatus.SUBMITTED


class StatusWorkflow:
    """
    State machine over the five grievance statuses.

    By default every status may move to every status, backwards and onto
    itself included. ``locked_statuses`` names states that may not be left
    once reached; staying in a locked state with a fresh remark is still
    permitted.
    """

    def __init__(self, locked_statuses: Iterable[GrievanceStatus | str] = ()):
        self.locked_statuses = frozenset(GrievanceStatus(s) for s in locked_statuses)

    def validate(
        self,
        current: GrievanceStatus | str,
        requested: Optional[GrievanceStatus | str],
        remark: Optional[str],
    ) -> GrievanceStatus:
        """Return the target status, or raise if the change may not happen."""
        if requested is None or remark is None or not remark.strip():
            raise GrievanceValidationError("Status and remark are required")
        try:
            target = GrievanceStatus(requested)
        except ValueError:
            raise GrievanceValidationError("Invalid status value") from None
        source = GrievanceStatus(current)
        if not self.can_transition(source, target):
            raise TransitionNotAllowedError(
                f"Cannot move a grievance out of {source.value} status"
            )
        return target

    def can_transition(self, source: GrievanceStatus, target: GrievanceStatus) -> bool:
        if source in self.locked_statuses:
            return source == target
        return True
