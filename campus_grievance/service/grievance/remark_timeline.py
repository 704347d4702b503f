from campus_grievance.db.models.grievance import Grievance
from campus_grievance.db.models.remark import GrievanceRemark
from campus_grievance.model.actor.actor_context import ActorContext
from campus_grievance.service.grievance.errors import GrievanceValidationError


def append_remark(grievance: Grievance, text: str, actor: ActorContext) -> GrievanceRemark:
    # Existing entries are never touched; the new row is inserted on flush.
    if text is None or not text.strip():
        raise GrievanceValidationError("Remark text is required")
    entry = GrievanceRemark(text=text, added_by=actor.id)
    grievance.remarks.append(entry)
    return entry
