from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from campus_grievance.model.grievance.grievance_enums import (
    GrievanceCategory,
    GrievancePriority,
    GrievanceStatus,
)


class _CamelRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Required fields are Optional here so that missing values reach the service
# and come back as a 400 with a readable message instead of a schema error.
class CreateGrievanceRequest(_CamelRequest):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[GrievanceCategory] = None
    priority: GrievancePriority = GrievancePriority.LOW
    location: Optional[str] = None
    is_anonymous: bool = False


class StatusChangeRequest(_CamelRequest):
    status: Optional[GrievanceStatus] = None
    remark: Optional[str] = None


class AssignRequest(_CamelRequest):
    assigned_to: Optional[str] = None


class GrievanceFilters(BaseModel):
    status: Optional[GrievanceStatus] = None
    priority: Optional[GrievancePriority] = None
    category: Optional[GrievanceCategory] = None

    def is_empty(self) -> bool:
        return self.status is None and self.priority is None and self.category is None
