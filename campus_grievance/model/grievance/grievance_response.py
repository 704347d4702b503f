from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from campus_grievance.model.grievance.grievance_enums import (
    GrievanceCategory,
    GrievancePriority,
    GrievanceStatus,
)


class RemarkEntry(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    text: str = Field(alias="remark")
    added_by: str
    created_at: datetime


class GrievanceRecord(BaseModel):
    """Detached snapshot of a grievance and its remark timeline."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    title: str
    description: str
    category: GrievanceCategory
    priority: GrievancePriority
    location: Optional[str] = None
    is_anonymous: bool = False
    submitted_by: str
    assigned_to: Optional[str] = None
    status: GrievanceStatus
    remarks: List[RemarkEntry] = []
    created_at: datetime
    updated_at: datetime


class GrievanceMutationResponse(BaseModel):
    message: str
    grievance: GrievanceRecord


class MessageResponse(BaseModel):
    message: str
