from enum import Enum

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    STUDENT = "student"
    FACULTY = "faculty"
    AUTHORITY = "authority"
    ADMIN = "admin"


class ActorContext(BaseModel):
    """Caller identity as resolved by the upstream authenticator."""

    model_config = ConfigDict(frozen=True)

    id: str
    role: Role
