from typing import Optional

from fastapi import Header, HTTPException

from campus_grievance.model.actor.actor_context import ActorContext, Role


def get_actor(
    x_actor_id: Optional[str] = Header(default=None),
    x_actor_role: Optional[str] = Header(default=None),
) -> ActorContext:
    """Build the caller from identity headers set by the authenticating gateway."""
    if not x_actor_id or not x_actor_id.strip() or not x_actor_role:
        raise HTTPException(status_code=401, detail="Not authorized, no actor")
    try:
        role = Role(x_actor_role.strip().lower())
    except ValueError:
        raise HTTPException(status_code=401, detail="Unknown actor role") from None
    return ActorContext(id=x_actor_id.strip(), role=role)
