from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from campus_grievance.api.deps import get_actor
from campus_grievance.model.actor.actor_context import ActorContext
from campus_grievance.model.grievance.grievance_enums import (
    GrievanceCategory,
    GrievancePriority,
    GrievanceStatus,
)
from campus_grievance.model.grievance.grievance_request import (
    AssignRequest,
    CreateGrievanceRequest,
    GrievanceFilters,
    StatusChangeRequest,
)
from campus_grievance.model.grievance.grievance_response import (
    GrievanceMutationResponse,
    GrievanceRecord,
    MessageResponse,
)
from campus_grievance.service.grievance.errors import GrievanceError
from campus_grievance.service.grievance.grievance import grievance_service

api_router = APIRouter(prefix="/grievances", tags=["grievances"])


def _http_error(exc: GrievanceError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)


@api_router.post("", response_model=GrievanceMutationResponse, status_code=status.HTTP_201_CREATED)
def create_grievance(req: CreateGrievanceRequest, actor: ActorContext = Depends(get_actor)):
    try:
        record = grievance_service.create(actor, req)
    except GrievanceError as exc:
        raise _http_error(exc) from exc
    return GrievanceMutationResponse(
        message=f"Grievance submitted successfully. Your Grievance ID is {record.id}",
        grievance=record,
    )


@api_router.get("/my", response_model=List[GrievanceRecord])
def my_grievances(actor: ActorContext = Depends(get_actor)):
    try:
        return grievance_service.list_mine(actor)
    except GrievanceError as exc:
        raise _http_error(exc) from exc


@api_router.get("", response_model=List[GrievanceRecord])
def list_grievances(
    status: Optional[GrievanceStatus] = None,
    priority: Optional[GrievancePriority] = None,
    category: Optional[GrievanceCategory] = None,
    actor: ActorContext = Depends(get_actor),
):
    filters = GrievanceFilters(status=status, priority=priority, category=category)
    try:
        return grievance_service.list_all(actor, filters)
    except GrievanceError as exc:
        raise _http_error(exc) from exc


@api_router.get("/{grievance_id}", response_model=GrievanceRecord)
def get_grievance(grievance_id: int, actor: ActorContext = Depends(get_actor)):
    try:
        return grievance_service.get_by_id(actor, grievance_id)
    except GrievanceError as exc:
        raise _http_error(exc) from exc


@api_router.patch("/{grievance_id}/status", response_model=GrievanceMutationResponse)
def update_status(grievance_id: int, req: StatusChangeRequest, actor: ActorContext = Depends(get_actor)):
    try:
        record = grievance_service.change_status(actor, grievance_id, req)
    except GrievanceError as exc:
        raise _http_error(exc) from exc
    return GrievanceMutationResponse(message="Status updated successfully", grievance=record)


@api_router.patch("/{grievance_id}/assign", response_model=GrievanceMutationResponse)
def assign_grievance(grievance_id: int, req: AssignRequest, actor: ActorContext = Depends(get_actor)):
    try:
        record = grievance_service.assign(actor, grievance_id, req)
    except GrievanceError as exc:
        raise _http_error(exc) from exc
    return GrievanceMutationResponse(message="Assignment updated successfully", grievance=record)


@api_router.delete("/{grievance_id}", response_model=MessageResponse)
def delete_grievance(grievance_id: int, actor: ActorContext = Depends(get_actor)):
    try:
        grievance_service.delete(actor, grievance_id)
    except GrievanceError as exc:
        raise _http_error(exc) from exc
    return MessageResponse(message="Grievance deleted successfully")
