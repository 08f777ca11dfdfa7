"""Bugs API endpoints"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Request

from ..errors import BugTrackerError, NotFoundError, UnexpectedError, ValidationError
from ..models import Status, Priority
from ..storage import BugService
from ..validation import build_update_set, sanitize_input, validate_bug_data
from .schemas import (
    BugDetailResponse,
    BugListResponse,
    ErrorResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation failed or malformed bug ID"},
    404: {"model": ErrorResponse, "description": "Bug not found"},
    500: {"model": ErrorResponse, "description": "Unexpected server error"},
}


def get_bug_service(request: Request) -> BugService:
    """Bug service bound to the application's database"""
    return request.app.state.bug_service


@contextmanager
def store_call(operation: str):
    """Let taxonomy errors through; anything else the store raises becomes an UnexpectedError"""
    try:
        yield
    except BugTrackerError:
        raise
    except Exception as exc:
        logger.exception("Store failure during %s", operation)
        raise UnexpectedError() from exc


def _assignee(value: Any) -> str:
    assignee = sanitize_input(value)
    if not isinstance(assignee, str) or not assignee:
        return "Unassigned"
    return assignee


@router.get("", response_model=BugListResponse, responses={500: ERROR_RESPONSES[500]})
async def list_bugs(
    status: Optional[str] = Query(None, description="Filter by status"),
    priority: Optional[str] = Query(None, description="Filter by priority"),
    service: BugService = Depends(get_bug_service),
):
    """List bugs, newest first"""

    with store_call("list"):
        bugs = service.list_bugs(status=status, priority=priority)

    return {
        "success": True,
        "count": len(bugs),
        "data": [bug.to_dict() for bug in bugs],
    }


@router.get("/{bug_id}", response_model=BugDetailResponse, responses=ERROR_RESPONSES)
async def get_bug(bug_id: str, service: BugService = Depends(get_bug_service)):
    """Get bug by ID"""

    with store_call("get"):
        bug = service.get_bug(bug_id)
    if not bug:
        raise NotFoundError()

    return {"success": True, "data": bug.to_dict()}


@router.post("", response_model=BugDetailResponse, status_code=201, responses=ERROR_RESPONSES)
async def create_bug(
    payload: Dict[str, Any] = Body(...),
    service: BugService = Depends(get_bug_service),
):
    """Create a new bug"""

    validation = validate_bug_data(payload)
    if not validation.is_valid:
        raise ValidationError(validation.errors)

    with store_call("create"):
        bug = service.create_bug(
            title=sanitize_input(payload["title"]),
            description=sanitize_input(payload["description"]),
            reported_by=sanitize_input(payload["reportedBy"]),
            status=payload.get("status") or Status.OPEN,
            priority=payload.get("priority") or Priority.MEDIUM,
            assigned_to=_assignee(payload.get("assignedTo")),
        )

    return {"success": True, "data": bug.to_dict()}


@router.put("/{bug_id}", response_model=BugDetailResponse, responses=ERROR_RESPONSES)
async def update_bug(
    bug_id: str,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: BugService = Depends(get_bug_service),
):
    """Update the allow-listed fields of a bug"""

    with store_call("update"):
        if not service.get_bug(bug_id):
            raise NotFoundError()

        # A missing body is an empty patch
        updates = build_update_set(payload or {})
        updated_bug = service.update_bug(bug_id, updates)

    # Deleted between the lookup and the update
    if not updated_bug:
        raise NotFoundError()

    return {"success": True, "data": updated_bug.to_dict()}


@router.delete("/{bug_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def delete_bug(bug_id: str, service: BugService = Depends(get_bug_service)):
    """Delete a bug"""

    with store_call("delete"):
        if not service.get_bug(bug_id):
            raise NotFoundError()

        if not service.delete_bug(bug_id):
            raise NotFoundError()

    return {"success": True, "message": "Bug deleted successfully"}
