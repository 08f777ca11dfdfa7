"""Bug service layer: the CRUD operations of the bug record store"""

import logging
from typing import Any, List, Mapping, Optional

from sqlalchemy import desc

from ..errors import MalformedIdError, ValidationError
from ..models import Bug, Status, Priority
from ..models.base import utcnow
from ..validation import VALID_PRIORITIES, VALID_STATUSES, validate_update_set
from .database import Database
from .id_generator import generate_bug_id, is_valid_bug_id

logger = logging.getLogger(__name__)

# API field name -> model attribute
UPDATE_COLUMNS = {
    "title": "title",
    "description": "description",
    "status": "status",
    "priority": "priority",
    "assignedTo": "assigned_to",
}


def _require_bug_id(bug_id: str):
    if not is_valid_bug_id(bug_id):
        raise MalformedIdError()


class BugService:
    """Service class for bug operations"""

    def __init__(self, database: Database):
        self.database = database

    def create_bug(
        self,
        title: str,
        description: str,
        reported_by: str,
        status: Status = Status.OPEN,
        priority: Priority = Priority.MEDIUM,
        assigned_to: Optional[str] = "Unassigned",
    ) -> Bug:
        """Create a new bug"""

        with self.database.session() as session:
            bug = Bug(
                id=generate_bug_id(),
                title=title,
                description=description,
                reported_by=reported_by,
                status=Status(status),
                priority=Priority(priority),
                assigned_to=assigned_to,
            )

            session.add(bug)
            session.commit()
            session.refresh(bug)
            # Make bug accessible outside session
            session.expunge(bug)

        logger.info("Created bug %s (%s)", bug.id, bug.title)
        return bug

    def get_bug(self, bug_id: str) -> Optional[Bug]:
        """Get bug by ID; None if no such bug exists"""
        _require_bug_id(bug_id)

        with self.database.session() as session:
            bug = session.get(Bug, bug_id)
            if bug:
                session.expunge(bug)
            return bug

    def list_bugs(
        self,
        status: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> List[Bug]:
        """List bugs newest first, optionally filtered by exact status/priority"""

        # A value outside the enum can never match a stored bug
        if status and status not in VALID_STATUSES:
            return []
        if priority and priority not in VALID_PRIORITIES:
            return []

        with self.database.session() as session:
            query = session.query(Bug)

            if status:
                query = query.filter(Bug.status == Status(status))
            if priority:
                query = query.filter(Bug.priority == Priority(priority))

            bugs = query.order_by(desc(Bug.created_at), desc(Bug.id)).all()

            # Expunge bugs to make them accessible outside session
            for bug in bugs:
                session.expunge(bug)

            return bugs

    def update_bug(self, bug_id: str, updates: Mapping[str, Any]) -> Optional[Bug]:
        """Apply an allow-listed patch to a bug.

        The patch is re-validated here so an invalid status or priority can
        never reach the database, whichever caller built it.
        """
        _require_bug_id(bug_id)

        unknown = set(updates) - set(UPDATE_COLUMNS)
        if unknown:
            raise ValueError(f"Fields not updatable: {', '.join(sorted(unknown))}")

        errors = validate_update_set(updates)
        if errors:
            raise ValidationError(errors)

        with self.database.session() as session:
            bug = session.get(Bug, bug_id)
            if not bug:
                return None

            for field, value in updates.items():
                if field == "status":
                    value = Status(value)
                elif field == "priority":
                    value = Priority(value)
                setattr(bug, UPDATE_COLUMNS[field], value)

            bug.updated_at = utcnow()

            session.commit()
            session.refresh(bug)
            session.expunge(bug)

        logger.info("Updated bug %s (%s)", bug_id, ", ".join(updates) or "no changes")
        return bug

    def delete_bug(self, bug_id: str) -> bool:
        """Delete a bug; False if it did not exist"""
        _require_bug_id(bug_id)

        with self.database.session() as session:
            bug = session.get(Bug, bug_id)
            if not bug:
                return False

            session.delete(bug)

        logger.info("Deleted bug %s", bug_id)
        return True

