"""Bug model"""

from datetime import timezone

from sqlalchemy import Column, String, DateTime, Text, Enum

from .base import Base, Status, Priority, enum_values, utcnow


def _isoformat(value):
    """ISO 8601 with an explicit UTC offset; SQLite hands back naive UTC values"""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


class Bug(Base):
    """A single tracked defect"""
    
    __tablename__ = "bugs"
    
    # Primary fields
    id = Column(String(24), primary_key=True)  # 8 hex timestamp + 16 hex random
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False)
    reported_by = Column(String(200), nullable=False)
    
    # Status and priority
    status = Column(
        Enum(Status, name="bug_status", values_callable=enum_values),
        nullable=False,
        default=Status.OPEN,
    )
    priority = Column(
        Enum(Priority, name="bug_priority", values_callable=enum_values),
        nullable=False,
        default=Priority.MEDIUM,
    )
    assigned_to = Column(String(200), nullable=True, default="Unassigned")
    
    # Timestamps
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    
    def __repr__(self):
        return f"<Bug(id='{self.id}', title='{self.title[:50]}', status='{self.status.value}')>"
    
    def to_dict(self):
        """Convert to dictionary for JSON serialization"""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "reportedBy": self.reported_by,
            "status": self.status.value,
            "priority": self.priority.value,
            "assignedTo": self.assigned_to,
            "createdAt": _isoformat(self.created_at),
            "updatedAt": _isoformat(self.updated_at),
        }
