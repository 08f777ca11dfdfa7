"""Base SQLAlchemy models and configuration"""

from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone
import enum

Base = declarative_base()

class Status(str, enum.Enum):
    """Bug status enumeration"""
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"

class Priority(str, enum.Enum):
    """Bug priority enumeration"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

def enum_values(enum_class):
    """Stored values for an enum column (values, not member names)"""
    return [member.value for member in enum_class]

def utcnow() -> datetime:
    return datetime.now(timezone.utc)
