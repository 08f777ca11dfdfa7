"""Bug record storage"""

from .database import Database
from .bug_service import BugService

__all__ = ["Database", "BugService"]
