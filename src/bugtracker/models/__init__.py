"""Bug tracker models package"""

from .base import Base, Status, Priority
from .bug import Bug

__all__ = [
    "Base",
    "Status",
    "Priority",
    "Bug",
]
