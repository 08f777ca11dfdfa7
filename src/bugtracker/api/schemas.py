"""Pydantic schemas for API responses"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from ..models import Status, Priority

# Bug schemas use the camelCase field names of the JSON API
class BugResponse(BaseModel):
    """Schema for a single bug"""
    id: str
    title: str
    description: str
    reportedBy: str
    status: Status
    priority: Priority
    assignedTo: Optional[str] = None
    createdAt: datetime
    updatedAt: datetime

class BugDetailResponse(BaseModel):
    """Schema for single-bug responses"""
    success: bool = True
    data: BugResponse

class BugListResponse(BaseModel):
    """Schema for bug list responses"""
    success: bool = True
    count: int
    data: List[BugResponse]

# Common response schemas
class MessageResponse(BaseModel):
    """Schema for success responses that only carry a message"""
    success: bool = True
    message: str

class ErrorResponse(BaseModel):
    """Schema for error responses"""
    success: bool = False
    error: str
    details: Optional[List[str]] = Field(None, description="Validation messages, if any")
