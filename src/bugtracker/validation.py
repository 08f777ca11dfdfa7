"""Input sanitization and validation for bug payloads"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .models import Status, Priority

VALID_STATUSES = tuple(status.value for status in Status)
VALID_PRIORITIES = tuple(priority.value for priority in Priority)

# Fields a PUT request may change; reportedBy is fixed at creation
ALLOWED_UPDATES = ("title", "description", "status", "priority", "assignedTo")

ENUM_FIELDS = {
    "status": (VALID_STATUSES, "Invalid status value"),
    "priority": (VALID_PRIORITIES, "Invalid priority value"),
}

REQUIRED_TEXT_FIELDS = {
    "title": (3, "Title must be at least 3 characters"),
    "description": (10, "Description must be at least 10 characters"),
}

_ANGLE_BRACKETS = re.compile(r"[<>]")


@dataclass
class ValidationResult:
    """Outcome of validating a bug payload"""
    is_valid: bool
    errors: List[str] = field(default_factory=list)


def sanitize_input(value: Any) -> Any:
    """Strip angle brackets and surrounding whitespace from strings.

    Anything that is not a string (including None) is returned unchanged.
    This is character deletion only, not HTML escaping.
    """
    if not isinstance(value, str):
        return value
    return _ANGLE_BRACKETS.sub("", value).strip()


def check_enum_value(field_name: str, value: Any) -> Optional[str]:
    """Return the error message for an invalid status/priority value, else None"""
    allowed, message = ENUM_FIELDS[field_name]
    if value not in allowed:
        return message
    return None


def _text_shorter_than(value: Any, minimum: int) -> bool:
    return not isinstance(value, str) or len(value.strip()) < minimum


def validate_bug_data(data: Mapping[str, Any]) -> ValidationResult:
    """Validate a bug creation payload.

    Every rule runs and all failures are collected, in this order:
    title, description, reporter, status, priority.
    """
    errors = []

    for field_name, (minimum, message) in REQUIRED_TEXT_FIELDS.items():
        if _text_shorter_than(data.get(field_name), minimum):
            errors.append(message)

    if _text_shorter_than(data.get("reportedBy"), 1):
        errors.append("Reporter name is required")

    # Empty values fall back to defaults on create, so only non-empty ones are checked
    for field_name in ENUM_FIELDS:
        value = data.get(field_name)
        if value:
            error = check_enum_value(field_name, value)
            if error:
                errors.append(error)

    return ValidationResult(is_valid=not errors, errors=errors)


def build_update_set(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Intersect a PUT payload with the update allow-list.

    Unknown fields are dropped silently. String values are sanitized;
    other values are kept as submitted and left to the store to reject.
    """
    updates = {}
    for key in ALLOWED_UPDATES:
        if key in payload:
            updates[key] = sanitize_input(payload[key])
    return updates


def validate_update_set(updates: Mapping[str, Any]) -> List[str]:
    """Store-side checks for an update patch.

    Enum fields and the title/description length rules are the same checks
    creation runs; only assignedTo may be cleared with null.
    """
    errors = []
    for key, value in updates.items():
        if key in ENUM_FIELDS:
            error = check_enum_value(key, value)
            if error:
                errors.append(error)
        elif key == "assignedTo":
            if value is not None and not isinstance(value, str):
                errors.append("Invalid assignedTo value")
        elif key in REQUIRED_TEXT_FIELDS:
            minimum, message = REQUIRED_TEXT_FIELDS[key]
            if _text_shorter_than(value, minimum):
                errors.append(message)
    return errors
