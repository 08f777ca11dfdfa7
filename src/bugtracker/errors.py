"""Error taxonomy shared by the store and the HTTP layer"""

from typing import List, Optional


class BugTrackerError(Exception):
    """Base class for errors that map onto an HTTP response.

    ``message`` is safe to show to API clients; nothing else about the
    failure is exposed.
    """

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"success": False, "error": self.message}


class ValidationError(BugTrackerError):
    """Client-supplied data failed validation or enum constraints"""

    status_code = 400
    message = "Validation failed"

    def __init__(self, details: List[str], message: Optional[str] = None):
        self.details = list(details)
        super().__init__(message)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["details"] = self.details
        return data


class NotFoundError(BugTrackerError):
    status_code = 404
    message = "Bug not found"


class MalformedIdError(BugTrackerError):
    """Identifier does not have the store's id shape"""

    status_code = 400
    message = "Invalid bug ID format"


class UnexpectedError(BugTrackerError):
    status_code = 500
    message = "Internal server error"
