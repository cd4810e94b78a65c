class StoreError(Exception):
    """Base class for every rejected write against the store."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self):
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class UniquenessViolation(StoreError):
    """A league or team name collides with an existing row."""


class ReferentialViolation(StoreError):
    """A reference points at a missing row, or a delete would orphan dependents."""


class ValidationError(StoreError):
    """Row rejected before admission (negative goals, team playing itself)."""


class NotFoundError(StoreError):
    """No row with the requested identifier."""


HTTP_STATUS = {
    NotFoundError: 404,
    UniquenessViolation: 409,
    ReferentialViolation: 409,
    ValidationError: 422,
}


def http_status_for(error: StoreError) -> int:
    for error_type, status_code in HTTP_STATUS.items():
        if isinstance(error, error_type):
            return status_code
    return 400
