"""
Route-level errors.
"""

from shared.exceptions import ValidationError


class DeleteNotConfirmedError(ValidationError):
    """Raised when a delete request does not carry confirm=true."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            f"Deleting {resource} {resource_id} requires confirm=true",
            code="DELETE_NOT_CONFIRMED",
            details={"resource": resource, "id": resource_id},
        )
