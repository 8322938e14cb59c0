"""Domain exceptions raised by the category services.

Each exception carries the HTTP status and the short ``error`` label used in
the response body, so the API layer can render any of them the same way.
"""


class CategoryTreeError(Exception):
    """Base class for domain errors."""

    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(CategoryTreeError):
    """A referenced category does not exist."""

    status_code = 404
    error = "Entity Not Found"


class ServiceError(CategoryTreeError):
    """The request was rejected because of the current state of the tree."""

    status_code = 409
    error = "Conflict"


class ConflictError(ServiceError):
    """A category with the same label already exists."""

    error = "Entity Already Exists"


class InvalidOperationError(ServiceError):
    """The requested move would break the hierarchy."""

    error = "Invalid Operation"
