"""Domain layer errors.

Every error carries a machine-stable ``code`` that the HTTP layer returns
alongside the human-readable message.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "domain_error"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidArgumentError(DomainError):
    """Raised when an input value is not acceptable."""

    code = "invalid_argument"


class ForbiddenError(DomainError):
    """Raised when the caller may not perform the operation."""

    code = "forbidden"


class ConflictError(DomainError):
    """Raised when a concurrent write collided with a uniqueness constraint.

    The caller may retry the whole operation.
    """

    code = "conflict"


class UnauthenticatedError(DomainError):
    """Raised when an operation needs a signed-in caller and none is present."""

    code = "unauthenticated"
