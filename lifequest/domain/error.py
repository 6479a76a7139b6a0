"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotOwnerError(DomainError):
    """Raised when a user acts on a resource owned by someone else."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(f"User {user_id} does not own {resource} {resource_id}")


class SyncError(DomainError):
    """Raised by a remote store when an operation could not be applied."""

    pass
