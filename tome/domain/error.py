"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthorizationError(DomainError):
    """Raised when the claimed nickname does not own the comment."""

    def __init__(self, resource: str, resource_id: str, nickname: str):
        self.resource = resource
        self.resource_id = resource_id
        self.nickname = nickname
        super().__init__(
            f"Nickname {nickname!r} is not authorized to delete {resource} {resource_id}"
        )
