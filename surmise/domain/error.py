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


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthenticationError(DomainError):
    """Base error for failed identity checks."""

    pass


class UnauthenticatedError(AuthenticationError):
    """Raised when no token was supplied by any token source."""

    def __init__(self) -> None:
        super().__init__("No authentication token supplied")


class InvalidTokenError(AuthenticationError):
    """Raised when a supplied token fails verification."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class InvalidCredentialsError(AuthenticationError):
    """Raised when a username/password pair does not match."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Wrong credentials for {username}")
