"""Identity domain exceptions."""

from wordtree.domain.common.exceptions import AuthorizationError, DomainError


class EmailTakenError(DomainError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email} is already registered", {"email": email})
        self.email = email


class AuthenticationFailedError(DomainError):
    """Raised when a password or token does not identify an account."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class RegistrationDisabledError(AuthorizationError):
    """Raised when new accounts are switched off through the feature flag."""

    def __init__(self) -> None:
        super().__init__("User registration is currently disabled")
