"""
Service-layer errors raised for user operations.
The request layer translates them into HTTP responses.
"""


class UserNotFoundError(LookupError):
    """Raised when a user requested by id or email does not exist."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmailAlreadyRegisteredError(ValueError):
    """Raised when registering an email that already belongs to a user."""

    def __init__(self, email: str):
        super().__init__(f"User with email '{email}' already exists")
        self.email = email
