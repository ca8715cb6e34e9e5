"""Store exceptions."""


class StoreError(Exception):
    """Base class for store failures. ``message`` is safe to show to clients."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StoreError):
    """Referenced user, parking lot or reward does not exist."""


class ConflictError(StoreError):
    """A unique field is already taken."""


class DuplicateEmailError(ConflictError):
    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists")
        self.email = email


class DuplicateUsernameError(ConflictError):
    def __init__(self, username: str):
        super().__init__(f"User with username {username} already exists")
        self.username = username


class BusinessRuleError(StoreError):
    """Operation is well-formed but not allowed in the current state."""


class InsufficientPointsError(BusinessRuleError):
    def __init__(self, required: int, available: int):
        super().__init__("Insufficient points")
        self.required = required
        self.available = available
