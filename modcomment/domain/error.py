"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Raised when a value breaks a field rule.

    Only the first failing rule is carried; see ``collect_violations`` for
    the full list.
    """

    def __init__(self, field: str, rule: str, message: str | None = None):
        self.field = field
        self.rule = rule
        super().__init__(message or f"{field} failed validation rule '{rule}'")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StorageError(DomainError):
    """Raised when the persistence layer fails.

    The driver exception is kept as ``__cause__``.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation} failed: {message}")
