"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist or is outside the default read scope."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when a scoped-unique value is already held by a non-deleted entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidInputError(Exception):
    """Raised when input is well-formed but violates a business rule."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class AuthenticationError(Exception):
    """Raised when credentials or a bearer token are missing or invalid."""

    def __init__(self, message: str = "Invalid credentials"):
        self.message = message
        super().__init__(message)


class PermissionDeniedError(Exception):
    """Raised when an authenticated actor may not perform an operation."""

    def __init__(self, message: str = "Access denied"):
        self.message = message
        super().__init__(message)
