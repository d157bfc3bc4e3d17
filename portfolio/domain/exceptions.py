"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity or local reference does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class RecordValidationError(Exception):
    """Raised when required fields are missing or malformed.

    Caught locally before any remote call is issued.
    """

    def __init__(self, entity_type: str, missing: list[str], reference: str | None = None):
        self.entity_type = entity_type
        self.missing = missing
        self.reference = reference
        target = f" '{reference}'" if reference else ""
        super().__init__(
            f"{entity_type}{target} is missing required fields: {', '.join(missing)}"
        )


class IndexOutOfRangeError(Exception):
    """Raised when a reorder gesture points outside the current list."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Index {index} is out of range for a list of {length}")


class StoreError(Exception):
    """Raised when a remote store call fails (network, constraint, auth)."""

    def __init__(self, operation: str, message: str, status_code: int | None = None):
        self.operation = operation
        self.message = message
        self.status_code = status_code
        prefix = f"[{status_code}] " if status_code is not None else ""
        super().__init__(f"{operation} failed: {prefix}{message}")
