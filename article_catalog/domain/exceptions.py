"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

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


class SearchValidationError(ValueError):
    """Base class for rejected search parameters.

    Each subclass carries a stable ``code`` and a client-facing message that
    the HTTP layer returns unchanged.
    """

    code: str = "InvalidSearchParameter"
    message: str = "Invalid search parameters."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidPageNumberError(SearchValidationError):
    code = "InvalidPageNumber"
    message = "Invalid page number. Must be greater than or equal to 1."


class InvalidPageSizeError(SearchValidationError):
    code = "InvalidPageSize"

    def __init__(self, max_page_size: int):
        self.max_page_size = max_page_size
        super().__init__(f"Invalid page size. Must be between 1 and {max_page_size}.")


class InvalidMinPotSizeError(SearchValidationError):
    code = "InvalidMinPotSize"
    message = "Invalid minimum pot size. Must be greater than or equal to 0."


class InvalidMaxPotSizeError(SearchValidationError):
    code = "InvalidMaxPotSize"
    message = "Invalid maximum pot size. Must be greater than or equal to 0."


class InvalidPotSizeRangeError(SearchValidationError):
    code = "InvalidPotSizeRange"
    message = "Invalid combination of minimum and maximum pot size."


class PotSizeOutOfRangeError(SearchValidationError):
    code = "PotSizeOutOfRange"

    def __init__(self, max_pot_size: int):
        self.max_pot_size = max_pot_size
        super().__init__(f"Invalid pot size. Must be less than or equal to {max_pot_size}.")
