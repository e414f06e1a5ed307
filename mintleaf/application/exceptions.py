class InvalidDateError(ValueError):
    """Raised when a value that is not a real calendar day is used as one."""
    pass


class InvalidColorError(ValueError):
    """Raised when a color is not a strict #RRGGBB hex string."""
    pass


class ValidationError(ValueError):
    """Raised when a booking or leave-request field fails validation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class StorageError(RuntimeError):
    """Raised when the document store is unreachable or answers with an error."""
    pass


class StorageReadError(StorageError):
    """Raised when settings or records cannot be loaded from the document store."""
    pass


class StorageWriteError(StorageError):
    """Raised when the document store rejects or fails a write."""
    pass
