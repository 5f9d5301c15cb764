"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class StorageFailure(PersistenceError):
    """Unexpected fault in the backing store.

    The transaction has been rolled back; the operation is not retried.
    """

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Storage failure during {operation}: {cause}")
