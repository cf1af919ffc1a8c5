class RepositoryError(Exception):
    """Base repository error."""

    kind = "repository_error"


class RepositoryValidationError(RepositoryError):
    """Raised when payload validation or a domain policy check fails."""

    kind = "validation_error"


class RepositoryConflictError(RepositoryError):
    """Raised when an operation collides with an existing unique key."""

    kind = "conflict"


class RepositoryForbiddenError(RepositoryError):
    """Raised when an operation is not permitted for the actor."""

    kind = "forbidden"


class RepositoryNotFoundError(RepositoryError):
    """Raised when the requested entity does not exist."""

    kind = "not_found"


class RepositoryStorageError(RepositoryError):
    """Raised when the store fails; the transaction has been rolled back."""

    kind = "storage_error"


class RepositoryUnavailableError(RepositoryStorageError):
    """Raised when the database is unavailable or not configured."""

    kind = "unavailable"
