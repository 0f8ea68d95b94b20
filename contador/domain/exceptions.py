"""Domain error taxonomy. Each error knows the HTTP status it maps to."""


class ContadorError(Exception):
    """Base class for all errors raised by the counter service."""

    status_code = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ContadorError):
    """Bad or missing input, e.g. an empty name or a malformed body."""

    status_code = 400


class ConflictError(ContadorError):
    """A person with the same name (case-insensitive) already exists."""

    status_code = 400


class NotFoundError(ContadorError):
    """No person with the requested id."""

    status_code = 404


class StorageError(ContadorError):
    """Key-value store failure or a malformed stored roster."""

    status_code = 500
