# backend/services/errors.py
"""Domain errors raised by services and repositories.

Each error carries the HTTP status the API answers with; ``main.py``
registers a single handler for :class:`DomainError`.
"""


class DomainError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    status_code = 404


class NothingToConfirmError(DomainError):
    status_code = 400


class InsufficientStockError(DomainError):
    status_code = 422


class InvalidTransitionError(DomainError):
    status_code = 409


class StorageError(DomainError):
    status_code = 503
