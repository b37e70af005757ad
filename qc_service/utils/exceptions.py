"""Error taxonomy for QC check operations.

Each error carries the HTTP status it maps to, a user-facing message and,
optionally, the underlying error text that is echoed back in the ``error``
field of the response envelope.
"""


class QCServiceError(Exception):
    status_code = 500

    def __init__(self, message, error=None):
        super().__init__(message)
        self.message = message
        self.error = error


class ValidationError(QCServiceError):
    """Mandatory input missing or unparseable. Raised before any transaction opens."""
    status_code = 400


class NotFoundError(QCServiceError):
    """Target id does not reference an active record."""
    status_code = 404


class PersistenceError(QCServiceError):
    """Datastore failure after the transaction has been rolled back."""
    status_code = 500
