class CMSError(Exception):
    """Base class for every recoverable content-management failure."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CMSError):
    """Missing required field, image mode violation, block cap reached."""


class InvariantViolation(ValidationError):
    pass


class NotFoundError(CMSError):
    status_code = 404


class UploadError(CMSError):
    """Bad extension, oversized file or filesystem write failure."""


class PersistenceError(CMSError):
    """Storage engine failure. The transaction has already been rolled back."""

    status_code = 500
