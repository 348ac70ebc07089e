# remote_config/services/exceptions.py

class ServiceException(Exception):
    """Base exception for all service layer errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class NotFoundError(ServiceException):
    """Raised when an app or entity does not exist, or exists but is filtered out."""
    pass

class ValidationError(ServiceException):
    """Raised when required fields are missing or a write would break a data invariant."""
    pass

class StorageError(ServiceException):
    """Raised when an underlying query, connection or constraint check fails."""
    pass

class UpstreamError(ServiceException):
    """Raised when the notification relay cannot be reached or answers with a non-2xx status."""
    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
