from typing import Optional


class RelayError(Exception):
    """Base error for the upload relay; rendered as a JSON error body."""

    status_code = 500
    error = "Upload failed"

    def __init__(self, error: Optional[str] = None, message: Optional[str] = None):
        if error is not None:
            self.error = error
        self.message = message
        super().__init__(message or self.error)


class MethodNotAllowed(RelayError):
    status_code = 405
    error = "Method not allowed"


class ValidationError(RelayError):
    status_code = 400
    error = "Missing required fields"


class ConfigurationError(RelayError):
    status_code = 500
    error = "Server configuration error"


class UpstreamError(RelayError):
    """The remote store rejected the write or could not be reached."""

    status_code = 500
    error = "Upload failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message=message)
