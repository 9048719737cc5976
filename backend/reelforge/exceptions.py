"""Exception hierarchy shared by the producer endpoint and the stream consumer."""


class BriefValidationError(ValueError):
    """Raised when a request payload cannot be turned into a Brief."""

    def __init__(self, message: str, details: str = ""):
        super().__init__(message)
        self.details = details


class StudioAPIError(Exception):
    """Base exception for failures while consuming a generation stream."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(StudioAPIError):
    """The streaming channel could not be opened or broke while reading."""

    pass


class ParseError(StudioAPIError):
    """A streamed line is not valid JSON or not a known event shape."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


class RequestRejectedError(StudioAPIError):
    """The producer refused the brief (HTTP 400)."""

    def __init__(
        self,
        message: str,
        details: str = "",
        status_code: int | None = 400,
    ):
        super().__init__(message, status_code=status_code)
        self.details = details
