class DomainError(Exception):
    pass


class ValidationError(DomainError):
    pass


class ConfigurationError(DomainError):
    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


class UpstreamError(DomainError):
    """Raised when the generation or metadata API fails where the failure is not skipped."""

    def __init__(self, source: str, message: str):
        super().__init__(message)
        self.source = source
