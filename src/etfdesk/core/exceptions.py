"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class ProviderError(AppError):
    """
    Base for failures of the external market data provider.

    Never surfaced to gateway callers; the gateway degrades to fallback data.
    """

    def __init__(self, message: str, code: str = "PROVIDER_ERROR"):
        super().__init__(message, code=code)


class ProviderUnavailableError(ProviderError):
    """Raised when the provider cannot be reached (transport, timeout, HTTP status, no key)."""

    def __init__(self, message: str):
        super().__init__(message, code="PROVIDER_UNAVAILABLE")


class ProviderResponseError(ProviderError):
    """Raised when the provider answers with an error payload."""

    def __init__(self, provider_code: str, message: str):
        self.provider_code = provider_code
        super().__init__(f"Provider error {provider_code}: {message}", code="PROVIDER_RESPONSE")


class ProviderParseError(ProviderError):
    """Raised when a provider response does not have the expected shape."""

    def __init__(self, message: str):
        super().__init__(message, code="PROVIDER_PARSE")
