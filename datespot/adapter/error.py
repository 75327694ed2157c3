"""Infrastructure layer errors."""

from datespot.domain.error import ExternalServiceError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError, ExternalServiceError):
    """External provider error.

    Also an ``ExternalServiceError`` so domain services can handle provider
    failures without importing adapter code.
    """

    def __init__(self, provider: str, detail: str):
        self.provider = provider
        self.detail = detail
        super().__init__(f"{provider}: {detail}")
