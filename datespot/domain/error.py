"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class AuthRequiredError(DomainError):
    """Raised when an anonymous session attempts a mutation."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Sign in required to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class RemoteStoreError(DomainError):
    """Raised when the backing store rejects or fails an operation.

    ``retryable`` tells the caller whether repeating the same action may
    succeed (network or contention failures) or not (permission failures).
    """

    def __init__(self, operation: str, detail: str, retryable: bool = True):
        self.operation = operation
        self.retryable = retryable
        super().__init__(f"Store operation '{operation}' failed: {detail}")


class UploadError(DomainError):
    """Raised when an asset upload is rejected or fails."""

    pass


class GateError(DomainError):
    """Base class for pre-submission checks on new spots."""

    code = "gate_error"


class MissingFieldError(GateError):
    """Raised when required fields of a new spot are blank."""

    code = "missing_field"

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__("Please fill in all required fields: " + ", ".join(fields))


class DuplicateSpotError(GateError):
    """Raised when a spot with the same name and location already exists."""

    code = "duplicate_spot"

    def __init__(self, name: str, location: str):
        self.name = name
        self.location = location
        super().__init__(
            "A date spot with this name and location already exists. "
            "Please check your spelling or add a new one."
        )


class SentimentUnavailableError(GateError):
    """Raised when the description could not be scored."""

    code = "sentiment_unavailable"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(
            "We couldn't check the description right now. Please try again."
        )


class UnenthusiasticContentError(GateError):
    """Raised when the description scores at or below the sentiment threshold."""

    code = "unenthusiastic_content"

    def __init__(self, score: float, threshold: float):
        self.score = score
        self.threshold = threshold
        super().__init__(
            "The description of this date spot seems unenthusiastic. "
            "Please write a more positive review!"
        )


class ExternalServiceError(DomainError):
    """Raised by adapters when an external service call fails."""

    pass
