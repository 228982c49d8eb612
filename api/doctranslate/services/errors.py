class TranslationError(Exception):
    """Base class for failures surfaced to the caller of a translation."""

    stage = "translation"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReadFailure(TranslationError):
    """The uploaded file could not be read (unsupported type or bad bytes)."""

    stage = "read"


class ApiError(TranslationError):
    """The translation API answered with a non-success HTTP status."""

    stage = "api"

    def __init__(self, status_text: str, status_code: int | None = None):
        super().__init__(f"API Error: {status_text}")
        self.status_text = status_text
        self.status_code = status_code


class TranslationFailure(TranslationError):
    """Transport or response-parsing failure. The cause is only logged."""

    stage = "network"

    DEFAULT_MESSAGE = "Translation failed. Please try again."

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)
