from fastapi import status

EMPTY_TEXT_PROMPT = "Please enter text to translate."


class TranslationError(Exception):
    """Base for failures that end up in the output area instead of a translation."""

    status_code: int = status.HTTP_502_BAD_GATEWAY

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MissingCredential(TranslationError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self) -> None:
        super().__init__("API key is missing.")


class TransportFailure(TranslationError):
    def __init__(self, detail: str, timed_out: bool = False) -> None:
        super().__init__(
            f"Translation failed: {detail}",
            status_code=status.HTTP_504_GATEWAY_TIMEOUT if timed_out else None,
        )
        self.detail = detail
        self.timed_out = timed_out


class EmptyBody(TranslationError):
    def __init__(self) -> None:
        super().__init__("Translation failed: No data received")


class DecodeFailure(TranslationError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Translation failed: {detail}")
        self.detail = detail


class NoChoices(TranslationError):
    def __init__(self) -> None:
        super().__init__("Translation failed: No content in response")
