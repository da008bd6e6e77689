import logging

import httpx
from pydantic import ValidationError

from .config import DEFAULT_API_URL, DEFAULT_MODEL, DEFAULT_TIMEOUT_SECONDS, Settings
from .errors import DecodeFailure, EmptyBody, MissingCredential, NoChoices, TransportFailure
from .schemas import ApiErrorBody, ChatCompletionResponse

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a helpful assistant."


def build_user_prompt(text: str, source_language: str, target_language: str) -> str:
    return f"Translate the following text from {source_language} to {target_language}: {text}"


def describe_validation_error(exc: ValidationError) -> str:
    first_error = exc.errors()[0]
    location = ".".join(str(part) for part in first_error.get("loc", ()))
    if location:
        return f"{location}: {first_error['msg']}"
    return first_error["msg"]


def decode_completion(body: bytes) -> str:
    """Pull the first choice's content out of a chat-completion body."""
    if not body:
        raise EmptyBody()

    try:
        completion = ChatCompletionResponse.model_validate_json(body)
    except ValidationError as exc:
        try:
            api_error = ApiErrorBody.model_validate_json(body)
        except ValidationError:
            raise DecodeFailure(describe_validation_error(exc)) from exc
        raise DecodeFailure(api_error.error.message) from exc

    if not completion.choices:
        raise NoChoices()
    return completion.choices[0].message.content


class TranslationClient:
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.api_url = api_url
        self.model = model
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "TranslationClient":
        return cls(api_url=settings.api_url, model=settings.model, timeout_seconds=settings.timeout_seconds)

    def build_payload(self, text: str, source_language: str, target_language: str) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_user_prompt(text, source_language, target_language)},
            ],
        }

    async def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
        api_key: str | None,
    ) -> str:
        if not api_key:
            raise MissingCredential()

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        payload = self.build_payload(text, source_language, target_language)
        logger.info("Requesting %s translation %s -> %s", self.model, source_language, target_language)

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(self.api_url, headers=headers, json=payload)
        except httpx.TimeoutException as exc:
            logger.debug("Translation request timed out: %r", exc)
            raise TransportFailure(str(exc) or "Request timed out.", timed_out=True) from exc
        except httpx.RequestError as exc:
            logger.debug("Translation request failed: %r", exc)
            raise TransportFailure(str(exc) or type(exc).__name__) from exc

        try:
            return decode_completion(response.content)
        except (EmptyBody, DecodeFailure, NoChoices) as exc:
            logger.debug("Unusable reply from %s (HTTP %s): %s", self.api_url, response.status_code, exc.message)
            raise
