from pydantic import BaseModel

from .languages import DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE, Language


class TranslateRequest(BaseModel):
    text: str = ""
    source_language: Language = DEFAULT_SOURCE_LANGUAGE
    target_language: Language = DEFAULT_TARGET_LANGUAGE


class TranslateResponse(BaseModel):
    source_language: Language
    target_language: Language
    translated: bool
    output: str
    latency_ms: float | None = None


class LanguagesResponse(BaseModel):
    languages: list[str]
    default_source: Language
    default_target: Language


class ChatMessage(BaseModel):
    role: str
    content: str


class ChatChoice(BaseModel):
    message: ChatMessage


class ChatCompletionResponse(BaseModel):
    choices: list[ChatChoice]


class ApiErrorDetail(BaseModel):
    message: str


class ApiErrorBody(BaseModel):
    error: ApiErrorDetail
