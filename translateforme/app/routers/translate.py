from time import perf_counter

from fastapi import APIRouter, Depends

from ..client import TranslationClient
from ..config import Settings, get_settings
from ..errors import EMPTY_TEXT_PROMPT
from ..languages import DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE, LANGUAGES
from ..schemas import LanguagesResponse, TranslateRequest, TranslateResponse

router = APIRouter(tags=["translate"])


def get_translation_client(settings: Settings = Depends(get_settings)) -> TranslationClient:
    return TranslationClient.from_settings(settings)


@router.get("/languages", response_model=LanguagesResponse)
def list_languages() -> LanguagesResponse:
    return LanguagesResponse(
        languages=LANGUAGES,
        default_source=DEFAULT_SOURCE_LANGUAGE,
        default_target=DEFAULT_TARGET_LANGUAGE,
    )


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    payload: TranslateRequest,
    settings: Settings = Depends(get_settings),
    client: TranslationClient = Depends(get_translation_client),
) -> TranslateResponse:
    if not payload.text:
        return TranslateResponse(
            source_language=payload.source_language,
            target_language=payload.target_language,
            translated=False,
            output=EMPTY_TEXT_PROMPT,
        )

    # TranslationError propagates to the app-level handler in main.
    started = perf_counter()
    output = await client.translate(
        payload.text,
        payload.source_language.value,
        payload.target_language.value,
        settings.api_key,
    )
    return TranslateResponse(
        source_language=payload.source_language,
        target_language=payload.target_language,
        translated=True,
        output=output,
        latency_ms=(perf_counter() - started) * 1000,
    )
