from enum import Enum


class Language(str, Enum):
    ENGLISH = "English"
    RUSSIAN = "Russian"
    SPANISH = "Spanish"
    FRENCH = "French"
    GERMAN = "German"


LANGUAGES: list[str] = [language.value for language in Language]

DEFAULT_SOURCE_LANGUAGE = Language.ENGLISH
DEFAULT_TARGET_LANGUAGE = Language.RUSSIAN
