import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4"
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_CONFIG_FILE = "config.env"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    api_url: str = DEFAULT_API_URL
    model: str = DEFAULT_MODEL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def read_api_key_file(path: str | Path) -> str | None:
    """Return ``API_KEY`` from a dotenv-style file, or None if the file or key is absent."""
    config_path = Path(path)
    if not config_path.is_file():
        return None
    try:
        values = dotenv_values(config_path)
    except (OSError, UnicodeDecodeError):
        return None
    return values.get("API_KEY") or None


def load_api_key() -> str | None:
    key = os.getenv("OPENAI_API_KEY")
    if key:
        return key
    return read_api_key_file(os.getenv("TRANSLATEFORME_CONFIG", DEFAULT_CONFIG_FILE))


def load_timeout_seconds() -> float:
    raw = os.getenv("TRANSLATEFORME_TIMEOUT_SECONDS")
    if raw is None:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0.0
    if not timeout > 0:
        logger.warning(
            "Ignoring TRANSLATEFORME_TIMEOUT_SECONDS=%r, using %s seconds", raw, DEFAULT_TIMEOUT_SECONDS
        )
        return DEFAULT_TIMEOUT_SECONDS
    return timeout


def get_settings() -> Settings:
    return Settings(
        api_key=load_api_key(),
        api_url=os.getenv("TRANSLATEFORME_API_URL", DEFAULT_API_URL),
        model=os.getenv("TRANSLATEFORME_MODEL", DEFAULT_MODEL),
        timeout_seconds=load_timeout_seconds(),
    )
