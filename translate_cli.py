import os
from dataclasses import dataclass
from typing import Any

import requests

from translateforme.app.errors import EMPTY_TEXT_PROMPT
from translateforme.app.languages import DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE, LANGUAGES

TRANSLATEFORME_URL = os.getenv("TRANSLATEFORME_URL", "http://127.0.0.1:8000")
HELP_TEXT = """Commands:
  /source <language>   pick the language you type in
  /target <language>   pick the language to translate into
  /languages           list the available languages
  /quit                exit
Anything else is translated."""


@dataclass
class TranslatorState:
    source_language: str = DEFAULT_SOURCE_LANGUAGE.value
    target_language: str = DEFAULT_TARGET_LANGUAGE.value
    busy: bool = False

    def render(self) -> str:
        marker = " (translating...)" if self.busy else ""
        return f"[{self.source_language} -> {self.target_language}]{marker}"


def match_language(name: str) -> str | None:
    for language in LANGUAGES:
        if language.lower() == name.strip().lower():
            return language
    return None


def select_language(state: TranslatorState, side: str, name: str) -> str:
    language = match_language(name)
    if language is None:
        return f"Unknown language {name!r}. Choose one of: {', '.join(LANGUAGES)}"
    if side == "source":
        state.source_language = language
    else:
        state.target_language = language
    return state.render()


def call_translate(text: str, source_language: str, target_language: str) -> requests.Response:
    return requests.post(
        f"{TRANSLATEFORME_URL}/api/v1/translate",
        json={"text": text, "source_language": source_language, "target_language": target_language},
        timeout=90,
    )


def describe_reply(ok: bool, status_code: int, body: Any) -> str:
    if isinstance(body, dict):
        text = body.get("output") if ok else body.get("detail")
        if isinstance(text, str):
            return text
    return f"Translation failed: HTTP {status_code}"


def request_translation(state: TranslatorState, text: str) -> str:
    """Translate ``text`` through the service and return what belongs in the output area."""
    if not text:
        return EMPTY_TEXT_PROMPT
    if state.busy:
        return "A translation is already in progress."

    state.busy = True
    try:
        response = call_translate(text, state.source_language, state.target_language)
        try:
            body = response.json()
        except ValueError:
            return f"Translation failed: HTTP {response.status_code}"
        return describe_reply(response.ok, response.status_code, body)
    except requests.RequestException as exc:
        return f"Translation failed: {exc}"
    finally:
        state.busy = False


def handle_line(state: TranslatorState, line: str) -> str | None:
    """Run one line of user input. Returns None when the user asks to quit."""
    command, _, argument = line.strip().partition(" ")
    if command == "/quit":
        return None
    if command == "/help":
        return HELP_TEXT
    if command == "/languages":
        return ", ".join(LANGUAGES)
    if command in ("/source", "/target"):
        return select_language(state, command[1:], argument)
    return request_translation(state, line.rstrip("\n"))


def main() -> None:
    state = TranslatorState()
    print("TranslateForMe. Type /help for commands.")
    while True:
        try:
            line = input(f"{state.render()} > ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        result = handle_line(state, line)
        if result is None:
            break
        print(result)


if __name__ == "__main__":
    main()
