"""Language aliases accepted by textpolish."""
from typing import List

from .errors import LanguageError

SUPPORTED_LANGUAGES = {
    "en": "en-us",
    "pt": "pt-br",
    "en-us": "en-us",
    "pt-br": "pt-br",
}


def validate_language(lang: str) -> str:
    """Return the canonical locale code for a language alias."""
    validated = SUPPORTED_LANGUAGES.get(lang.lower())
    if validated is None:
        raise LanguageError(f"invalid language option: {lang}")
    return validated


def available_languages() -> List[str]:
    return sorted(SUPPORTED_LANGUAGES)
