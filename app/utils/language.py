import pycountry
from typing import Optional

from app.models import Language

SPEECH_LOCALES = {
    Language.EN: "en-US",
    Language.HI: "hi-IN",
}


def language_name(code: str) -> Optional[str]:
    """
    Convert ISO 639-1 language code (e.g. 'hi') to its English name ('Hindi')
    """
    if not code:
        return None

    lang = pycountry.languages.get(alpha_2=code.lower())
    return lang.name if lang else None


def speech_locale(language: Language) -> str:
    return SPEECH_LOCALES[language]
