import logging
from decimal import Decimal

from tts_urls.encoding.percent import percent_encode
from tts_urls.providers.base import UrlProvider

logger = logging.getLogger(__name__)

GOOGLE_TRANSLATE_HOST = "translate.google.com"
GOOGLE_TRANSLATE_BASE_URL = f"https://{GOOGLE_TRANSLATE_HOST}/translate_tts"
CLIENT = "webapp"

TOKEN_SEED = 429955
TOKEN_KEY = 3864579582

_MASK = 0xFFFFFFFF

# Languages offered by the Translate web UI for speech output
GOOGLE_TRANSLATE_LANGUAGES = [
    "af", "ar", "bg", "bn", "bs", "ca", "cs", "cy", "da", "de", "el", "en",
    "eo", "es", "et", "fi", "fr", "gu", "hi", "hr", "hu", "hy", "id", "is",
    "it", "ja", "jw", "km", "kn", "ko", "la", "lv", "mk", "ml", "mr", "my",
    "ne", "nl", "no", "pl", "pt", "ro", "ru", "si", "sk", "sq", "sr", "su",
    "sv", "sw", "ta", "te", "th", "tl", "tr", "uk", "ur", "vi", "zh-CN",
    "zh-TW",
]


def compute_token(text: str) -> tuple[int, int]:
    """Compute the ``tk`` pair the translate_tts endpoint expects for ``text``.

    This is a rolling hash over the UTF-8 bytes of the text, not a
    cryptographic digest. All arithmetic wraps at 32 bits.
    """
    acc = TOKEN_SEED
    for byte in text.encode("utf-8"):
        acc = (acc + byte) & _MASK
        acc = (acc + (acc << 10)) & _MASK
        acc ^= acc >> 6

    acc = (acc + (acc << 3)) & _MASK
    acc ^= acc >> 11
    acc = (acc + (acc << 15)) & _MASK
    acc ^= TOKEN_KEY
    acc %= 1_000_000
    return acc, acc ^ TOKEN_SEED


def format_speed(speed: float) -> str:
    value = float(speed)
    if value.is_integer():
        return str(int(value))
    # shortest round-trip digits, always positional (1e-05 -> 0.00001)
    return format(Decimal(repr(value)), "f")


def build_url(text: str, language: str, speed: float | None = None) -> str:
    a, b = compute_token(text)
    url = (
        f"{GOOGLE_TRANSLATE_BASE_URL}?ie=UTF-8"
        f"&q={percent_encode(text)}"
        f"&tl={language}"
        f"&tk={a}.{b}"
        f"&client={CLIENT}"
    )
    if speed is not None:
        url += f"&ttsspeed={format_speed(speed)}"

    logger.debug("Built Google Translate URL (tl=%s, %d chars of text)", language, len(text))
    return url


class GoogleTranslateProvider(UrlProvider):
    alias = "google_translate"
    name = "Google Translate"

    def __init__(self, default_language: str = "en") -> None:
        self.default_language = default_language

    def build_url(self, text: str, language: str | None = None, speed: float | None = None) -> str:
        return build_url(text, language or self.default_language, speed)

    def get_languages(self) -> list[str]:
        return GOOGLE_TRANSLATE_LANGUAGES

    def get_host(self) -> str:
        return GOOGLE_TRANSLATE_HOST

    def requires_key(self) -> bool:
        return False
