from __future__ import annotations

import logging
from dataclasses import dataclass

from tts_urls.catalog.formats import Codec, is_audio_format
from tts_urls.catalog.languages import DEFAULT_LANGUAGE, Language
from tts_urls.encoding.percent import percent_encode
from tts_urls.providers.base import UrlProvider
from tts_urls.schemas.errors import (
    InvalidEnumValueError,
    InvalidKeyFormatError,
    InvalidRangeError,
    MissingApiKeyError,
)

logger = logging.getLogger(__name__)

VOICERSS_HOST = "api.voicerss.org"
VOICERSS_BASE_URL = f"http://{VOICERSS_HOST}/"

MIN_SPEED = -10
MAX_SPEED = 10


def _parse_language(language: Language | str) -> Language:
    if isinstance(language, Language):
        return language
    parsed = Language.from_wire_string(language)
    if parsed is None:
        raise InvalidEnumValueError("language", language)
    return parsed


def _parse_codec(codec: Codec | str) -> Codec:
    if isinstance(codec, Codec):
        return codec
    parsed = Codec.from_wire_string(codec)
    if parsed is None:
        raise InvalidEnumValueError("codec", codec)
    return parsed


def _check_speed(speed: int | float) -> int:
    if isinstance(speed, bool):
        raise TypeError(f"speed should be an integer, got {speed!r}")
    if isinstance(speed, float):
        if not speed.is_integer():
            raise TypeError(f"speed should be an integer, got {speed!r}")
        speed = int(speed)
    if not isinstance(speed, int):
        raise TypeError(f"speed should be an integer, got {speed!r}")
    if not MIN_SPEED <= speed <= MAX_SPEED:
        raise InvalidRangeError("speed", speed, MIN_SPEED, MAX_SPEED)
    return speed


def _check_audio_format(audio_format: str) -> str:
    if not is_audio_format(audio_format):
        raise InvalidEnumValueError("audio_format", audio_format)
    return audio_format


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def check_key(api_key: str) -> None:
    if not all(ch.isalnum() for ch in api_key):
        raise InvalidKeyFormatError()


@dataclass
class VoiceRSSOptions:
    """Optional VoiceRSS request parameters.

    Passing fields to the constructor validates them the same way the
    ``set_*`` methods do, so both of these produce the same options::

        VoiceRSSOptions(language="de-de", codec="mp3")
        VoiceRSSOptions().set_language("de-de").set_codec("mp3")

    Unset fields are left out of the URL, except the language which falls
    back to ``en-us``.
    """

    language: Language | None = None
    voice: str | None = None
    speed: int | None = None
    codec: Codec | None = None
    audio_format: str | None = None
    ssml: bool | None = None
    base64: bool | None = None

    def __post_init__(self) -> None:
        if self.language is not None:
            self.language = _parse_language(self.language)
        if self.speed is not None:
            self.speed = _check_speed(self.speed)
        if self.codec is not None:
            self.codec = _parse_codec(self.codec)
        if self.audio_format is not None:
            self.audio_format = _check_audio_format(self.audio_format)

    def set_language(self, language: Language | str) -> VoiceRSSOptions:
        self.language = _parse_language(language)
        return self

    def set_voice(self, voice: str) -> VoiceRSSOptions:
        self.voice = voice
        return self

    def set_speed(self, speed: int) -> VoiceRSSOptions:
        """Set the speech rate, from -10 (slowest) to 10 (fastest)."""
        self.speed = _check_speed(speed)
        return self

    def set_codec(self, codec: Codec | str) -> VoiceRSSOptions:
        self.codec = _parse_codec(codec)
        return self

    def set_audio_format(self, audio_format: str) -> VoiceRSSOptions:
        self.audio_format = _check_audio_format(audio_format)
        return self

    def set_ssml(self, ssml: bool) -> VoiceRSSOptions:
        self.ssml = ssml
        return self

    def set_base64(self, base64: bool) -> VoiceRSSOptions:
        """Ask for an inline base64 ``data:`` URI instead of raw audio."""
        self.base64 = base64
        return self

    def build_url(self, api_key: str, text: str) -> str:
        check_key(api_key)

        language = self.language or DEFAULT_LANGUAGE
        params: list[tuple[str, str]] = [
            ("key", api_key),
            ("hl", language.to_wire_string()),
        ]

        if self.voice is not None:
            params.append(("v", percent_encode(self.voice)))
        if self.speed is not None:
            params.append(("r", str(self.speed)))
        if self.codec is not None:
            params.append(("c", self.codec.to_wire_string()))
        if self.audio_format is not None:
            params.append(("f", self.audio_format))
        if self.ssml is not None:
            params.append(("sml", _format_bool(self.ssml)))
        if self.base64 is not None:
            params.append(("b64", _format_bool(self.base64)))

        params.append(("src", percent_encode(text)))

        logger.debug(
            "Built VoiceRSS URL (hl=%s, %d chars of text)", language.to_wire_string(), len(text)
        )
        return VOICERSS_BASE_URL + "?" + "&".join(f"{name}={value}" for name, value in params)


def url(api_key: str, text: str) -> str:
    return VoiceRSSOptions().build_url(api_key, text)


class VoiceRSSProvider(UrlProvider):
    alias = "voicerss"
    name = "VoiceRSS"

    def __init__(self, api_key: str | None = None, default_language: str | None = None) -> None:
        self._api_key = api_key
        self.default_language = (
            _parse_language(default_language) if default_language else DEFAULT_LANGUAGE
        )

    def build_url(
        self,
        text: str,
        key: str | None = None,
        language: Language | str | None = None,
        voice: str | None = None,
        speed: int | None = None,
        codec: Codec | str | None = None,
        audio_format: str | None = None,
        ssml: bool | None = None,
        base64: bool | None = None,
    ) -> str:
        api_key = key or self._api_key
        if api_key is None:
            raise MissingApiKeyError(self.alias)

        options = VoiceRSSOptions(
            language=language or self.default_language,
            voice=voice,
            speed=speed,
            codec=codec,
            audio_format=audio_format,
            ssml=ssml,
            base64=base64,
        )
        return options.build_url(api_key, text)

    def get_languages(self) -> list[str]:
        return [language.to_wire_string() for language in Language]

    def get_host(self) -> str:
        return VOICERSS_HOST

    def requires_key(self) -> bool:
        return True
