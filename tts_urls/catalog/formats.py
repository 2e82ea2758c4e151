from __future__ import annotations

from enum import Enum


class Codec(str, Enum):
    MP3 = "mp3"
    WAV = "wav"
    AAC = "aac"
    OGG = "ogg"
    CAF = "caf"

    def to_wire_string(self) -> str:
        return self.value

    @classmethod
    def from_wire_string(cls, value: str) -> Codec | None:
        """Parse a codec name, ignoring case.

        Besides the codec names themselves, ``mpeg``, ``wave``, ``m4a`` and
        ``vorbis`` are accepted as aliases.
        """
        normalized = value.lower()
        normalized = _CODEC_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            return None


_CODEC_ALIASES: dict[str, str] = {
    "mpeg": "mp3",
    "wave": "wav",
    "m4a": "aac",
    "vorbis": "ogg",
}

_SAMPLE_RATES = ["8khz", "11khz", "12khz", "16khz", "22khz", "24khz", "32khz", "44khz", "48khz"]
_COMPANDED_RATES = ["8khz", "11khz", "22khz", "44khz"]
_CHANNELS = ["mono", "stereo"]

AUDIO_FORMATS: tuple[str, ...] = (
    tuple(
        f"{rate}_{bits}_{channels}"
        for rate in _SAMPLE_RATES
        for bits in ("8bit", "16bit")
        for channels in _CHANNELS
    )
    + tuple(f"alaw_{rate}_{channels}" for rate in _COMPANDED_RATES for channels in _CHANNELS)
    + tuple(f"ulaw_{rate}_{channels}" for rate in _COMPANDED_RATES for channels in _CHANNELS)
)

_AUDIO_FORMAT_SET = frozenset(AUDIO_FORMATS)


def is_audio_format(value: str) -> bool:
    return value in _AUDIO_FORMAT_SET
