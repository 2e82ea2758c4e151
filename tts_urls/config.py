from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

from tts_urls.catalog.languages import Language


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"
    workers: int = 1


class GoogleTranslateConfig(BaseModel):
    language: str = "en"


class VoiceRSSConfig(BaseModel):
    api_key: str | None = None
    language: str = "en-us"

    @field_validator("language")
    @classmethod
    def check_language(cls, value: str) -> str:
        parsed = Language.from_wire_string(value)
        if parsed is None:
            raise ValueError(f"Unsupported VoiceRSS language: {value!r}")
        return parsed.to_wire_string()


class TtsUrlsConfig(BaseModel):
    server: ServerConfig = ServerConfig()
    google_translate: GoogleTranslateConfig = GoogleTranslateConfig()
    voicerss: VoiceRSSConfig = VoiceRSSConfig()


ENV_OVERRIDES: dict[str, tuple[list[str], type]] = {
    "TTS_URLS_HOST": (["server", "host"], str),
    "TTS_URLS_PORT": (["server", "port"], int),
    "TTS_URLS_LOG_LEVEL": (["server", "log_level"], str),
    "TTS_URLS_WORKERS": (["server", "workers"], int),
    "GOOGLE_TRANSLATE_LANGUAGE": (["google_translate", "language"], str),
    "VOICERSS_API_KEY": (["voicerss", "api_key"], str),
    "VOICERSS_LANGUAGE": (["voicerss", "language"], str),
}


def load_config() -> TtsUrlsConfig:
    config_path = Path(os.environ.get("TTS_URLS_CONFIG", "/etc/tts-urls/config.yaml"))

    data: dict = {}
    if config_path.is_file():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

    for env_var, (key_path, cast) in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value is None:
            continue

        target = data
        for key in key_path[:-1]:
            if key not in target:
                target[key] = {}
            target = target[key]
        target[key_path[-1]] = cast(value)

    return TtsUrlsConfig(**data)
