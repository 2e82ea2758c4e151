from pydantic import BaseModel, Field


class GoogleTranslateUrlRequest(BaseModel):
    text: str = Field(..., max_length=4096)
    language: str | None = None
    speed: float | None = None


class VoiceRSSUrlRequest(BaseModel):
    text: str = Field(..., max_length=4096)
    key: str | None = None
    language: str | None = None
    voice: str | None = None
    speed: int | None = None
    codec: str | None = None
    audio_format: str | None = None
    ssml: bool | None = None
    base64: bool | None = None
