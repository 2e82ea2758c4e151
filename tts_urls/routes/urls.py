from fastapi import APIRouter, Request

from tts_urls.schemas.errors import UnknownProviderError
from tts_urls.schemas.requests import GoogleTranslateUrlRequest, VoiceRSSUrlRequest
from tts_urls.schemas.responses import UrlResponse

router = APIRouter()


def _get_provider(request: Request, alias: str):
    registry = request.app.state.registry
    if not registry.has_provider(alias):
        raise UnknownProviderError(alias)
    return registry.get(alias)


@router.post("/urls/google-translate")
async def create_google_translate_url(
    request: Request, body: GoogleTranslateUrlRequest
) -> UrlResponse:
    provider = _get_provider(request, "google_translate")
    url = provider.build_url(body.text, language=body.language, speed=body.speed)
    return UrlResponse(provider=provider.alias, url=url)


@router.post("/urls/voicerss")
async def create_voicerss_url(request: Request, body: VoiceRSSUrlRequest) -> UrlResponse:
    provider = _get_provider(request, "voicerss")
    url = provider.build_url(
        body.text,
        key=body.key,
        language=body.language,
        voice=body.voice,
        speed=body.speed,
        codec=body.codec,
        audio_format=body.audio_format,
        ssml=body.ssml,
        base64=body.base64,
    )
    return UrlResponse(provider=provider.alias, url=url)
