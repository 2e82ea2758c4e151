from fastapi import APIRouter, Request

from tts_urls.catalog.formats import AUDIO_FORMATS, Codec
from tts_urls.catalog.languages import Language
from tts_urls.schemas.responses import (
    LanguageListResponse,
    LanguageObject,
    ProviderListResponse,
    ProviderObject,
    ValueListResponse,
)

router = APIRouter()


@router.get("/providers")
async def list_providers(request: Request) -> ProviderListResponse:
    registry = request.app.state.registry

    data = [
        ProviderObject(
            id=p.alias,
            name=p.name,
            host=p.host,
            requires_key=p.requires_key,
        )
        for p in registry.list_providers()
    ]

    return ProviderListResponse(data=data)


@router.get("/voicerss/languages")
async def list_voicerss_languages() -> LanguageListResponse:
    return LanguageListResponse(
        data=[
            LanguageObject(code=lang.to_wire_string(), name=lang.display_name, voices=lang.voices)
            for lang in Language
        ]
    )


@router.get("/voicerss/codecs")
async def list_voicerss_codecs() -> ValueListResponse:
    return ValueListResponse(data=[codec.to_wire_string() for codec in Codec])


@router.get("/voicerss/audio-formats")
async def list_voicerss_audio_formats() -> ValueListResponse:
    return ValueListResponse(data=list(AUDIO_FORMATS))
