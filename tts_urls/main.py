import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tts_urls.config import TtsUrlsConfig, load_config
from tts_urls.providers.google_translate import GoogleTranslateProvider
from tts_urls.providers.voicerss import VoiceRSSProvider
from tts_urls.registry import ProviderRegistry
from tts_urls.routes import providers, urls
from tts_urls.schemas.errors import TtsUrlsError

logger = logging.getLogger("tts_urls")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def build_registry(config: TtsUrlsConfig) -> ProviderRegistry:
    registry = ProviderRegistry()
    registry.register(GoogleTranslateProvider(default_language=config.google_translate.language))
    registry.register(
        VoiceRSSProvider(
            api_key=config.voicerss.api_key,
            default_language=config.voicerss.language,
        )
    )
    return registry


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = load_config()
    configure_logging(config.server.log_level)

    registry = build_registry(config)
    if config.voicerss.api_key is None:
        logger.warning("No VoiceRSS API key configured; requests must supply one")

    app.state.config = config
    app.state.registry = registry

    logger.info("tts-urls started on %s:%d", config.server.host, config.server.port)

    yield

    registry.clear()
    logger.info("tts-urls shutdown complete")


def create_app() -> FastAPI:
    application = FastAPI(title="tts-urls", version="0.1.0", lifespan=lifespan)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(urls.router, prefix="/v1")
    application.include_router(providers.router, prefix="/v1")

    @application.exception_handler(TtsUrlsError)
    async def tts_urls_error_handler(request: Request, exc: TtsUrlsError):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response().model_dump(),
        )

    @application.get("/health")
    async def health(request: Request):
        registry: ProviderRegistry = request.app.state.registry
        return {
            "status": "ok",
            "providers": [info.alias for info in registry.list_providers()],
        }

    @application.get("/ready")
    async def ready(request: Request):
        return {"status": "ok"}

    return application


app = create_app()

if __name__ == "__main__":
    import uvicorn

    config = load_config()
    uvicorn.run(
        "tts_urls.main:app",
        host=config.server.host,
        port=config.server.port,
        workers=config.server.workers,
    )
