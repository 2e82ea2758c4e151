"""Print TTS URLs from the command line.

Usage:
    tts-urls google-translate "Hello, World!" --language en
    tts-urls google-translate "Добрый день!" --language ru --speed 0.24
    tts-urls voicerss "This is a test" --codec mp3 --voice Alice
    tts-urls serve

The VoiceRSS key is read from --key, or from VOICERSS_API_KEY / the config
file when --key is omitted.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from tts_urls.config import TtsUrlsConfig, load_config
from tts_urls.main import build_registry, configure_logging
from tts_urls.schemas.errors import TtsUrlsError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tts-urls", description="Build TTS service URLs")
    parser.add_argument("--log-level", default=None, help="override the configured log level")
    sub = parser.add_subparsers(dest="command", required=True)

    google = sub.add_parser("google-translate", help="Google Translate speech URL")
    google.add_argument("text")
    google.add_argument("--language", "-l", default=None)
    google.add_argument("--speed", type=float, default=None)

    voicerss = sub.add_parser("voicerss", help="VoiceRSS URL")
    voicerss.add_argument("text")
    voicerss.add_argument("--key", default=None)
    voicerss.add_argument("--language", "-l", default=None)
    voicerss.add_argument("--voice", default=None)
    voicerss.add_argument("--speed", type=int, default=None, help="-10 to 10")
    voicerss.add_argument("--codec", default=None)
    voicerss.add_argument("--audio-format", default=None)
    voicerss.add_argument("--ssml", action="store_true", default=None)
    voicerss.add_argument("--base64", action="store_true", default=None)

    sub.add_parser("serve", help="run the HTTP API")

    return parser


def _serve(config: TtsUrlsConfig) -> int:
    import uvicorn

    uvicorn.run(
        "tts_urls.main:app",
        host=config.server.host,
        port=config.server.port,
        workers=config.server.workers,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config()
    except ValidationError as e:
        print(f"error: invalid configuration\n{e}", file=sys.stderr)
        return 2
    configure_logging(args.log_level or config.server.log_level)

    if args.command == "serve":
        return _serve(config)

    registry = build_registry(config)

    try:
        if args.command == "google-translate":
            url = registry.get("google_translate").build_url(
                args.text, language=args.language, speed=args.speed
            )
        else:
            url = registry.get("voicerss").build_url(
                args.text,
                key=args.key,
                language=args.language,
                voice=args.voice,
                speed=args.speed,
                codec=args.codec,
                audio_format=args.audio_format,
                ssml=args.ssml,
                base64=args.base64,
            )
    except TtsUrlsError as e:
        logger.debug("Rejected %s request: %s", args.command, e.code)
        print(f"error: {e.message}", file=sys.stderr)
        return 2
    except UnicodeEncodeError:
        print("error: text is not valid Unicode (lone surrogate code point)", file=sys.stderr)
        return 2

    print(url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
