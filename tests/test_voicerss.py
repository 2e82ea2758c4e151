"""Tests for VoiceRSS options validation and URL assembly."""

from __future__ import annotations

import pytest

from tts_urls.catalog.formats import Codec
from tts_urls.catalog.languages import Language
from tts_urls.providers.voicerss import VoiceRSSOptions, VoiceRSSProvider, url
from tts_urls.schemas.errors import (
    InvalidEnumValueError,
    InvalidKeyFormatError,
    InvalidRangeError,
    MissingApiKeyError,
)


# -- URL assembly -------------------------------------------------------------


def test_chained_setters():
    result = (
        VoiceRSSOptions()
        .set_language("de-de")
        .set_audio_format("32khz_16bit_stereo")
        .set_codec("mp3")
        .build_url("key", "Hallo Welt!")
    )
    assert result == (
        "http://api.voicerss.org/?key=key&hl=de-de&c=mp3&f=32khz_16bit_stereo&src=Hallo%20Welt%21"
    )


def test_constructor_matches_setters():
    built = VoiceRSSOptions(language="de-de", audio_format="32khz_16bit_stereo", codec="mp3")
    chained = (
        VoiceRSSOptions().set_language("de-de").set_audio_format("32khz_16bit_stereo").set_codec("mp3")
    )
    assert built == chained
    assert built.build_url("key", "Hallo Welt!") == chained.build_url("key", "Hallo Welt!")


def test_unicode_text():
    result = VoiceRSSOptions().set_language("ru-ru").build_url("key", "Добрый день!")
    assert result == (
        "http://api.voicerss.org/?key=key&hl=ru-ru"
        "&src=%D0%94%D0%BE%D0%B1%D1%80%D1%8B%D0%B9%20%D0%B4%D0%B5%D0%BD%D1%8C%21"
    )


def test_full_parameter_order():
    options = (
        VoiceRSSOptions()
        .set_base64(False)
        .set_ssml(True)
        .set_audio_format("44khz_16bit_stereo")
        .set_codec(Codec.MP3)
        .set_speed(2)
        .set_voice("Hanna")
        .set_language(Language.DE_DE)
    )
    assert options.build_url("abc123", "Hallo Welt!") == (
        "http://api.voicerss.org/?key=abc123&hl=de-de&v=Hanna&r=2&c=mp3"
        "&f=44khz_16bit_stereo&sml=true&b64=false&src=Hallo%20Welt%21"
    )


def test_language_only_omits_optional_params():
    result = VoiceRSSOptions().set_language("en-gb").build_url("key", "Hello")
    for param in ("v=", "r=", "c=", "f=", "sml=", "b64="):
        assert f"&{param}" not in result
    assert "&hl=en-gb" in result
    assert result.endswith("&src=Hello")


def test_default_language():
    assert url("key", "Hi") == "http://api.voicerss.org/?key=key&hl=en-us&src=Hi"
    assert VoiceRSSOptions().build_url("key", "Hi") == url("key", "Hi")


def test_voice_is_encoded():
    result = VoiceRSSOptions().set_voice("Mary Ann").build_url("key", "x")
    assert "&v=Mary%20Ann&" in result


def test_text_is_always_last():
    result = VoiceRSSOptions(speed=-3, ssml=False).build_url("key", "a&b=c")
    assert result.endswith("&sml=false&src=a%26b%3Dc")
    assert "&r=-3&" in result


def test_setters_return_same_object():
    options = VoiceRSSOptions()
    assert options.set_language("en-us") is options
    assert options.set_voice("Amy") is options
    assert options.set_speed(0) is options
    assert options.set_codec("wav") is options
    assert options.set_audio_format("8khz_8bit_mono") is options
    assert options.set_ssml(False) is options
    assert options.set_base64(True) is options


# -- speed --------------------------------------------------------------------


@pytest.mark.parametrize("speed", [11, -11, 100])
def test_speed_out_of_range(speed):
    with pytest.raises(InvalidRangeError, match="between -10 and 10"):
        VoiceRSSOptions().set_speed(speed)


def test_speed_out_of_range_in_constructor():
    with pytest.raises(InvalidRangeError):
        VoiceRSSOptions(speed=11)


@pytest.mark.parametrize("speed", [-10, 0, 10])
def test_speed_bounds_inclusive(speed):
    result = VoiceRSSOptions().set_speed(speed).build_url("key", "x")
    assert f"&r={speed}&" in result


def test_integral_float_speed_is_narrowed():
    assert VoiceRSSOptions().set_speed(3.0).speed == 3


@pytest.mark.parametrize("speed", [2.5, True, "3"])
def test_non_integer_speed_rejected(speed):
    with pytest.raises(TypeError):
        VoiceRSSOptions().set_speed(speed)


def test_rejected_speed_leaves_options_unchanged():
    options = VoiceRSSOptions().set_speed(4)
    with pytest.raises(InvalidRangeError):
        options.set_speed(-11)
    assert options.speed == 4


# -- enumerations -------------------------------------------------------------


def test_unknown_audio_format():
    with pytest.raises(InvalidEnumValueError) as exc:
        VoiceRSSOptions().set_audio_format("96khz_24bit_stereo")
    assert exc.value.param == "audio_format"


def test_codec_aliases():
    assert VoiceRSSOptions().set_codec("MPEG").codec is Codec.MP3
    assert VoiceRSSOptions(codec="Vorbis").codec is Codec.OGG


def test_unknown_codec():
    with pytest.raises(InvalidEnumValueError, match="codec"):
        VoiceRSSOptions().set_codec("flac")


def test_language_normalized():
    assert VoiceRSSOptions().set_language("EN_GB").language is Language.EN_GB


def test_unknown_language():
    with pytest.raises(InvalidEnumValueError, match="language"):
        VoiceRSSOptions(language="xx-yy")


# -- key ----------------------------------------------------------------------


@pytest.mark.parametrize("text", ["", "Hello"])
def test_invalid_key(text):
    with pytest.raises(InvalidKeyFormatError):
        VoiceRSSOptions().build_url("/?;", text)


def test_key_with_dash_rejected():
    with pytest.raises(InvalidKeyFormatError):
        url("fb63a2b3-c053", "x")


def test_alphanumeric_key_accepted():
    assert url("fb63a2b3c053488db5eaeae654f47b06", "x").startswith(
        "http://api.voicerss.org/?key=fb63a2b3c053488db5eaeae654f47b06&hl=en-us"
    )


# -- VoiceRSSProvider ---------------------------------------------------------


def test_provider_requires_key():
    provider = VoiceRSSProvider()
    with pytest.raises(MissingApiKeyError):
        provider.build_url("Hello")


def test_provider_uses_configured_key_and_language():
    provider = VoiceRSSProvider(api_key="secret", default_language="fr-fr")
    assert provider.build_url("Bonjour") == "http://api.voicerss.org/?key=secret&hl=fr-fr&src=Bonjour"


def test_provider_request_key_wins():
    provider = VoiceRSSProvider(api_key="secret")
    result = provider.build_url("x", key="other", codec="mp3", voice="Alice")
    assert result == "http://api.voicerss.org/?key=other&hl=en-us&v=Alice&c=mp3&src=x"


def test_provider_validates_options():
    provider = VoiceRSSProvider(api_key="secret")
    with pytest.raises(InvalidRangeError):
        provider.build_url("x", speed=-11)
    with pytest.raises(InvalidKeyFormatError):
        provider.build_url("x", key="bad key")


def test_provider_metadata():
    provider = VoiceRSSProvider()
    assert provider.requires_key() is True
    assert provider.get_host() == "api.voicerss.org"
    assert "ru-ru" in provider.get_languages()
