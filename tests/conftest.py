from __future__ import annotations

import pytest

from tts_urls.config import ENV_OVERRIDES


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep host config files and environment overrides out of every test."""
    monkeypatch.setenv("TTS_URLS_CONFIG", str(tmp_path / "missing.yaml"))
    for env_var in ENV_OVERRIDES:
        monkeypatch.delenv(env_var, raising=False)
    return tmp_path
