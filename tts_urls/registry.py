from __future__ import annotations

from dataclasses import dataclass

from tts_urls.providers.base import UrlProvider


@dataclass
class ProviderInfo:
    alias: str
    name: str
    host: str
    requires_key: bool


class ProviderRegistry:
    def __init__(self) -> None:
        self._providers: dict[str, UrlProvider] = {}

    def register(self, provider: UrlProvider) -> None:
        self._providers[provider.alias] = provider

    def get(self, alias: str) -> UrlProvider:
        if alias not in self._providers:
            raise KeyError(f"Provider not found: {alias!r}")
        return self._providers[alias]

    def has_provider(self, alias: str) -> bool:
        return alias in self._providers

    def list_providers(self) -> list[ProviderInfo]:
        return [
            ProviderInfo(
                alias=alias,
                name=provider.name,
                host=provider.get_host(),
                requires_key=provider.requires_key(),
            )
            for alias, provider in self._providers.items()
        ]

    def clear(self) -> None:
        self._providers.clear()
