from abc import ABC, abstractmethod


class UrlProvider(ABC):
    alias: str
    name: str

    @abstractmethod
    def build_url(self, text: str, **options) -> str: ...

    @abstractmethod
    def get_languages(self) -> list[str]: ...

    @abstractmethod
    def get_host(self) -> str: ...

    @abstractmethod
    def requires_key(self) -> bool: ...
