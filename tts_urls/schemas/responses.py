from pydantic import BaseModel


class UrlResponse(BaseModel):
    provider: str
    url: str


class ProviderObject(BaseModel):
    id: str
    object: str = "provider"
    name: str
    host: str
    requires_key: bool


class ProviderListResponse(BaseModel):
    object: str = "list"
    data: list[ProviderObject] = []


class LanguageObject(BaseModel):
    code: str
    name: str
    voices: list[str] = []


class LanguageListResponse(BaseModel):
    object: str = "list"
    data: list[LanguageObject] = []


class ValueListResponse(BaseModel):
    object: str = "list"
    data: list[str] = []
