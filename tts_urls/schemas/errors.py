from pydantic import BaseModel


class ErrorDetail(BaseModel):
    message: str
    type: str
    param: str | None = None
    code: str | None = None


class ErrorResponse(BaseModel):
    error: ErrorDetail


class TtsUrlsError(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_type: str = "invalid_request_error",
        param: str | None = None,
        code: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.param = param
        self.code = code

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error=ErrorDetail(
                message=self.message,
                type=self.error_type,
                param=self.param,
                code=self.code,
            )
        )


class InvalidRangeError(TtsUrlsError):
    def __init__(self, param: str, value: object, low: int, high: int):
        super().__init__(
            message=f"{param} should be between {low} and {high}, got {value!r}.",
            status_code=400,
            error_type="invalid_request_error",
            param=param,
            code="invalid_range",
        )
        self.value = value
        self.low = low
        self.high = high


class InvalidEnumValueError(TtsUrlsError):
    def __init__(self, param: str, value: object):
        super().__init__(
            message=f"Unsupported {param}: {value!r}.",
            status_code=400,
            error_type="invalid_request_error",
            param=param,
            code="invalid_enum_value",
        )
        self.value = value


class InvalidKeyFormatError(TtsUrlsError):
    def __init__(self):
        super().__init__(
            message="API key should be alphanumeric.",
            status_code=400,
            error_type="invalid_request_error",
            param="key",
            code="invalid_key_format",
        )


class MissingApiKeyError(TtsUrlsError):
    def __init__(self, provider: str):
        super().__init__(
            message=f"Provider '{provider}' needs an API key and none was given or configured.",
            status_code=400,
            error_type="invalid_request_error",
            param="key",
            code="missing_api_key",
        )


class UnknownProviderError(TtsUrlsError):
    def __init__(self, provider: str):
        super().__init__(
            message=f"Provider '{provider}' not found.",
            status_code=404,
            error_type="invalid_request_error",
            param="provider",
            code="unknown_provider",
        )
