from enum import StrEnum


class ErrorCode(StrEnum):
    encoding_error = "encoding_error"


class Err(Exception):
    """
    Base error carrying a machine-readable code and an optional
    human-readable detail message.
    """

    def __init__(self, code: ErrorCode, detail: str | None = None) -> None:
        self.code = code
        self.detail = detail
        super().__init__(f"{code}: {detail}" if detail else str(code))


class EncodingError(Err):
    """
    Raised by every conversion in this package: malformed base64/hex,
    invalid text for an encoding, malformed structured-value text,
    and entities failing validation on restore.
    """

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(ErrorCode.encoding_error, detail)


class ValidationFailed(EncodingError):
    """
    An entity was populated from raw data but its validate() returned False.
    """
