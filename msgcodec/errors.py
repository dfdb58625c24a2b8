"""Error taxonomy for envelope compression."""


class CodecError(Exception):
    """Base class for every error raised by msgcodec."""


class UnknownCodecError(CodecError):
    """The envelope names a codec code that was never registered."""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"codec {code} not imported.")


class EncodeError(CodecError):
    """The codec failed to compress a payload."""

    def __init__(self, codec: str, cause: BaseException):
        self.codec = codec
        self.cause = cause
        super().__init__(f"{codec}: encode failed: {cause}")


class DecodeError(CodecError):
    """The codec failed to decompress a payload (corrupt, truncated or foreign bytes)."""

    def __init__(self, codec: str, cause: BaseException):
        self.codec = codec
        self.cause = cause
        super().__init__(f"{codec}: decode failed: {cause}")


class RegistrationError(CodecError):
    """A codec could not be registered: reserved code, duplicate, or registry frozen."""
