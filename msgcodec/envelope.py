"""Message envelope: a payload plus the code of the codec it is (or will be) compressed with.

Encoding and decoding never mutate the envelope; each returns a new one so
the original stays available for retries and logging.
"""

from dataclasses import dataclass, replace

from msgcodec.errors import DecodeError, EncodeError, UnknownCodecError
from msgcodec.registry import CODEC_NONE, Codec, CodecRegistry, check_code


@dataclass(frozen=True)
class Envelope:
    value: bytes = b""
    codec: int = CODEC_NONE

    def __post_init__(self):
        if isinstance(self.value, (bytearray, memoryview)):
            object.__setattr__(self, "value", bytes(self.value))
        elif not isinstance(self.value, bytes):
            raise TypeError(f"Envelope value must be bytes, got {type(self.value).__name__}")
        check_code(self.codec)

    def encode(self, registry: CodecRegistry) -> "Envelope":
        """Compress the value with the envelope's codec.

        Raises:
            UnknownCodecError: no codec registered under ``self.codec``.
            EncodeError: the codec failed; the original exception is chained.
        """
        if self.codec == CODEC_NONE:
            return replace(self)

        codec = _resolve(registry, self.codec)
        try:
            data = codec.compress(self.value)
        except Exception as exc:
            raise EncodeError(codec.name, exc) from exc
        return Envelope(value=data, codec=self.codec)

    def decode(self, registry: CodecRegistry) -> "Envelope":
        """Restore the original value of a compressed envelope.

        Raises:
            UnknownCodecError: no codec registered under ``self.codec``.
            DecodeError: the payload is corrupt, truncated or not produced by this codec.
        """
        if self.codec == CODEC_NONE:
            return replace(self)

        codec = _resolve(registry, self.codec)
        try:
            data = codec.decompress(self.value)
        except Exception as exc:
            raise DecodeError(codec.name, exc) from exc
        return Envelope(value=data, codec=self.codec)


def _resolve(registry: CodecRegistry, code: int) -> Codec:
    codec = registry.lookup(code)
    if codec is None:
        raise UnknownCodecError(code)
    return codec


def encode(envelope: Envelope, registry: CodecRegistry) -> Envelope:
    return envelope.encode(registry)


def decode(envelope: Envelope, registry: CodecRegistry) -> Envelope:
    return envelope.decode(registry)
