"""gzip codec (code 1), backed by the standard library."""

import gzip

from msgcodec.registry import CODEC_GZIP


class GzipCodec:
    code = CODEC_GZIP
    name = "gzip"

    def __init__(self, level: int = 6):
        if not 1 <= level <= 9:
            raise ValueError(f"gzip level must be in [1, 9], got {level}")
        self._level = level

    @property
    def level(self) -> int:
        return self._level

    def compress(self, data: bytes) -> bytes:
        return gzip.compress(data, compresslevel=self._level)

    def decompress(self, data: bytes) -> bytes:
        return gzip.decompress(data)
