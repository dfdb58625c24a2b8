"""zstd codec (code 4). A payload is exactly one zstd frame."""

import zstandard

from msgcodec.registry import CODEC_ZSTD


class ZstdCodec:
    """Compressor and decompressor contexts are not thread-safe, so each call builds its own."""

    code = CODEC_ZSTD
    name = "zstd"

    def __init__(self, level: int = 3):
        if not 1 <= level <= zstandard.MAX_COMPRESSION_LEVEL:
            raise ValueError(
                f"zstd level must be in [1, {zstandard.MAX_COMPRESSION_LEVEL}], got {level}"
            )
        self._level = level

    @property
    def level(self) -> int:
        return self._level

    def compress(self, data: bytes) -> bytes:
        return zstandard.ZstdCompressor(level=self._level, write_content_size=True).compress(data)

    def decompress(self, data: bytes) -> bytes:
        # decompressobj also handles frames whose header omits the content size
        dobj = zstandard.ZstdDecompressor().decompressobj()
        result = dobj.decompress(data)
        if not dobj.eof:
            raise ValueError("Truncated zstd frame: end of frame not reached")
        if dobj.unused_data:
            raise ValueError(f"{len(dobj.unused_data)} unexpected byte(s) after the zstd frame")
        return result
