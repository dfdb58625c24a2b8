"""lz4 codec (code 3), LZ4 frame format."""

import lz4.frame

from msgcodec.registry import CODEC_LZ4


class LZ4Codec:
    code = CODEC_LZ4
    name = "lz4"

    def __init__(self, level: int = 0):
        # 0 is the fast mode, 3..16 select LZ4-HC
        if not 0 <= level <= lz4.frame.COMPRESSIONLEVEL_MAX:
            raise ValueError(
                f"lz4 level must be in [0, {lz4.frame.COMPRESSIONLEVEL_MAX}], got {level}"
            )
        self._level = level

    @property
    def level(self) -> int:
        return self._level

    def compress(self, data: bytes) -> bytes:
        return lz4.frame.compress(data, compression_level=self._level)

    def decompress(self, data: bytes) -> bytes:
        decompressor = lz4.frame.LZ4FrameDecompressor()
        result = decompressor.decompress(data)
        if not decompressor.eof:
            raise ValueError("Truncated lz4 frame: end mark not reached")
        if decompressor.unused_data:
            raise ValueError(
                f"{len(decompressor.unused_data)} unexpected byte(s) after the lz4 frame"
            )
        return result
