"""snappy codec (code 2).

Other clients of the protocol write snappy payloads in the "xerial" framing
used by snappy-java:

  magic   8 bytes  \\x82 S N A P P Y \\x00
  version 4 bytes  big-endian int32 (1)
  compat  4 bytes  big-endian int32 (1)
  blocks  repeated [4-byte big-endian length][raw snappy block]

Decoding accepts both framed and unframed payloads.
"""

import struct

import snappy

from msgcodec.registry import CODEC_SNAPPY

XERIAL_MAGIC = b"\x82SNAPPY\x00"
XERIAL_VERSION = 1
XERIAL_COMPAT = 1
XERIAL_HEADER = XERIAL_MAGIC + struct.pack("!ii", XERIAL_VERSION, XERIAL_COMPAT)
XERIAL_BLOCK_SIZE = 32 * 1024

_BLOCK_LENGTH = struct.Struct("!i")


def xerial_encode(data: bytes, block_size: int = XERIAL_BLOCK_SIZE) -> bytes:
    """Compress *data* as a xerial-framed sequence of snappy blocks."""
    out = [XERIAL_HEADER]
    view = memoryview(data)
    for offset in range(0, len(data), block_size):
        block = snappy.compress(bytes(view[offset:offset + block_size]))
        out.append(_BLOCK_LENGTH.pack(len(block)))
        out.append(block)
    return b"".join(out)


def xerial_decode(data: bytes) -> bytes:
    """Decompress a xerial-framed payload.

    Raises:
        ValueError: the header is missing or a block is truncated.
    """
    if not data.startswith(XERIAL_MAGIC) or len(data) < len(XERIAL_HEADER):
        raise ValueError("Missing xerial snappy header")

    out = []
    pos = len(XERIAL_HEADER)
    while pos < len(data):
        if pos + _BLOCK_LENGTH.size > len(data):
            raise ValueError(f"Truncated xerial block length at offset {pos}")
        (length,) = _BLOCK_LENGTH.unpack_from(data, pos)
        pos += _BLOCK_LENGTH.size
        if length < 0 or pos + length > len(data):
            raise ValueError(f"Truncated xerial block at offset {pos}: need {length} bytes")
        out.append(snappy.decompress(data[pos:pos + length]))
        pos += length
    return b"".join(out)


class SnappyCodec:
    code = CODEC_SNAPPY
    name = "snappy"

    def __init__(self, xerial: bool = True):
        self._xerial = xerial

    @property
    def xerial(self) -> bool:
        return self._xerial

    def compress(self, data: bytes) -> bytes:
        if self._xerial:
            return xerial_encode(data)
        return snappy.compress(data)

    def decompress(self, data: bytes) -> bytes:
        if data.startswith(XERIAL_MAGIC):
            return xerial_decode(data)
        return snappy.decompress(data)
