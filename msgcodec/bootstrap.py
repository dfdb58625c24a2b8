"""Startup sequence: build the codec registry from an explicit list of codecs.

Each codec module is imported only when it is enabled, so a process that
leaves a codec out does not need its compression library installed. Envelopes
using a left-out codec then fail with UnknownCodecError instead of crashing.
Call ``build_registry`` before any worker thread starts encoding or decoding.
"""

import importlib
import logging

from msgcodec.config import CodecConfig
from msgcodec.registry import CodecRegistry

logger = logging.getLogger(__name__)

CODEC_MODULES = {
    "gzip": "msgcodec.gzip_codec",
    "snappy": "msgcodec.snappy_codec",
    "lz4": "msgcodec.lz4_codec",
    "zstd": "msgcodec.zstd_codec",
}


def create_codec(name: str, config: CodecConfig):
    """Import the codec module for *name* and instantiate it from *config*."""
    if name not in CODEC_MODULES:
        raise ValueError(f"Unsupported codec: {name}")
    module = importlib.import_module(CODEC_MODULES[name])

    if name == "gzip":
        return module.GzipCodec(level=config.gzip_level)
    if name == "snappy":
        return module.SnappyCodec(xerial=config.snappy_xerial)
    if name == "lz4":
        return module.LZ4Codec(level=config.lz4_level)
    return module.ZstdCodec(level=config.zstd_level)


def build_registry(config: CodecConfig | None = None) -> CodecRegistry:
    """Register every codec enabled in *config* and return the frozen registry."""
    config = config or CodecConfig()
    registry = CodecRegistry()

    for name in config.codecs:
        registry.register_codec(create_codec(name, config))

    registry.freeze()
    logger.info(
        "Codec registry ready: %s",
        ", ".join(f"{c.name}({c.code})" for c in registry) or "none",
    )
    return registry
