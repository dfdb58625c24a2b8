"""Startup configuration: which codecs to enable and how to tune them.

Values come from an optional YAML file, then environment variables override.
Only the startup sequence reads this; encoding and decoding never do.
"""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

ALL_CODECS = ("gzip", "snappy", "lz4", "zstd")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


def parse_codecs(value) -> tuple[str, ...]:
    if isinstance(value, str):
        value = value.split(",")
    return tuple(name.strip().lower() for name in value if str(name).strip())


@dataclass(frozen=True)
class CodecConfig:
    codecs: tuple[str, ...] = ALL_CODECS
    gzip_level: int = 6
    lz4_level: int = 0
    zstd_level: int = 3
    snappy_xerial: bool = True


def load_yaml_config(path: str | None) -> dict:
    """Load codec settings from a YAML file. Returns empty dict if no path or file."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    logger.info("Loaded codec config from %s", path)
    # settings may sit at the top level or under a "compression" key
    section = data.get("compression", data)
    return section if isinstance(section, dict) else {}


def load_codec_config(path: str | None = None) -> CodecConfig:
    """Build CodecConfig from YAML (``path`` or ``MSGCODEC_CONFIG``), then env vars."""
    yaml_data = load_yaml_config(path or os.environ.get("MSGCODEC_CONFIG"))

    codecs = parse_codecs(yaml_data.get("codecs", CodecConfig.codecs))
    gzip_level = int(yaml_data.get("gzip_level", CodecConfig.gzip_level))
    lz4_level = int(yaml_data.get("lz4_level", CodecConfig.lz4_level))
    zstd_level = int(yaml_data.get("zstd_level", CodecConfig.zstd_level))
    snappy_xerial = _parse_bool(yaml_data.get("snappy_xerial", CodecConfig.snappy_xerial))

    return CodecConfig(
        codecs=parse_codecs(os.environ["MSGCODEC_CODECS"]) if "MSGCODEC_CODECS" in os.environ else codecs,
        gzip_level=int(os.environ.get("MSGCODEC_GZIP_LEVEL", gzip_level)),
        lz4_level=int(os.environ.get("MSGCODEC_LZ4_LEVEL", lz4_level)),
        zstd_level=int(os.environ.get("MSGCODEC_ZSTD_LEVEL", zstd_level)),
        snappy_xerial=_parse_bool(os.environ.get("MSGCODEC_SNAPPY_XERIAL", snappy_xerial)),
    )
