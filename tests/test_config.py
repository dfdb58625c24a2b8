"""Tests for msgcodec/config.py — CodecConfig, YAML loading, env overrides."""

import dataclasses

import pytest

from msgcodec.config import (
    ALL_CODECS,
    CodecConfig,
    _parse_bool,
    load_codec_config,
    load_yaml_config,
    parse_codecs,
)

ENV_VARS = [
    "MSGCODEC_CONFIG",
    "MSGCODEC_CODECS",
    "MSGCODEC_GZIP_LEVEL",
    "MSGCODEC_LZ4_LEVEL",
    "MSGCODEC_ZSTD_LEVEL",
    "MSGCODEC_SNAPPY_XERIAL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# ── helpers ────────────────────────────────────────────────────────


class TestParseBool:
    @pytest.mark.parametrize("value", ["true", "True", "1", "yes", " YES ", True])
    def test_truthy_values(self, value):
        assert _parse_bool(value) is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "", "random", False])
    def test_falsy_values(self, value):
        assert _parse_bool(value) is False


class TestParseCodecs:
    def test_comma_separated_string(self):
        assert parse_codecs("gzip, LZ4 ,zstd") == ("gzip", "lz4", "zstd")

    def test_list(self):
        assert parse_codecs(["snappy", "gzip"]) == ("snappy", "gzip")

    def test_empty_entries_dropped(self):
        assert parse_codecs("gzip,,") == ("gzip",)
        assert parse_codecs("") == ()


# ── CodecConfig ────────────────────────────────────────────────────


class TestCodecConfigDefaults:
    def test_defaults(self):
        cfg = CodecConfig()
        assert cfg.codecs == ALL_CODECS == ("gzip", "snappy", "lz4", "zstd")
        assert cfg.gzip_level == 6
        assert cfg.lz4_level == 0
        assert cfg.zstd_level == 3
        assert cfg.snappy_xerial is True

    def test_frozen(self):
        cfg = CodecConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.gzip_level = 9


# ── load_yaml_config ───────────────────────────────────────────────


class TestLoadYamlConfig:
    def test_no_path_returns_empty(self):
        assert load_yaml_config(None) == {}

    def test_missing_file_returns_empty(self, tmp_path):
        assert load_yaml_config(str(tmp_path / "absent.yml")) == {}

    def test_top_level_keys(self, tmp_path):
        path = tmp_path / "codecs.yml"
        path.write_text("codecs: [gzip]\ngzip_level: 9\n")
        assert load_yaml_config(str(path)) == {"codecs": ["gzip"], "gzip_level": 9}

    def test_compression_section(self, tmp_path):
        path = tmp_path / "app.yml"
        path.write_text("server:\n  port: 5000\ncompression:\n  zstd_level: 7\n")
        assert load_yaml_config(str(path)) == {"zstd_level": 7}

    def test_empty_file_returns_empty(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_yaml_config(str(path)) == {}

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "list.yml"
        path.write_text("- gzip\n- lz4\n")
        with pytest.raises(ValueError):
            load_yaml_config(str(path))


# ── load_codec_config ──────────────────────────────────────────────


class TestLoadCodecConfig:
    def test_defaults_without_file_or_env(self):
        assert load_codec_config() == CodecConfig()

    def test_yaml_values(self, tmp_path):
        path = tmp_path / "codecs.yml"
        path.write_text(
            "codecs: gzip,lz4\ngzip_level: 1\nlz4_level: 9\nzstd_level: 10\nsnappy_xerial: false\n"
        )
        cfg = load_codec_config(str(path))
        assert cfg.codecs == ("gzip", "lz4")
        assert cfg.gzip_level == 1
        assert cfg.lz4_level == 9
        assert cfg.zstd_level == 10
        assert cfg.snappy_xerial is False

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "codecs.yml"
        path.write_text("codecs: [gzip]\ngzip_level: 1\n")
        monkeypatch.setenv("MSGCODEC_CODECS", "snappy,zstd")
        monkeypatch.setenv("MSGCODEC_GZIP_LEVEL", "8")
        cfg = load_codec_config(str(path))
        assert cfg.codecs == ("snappy", "zstd")
        assert cfg.gzip_level == 8

    def test_config_path_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "codecs.yml"
        path.write_text("zstd_level: 12\n")
        monkeypatch.setenv("MSGCODEC_CONFIG", str(path))
        assert load_codec_config().zstd_level == 12

    def test_env_only(self, monkeypatch):
        monkeypatch.setenv("MSGCODEC_LZ4_LEVEL", "4")
        monkeypatch.setenv("MSGCODEC_ZSTD_LEVEL", "19")
        monkeypatch.setenv("MSGCODEC_SNAPPY_XERIAL", "no")
        cfg = load_codec_config()
        assert cfg.lz4_level == 4
        assert cfg.zstd_level == 19
        assert cfg.snappy_xerial is False

    def test_empty_codecs_env_disables_all(self, monkeypatch):
        monkeypatch.setenv("MSGCODEC_CODECS", "")
        assert load_codec_config().codecs == ()
