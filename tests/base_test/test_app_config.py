#!filepath: tests/base_test/test_app_config.py
import yaml
import pytest

from seqzip.config import AppConfig
from seqzip.config.log_config import LogConfig
from seqzip.utils.errors import UserInputError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("SEQZIP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SEQZIP_LOG_DIR", raising=False)


@pytest.fixture
def sample_config_file(tmp_path):
    """
    创建临时 YAML 配置文件用于测试，
    pytest 会自动清理该目录。
    """
    data = {
        "log": {
            "dir": "logs",
            "rotation": "1 day",
            "retention": "7 days",
            "level": "debug",
        }
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


def test_app_config_load(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg, AppConfig)
    assert isinstance(cfg.log, LogConfig)
    assert cfg.log.level == "DEBUG"
    assert cfg.log.dir == "logs"
    assert cfg.log.retention == "7 days"


def test_default_packaged_config():
    cfg = AppConfig.load()

    assert cfg.log.dir is None
    assert cfg.log.level == "WARNING"


def test_env_overrides_yaml(sample_config_file, monkeypatch, tmp_path):
    monkeypatch.setenv("SEQZIP_LOG_LEVEL", "error")
    monkeypatch.setenv("SEQZIP_LOG_DIR", str(tmp_path / "out"))

    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "ERROR"
    assert cfg.log.dir == str(tmp_path / "out")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yml"))


def test_invalid_level(tmp_path):
    bad = tmp_path / "bad.yml"
    bad.write_text(yaml.safe_dump({"log": {"level": "LOUD"}}), encoding="utf-8")

    with pytest.raises(UserInputError):
        AppConfig.load(path=str(bad))


@pytest.mark.parametrize("body", ["- a\n- b\n", "just a string\n", "42\n"])
def test_non_mapping_top_level(tmp_path, body):
    bad = tmp_path / "list.yml"
    bad.write_text(body, encoding="utf-8")

    with pytest.raises(UserInputError, match="top level must be a mapping"):
        AppConfig.load(path=str(bad))


def test_empty_yaml_uses_defaults(tmp_path):
    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")

    assert AppConfig.load(path=str(empty)).log == LogConfig()
