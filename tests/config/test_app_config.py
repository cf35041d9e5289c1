#!filepath: tests/config/test_app_config.py
import os

import yaml
import pytest
from pydantic import ValidationError

from calendar_intervals.config import AppConfig, GeneratorConfig, LogConfig
from calendar_intervals.config.app_config import project_root
from calendar_intervals.core.grouping import Grouping


@pytest.fixture
def sample_config_file(tmp_path):
    """
    创建临时 YAML 配置文件用于测试
    """
    data = {
        "log": {
            "dir": str(tmp_path / "logs"),
            "rotation": "1 day",
            "retention": "7 days",
            "level": "DEBUG",
        },
        "generator": {
            "grouping": "per_week",
            "precision": "1us",
            "offset_west_seconds": -7200,
            "extend_begin": False,
            "extend_end": True,
        },
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for key in (
        "CALENDAR_INTERVALS_LOG_LEVEL",
        "CALENDAR_INTERVALS_GROUPING",
        "CALENDAR_INTERVALS_OFFSET_WEST",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_app_config_load(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg, AppConfig)
    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.generator, GeneratorConfig)


def test_generator_config_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.generator.grouping is Grouping.PER_WEEK
    assert cfg.generator.precision == "1us"
    assert cfg.generator.offset_west_seconds == -7200
    assert cfg.generator.extend_begin is False
    assert cfg.generator.extend_end is True


def test_log_config_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "DEBUG"
    assert cfg.log.retention == "7 days"


def test_default_base_yml():
    cfg = AppConfig.load()

    assert cfg.generator == GeneratorConfig()
    assert cfg.log.dir is None


def test_partial_file_uses_defaults(tmp_path):
    f = tmp_path / "partial.yaml"
    f.write_text(yaml.safe_dump({"generator": {"grouping": "month"}}), encoding="utf-8")

    cfg = AppConfig.load(path=str(f))

    assert cfg.generator.grouping is Grouping.PER_MONTH
    assert cfg.generator.precision == "1ms"
    assert cfg.log == LogConfig()


def test_env_overrides_file(sample_config_file, monkeypatch):
    monkeypatch.setenv("CALENDAR_INTERVALS_GROUPING", "per_day")
    monkeypatch.setenv("CALENDAR_INTERVALS_OFFSET_WEST", "25200")
    monkeypatch.setenv("CALENDAR_INTERVALS_LOG_LEVEL", "ERROR")

    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.generator.grouping is Grouping.PER_DAY
    assert cfg.generator.offset_west_seconds == 25200
    assert cfg.log.level == "ERROR"


def test_dotenv_file_is_loaded(sample_config_file, tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("CALENDAR_INTERVALS_GROUPING=per_month\n", encoding="utf-8")

    cfg = AppConfig.load(path=str(sample_config_file), env_file=str(env_file))

    assert cfg.generator.grouping is Grouping.PER_MONTH


def test_missing_file_should_fail(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yaml"))


@pytest.mark.parametrize(
    "generator",
    [
        {"grouping": "hourly"},
        {"precision": "garbage"},
        {"offset_west_seconds": 86_400},
    ],
)
def test_invalid_generator_section_should_fail(tmp_path, generator):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"generator": generator}), encoding="utf-8")

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad_file))


def test_dotenv_in_cwd_is_ignored(sample_config_file, tmp_path):
    """
    默认 .env 固定在 project_root()，与当前工作目录无关
    """
    (tmp_path / ".env").write_text("CALENDAR_INTERVALS_GROUPING=per_month\n", encoding="utf-8")

    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.generator.grouping is Grouping.PER_WEEK


def test_project_root_contains_package():
    assert os.path.isdir(os.path.join(project_root(), "calendar_intervals"))
