#!filepath: calendar_intervals/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .generator_config import GeneratorConfig

# 环境变量覆盖（优先级高于 YAML）
ENV_OVERRIDES = {
    "CALENDAR_INTERVALS_LOG_LEVEL": ("log", "level"),
    "CALENDAR_INTERVALS_GROUPING": ("generator", "grouping"),
    "CALENDAR_INTERVALS_OFFSET_WEST": ("generator", "offset_west_seconds"),
}


def package_root() -> str:
    """
    calendar_intervals/config/app_config.py → calendar_intervals/config
    """
    return os.path.abspath(os.path.dirname(__file__))


def project_root() -> str:
    """
    calendar_intervals/config → 仓库根目录（.env 所在位置）
    """
    return os.path.abspath(os.path.join(package_root(), "..", ".."))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)

    @classmethod
    def load(cls, path: str | None = None, env_file: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 calendar_intervals/config/base.yml
        - env_file 默认为 project_root() 下的 .env（不存在则忽略），与当前工作目录无关
        """
        load_dotenv(env_file or os.path.join(project_root(), ".env"))

        if path is None:
            path = os.path.join(package_root(), "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        for env_key, (section, field) in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value is not None:
                if raw.get(section) is None:
                    raw[section] = {}
                raw[section][field] = value

        return cls(**raw)
