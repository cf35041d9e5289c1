from .app_config import AppConfig
from .generator_config import GeneratorConfig
from .log_config import LogConfig

__all__ = ["AppConfig", "GeneratorConfig", "LogConfig"]
