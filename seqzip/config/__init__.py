from .app_config import AppConfig
from .log_config import LogConfig

__all__ = ["AppConfig", "LogConfig"]
