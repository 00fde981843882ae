#!filepath: seqzip/config/app_config.py
import yaml
from pydantic import BaseModel, Field, ValidationError
from dotenv import load_dotenv
import os

from .log_config import LogConfig
from seqzip.utils.errors import UserInputError

ENV_LOG_LEVEL = "SEQZIP_LOG_LEVEL"
ENV_LOG_DIR = "SEQZIP_LOG_DIR"


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    seqzip/config/app_config.py → seqzip/config → seqzip → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用打包在 seqzip/config/base.yml 的配置
        - 不依赖当前工作目录
        - SEQZIP_LOG_LEVEL / SEQZIP_LOG_DIR 覆盖 YAML 中的 log 配置
        """
        # 1) 先加载 .env（在项目根目录下，已存在的环境变量优先）
        load_dotenv(os.path.join(project_root(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise UserInputError(f"Invalid config {path}: top level must be a mapping")

        # 4) 从 env 注入覆盖项
        log_raw = dict(raw.get("log") or {})
        if os.getenv(ENV_LOG_LEVEL):
            log_raw["level"] = os.getenv(ENV_LOG_LEVEL)
        if os.getenv(ENV_LOG_DIR):
            log_raw["dir"] = os.getenv(ENV_LOG_DIR)
        raw["log"] = log_raw

        try:
            return cls(**raw)
        except ValidationError as e:
            raise UserInputError(f"Invalid config {path}: {e}") from e
