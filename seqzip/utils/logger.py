#!filepath: seqzip/utils/logger.py
import os
import sys
import json
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable, List, Optional

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


class Logging:
    """
    seqzip 日志模块
    ---------------------------------------
    - 导入时不添加任何 sink，由 init_logging 开启
    - 可选文件 sink：按日期切割 + 保留周期
    - 包含函数级日志装饰器 catch
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ):
        # 只记录配置，不在构造/导入时添加 sink
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level.upper()
        self._ids: List[int] = []

    def configure(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ) -> None:
        """
        (重新)配置 seqzip 自己的 sink；宿主程序已添加的 sink 保持不变
        """
        self.close()

        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level.upper()

        self._ids.append(
            logger.add(
                sys.stderr,
                level=self.level,
                format=_FORMAT,
                backtrace=True,
                diagnose=False,
            )
        )

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            self._ids.append(
                logger.add(
                    sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                    rotation=self.rotation,
                    retention=self.retention,
                    level=self.level,
                    format=_FORMAT,
                    enqueue=True,  # 多进程安全
                    backtrace=True,
                    diagnose=True,
                )
            )

    def close(self) -> None:
        """移除本实例添加的 sink（等待 enqueue 队列写完）"""
        for handler_id in self._ids:
            try:
                logger.remove(handler_id)
            except ValueError:
                # 已被宿主的 logger.remove() 移除
                continue
        self._ids = []

    # ---------- 基础接口封装 ----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = True,
    ) -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.debug(
                        f"[CALL] {func.__name__} args={args}, kwargs={json.dumps(kwargs, ensure_ascii=False, default=repr)}"
                    )

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.debug(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.6f}s")

                return result

            return wrapper

        return decorator


def init_logging(config) -> Logging:
    """
    用 LogConfig 重新配置全局 logs；已被 catch 装饰的函数同样生效
    """
    logs.configure(
        log_dir=config.dir,
        rotation=config.rotation,
        retention=config.retention,
        log_level=config.level,
    )
    return logs


# 默认全局 logs：导入时不添加 sink，由 init_logging 配置
logs = Logging()
