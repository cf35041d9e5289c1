#!filepath: calendar_intervals/utils/logger.py
import os
import sys
from loguru import logger
from typing import List, Optional

# 库内日志默认静音；宿主应用的 sink 不受影响
logger.disable("calendar_intervals")


class Logging:
    """
    库级日志模块
    ---------------------------------------
    - import 时不 add / remove 任何 sink
    - configure() 只移除自己添加过的 sink（宿主的 sink 保留）
    - 指定 log_dir 后按日期切割 + 保留周期
    ---------------------------------------
    """

    def __init__(self):
        self.level = "WARNING"
        self.log_dir: Optional[str] = None
        self.rotation = "1 day"
        self.retention = "30 days"
        self._handler_ids: List[int] = []

    def configure(
        self,
        log_level: str = "WARNING",
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
    ) -> "Logging":
        """
        重复调用会覆盖本实例之前的 sink
        """
        self.level = log_level
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention

        for handler_id in self._handler_ids:
            try:
                logger.remove(handler_id)
            except ValueError:
                # 已被宿主 logger.remove() 清掉
                continue
        self._handler_ids = []

        logger.enable("calendar_intervals")

        self._handler_ids.append(
            logger.add(
                sink=sys.stderr,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                filter="calendar_intervals",
            )
        )

        if self.log_dir is not None:
            os.makedirs(self.log_dir, exist_ok=True)
            self._handler_ids.append(
                logger.add(
                    sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                    rotation=self.rotation,
                    retention=self.retention,
                    level=self.level,
                    format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                    filter="calendar_intervals",
                    enqueue=True,  # 多进程安全
                    backtrace=True,
                    diagnose=True,
                )
            )
            logger.info("-----------Logger initialized: {}-----------", self.log_dir)

        return self

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)


def init_logging(cfg) -> Logging:
    """
    用 LogConfig 重新配置全局 logs（同一个实例，不重新绑定）。
    cfg: calendar_intervals.config.log_config.LogConfig
    """
    return logs.configure(
        log_level=cfg.level,
        log_dir=cfg.dir,
        rotation=cfg.rotation,
        retention=cfg.retention,
    )


# 默认全局 logs：未配置，不触碰 loguru 的 handler 表
logs = Logging()
