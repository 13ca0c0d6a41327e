"""
日志模块

提供统一的日志配置
"""

import logging
import sys
from typing import Iterator

from ffmpeg_preset.utils.config import config

ROOT_LOGGER_NAME = "ffmpeg_preset"


def _attach_handlers(logger: logging.Logger) -> None:
    """按当前配置挂载控制台/文件处理器"""
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # 日志走 stderr，stdout 留给参数输出
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def _package_loggers() -> Iterator[logging.Logger]:
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
            yield logger


def get_logger(name: str = None) -> logging.Logger:
    """
    获取日志记录器

    Args:
        name: 日志记录器名称，通常使用 __name__；需位于 ffmpeg_preset 命名空间下才会受 set_log_level 管理

    Returns:
        配置好的日志记录器
    """
    logger = logging.getLogger(name or ROOT_LOGGER_NAME)

    # 避免重复配置
    if logger.handlers:
        return logger

    _attach_handlers(logger)
    return logger


def reload_handlers() -> None:
    """配置重新加载后，按新配置重建已创建记录器的处理器"""
    for logger in _package_loggers():
        if not logger.handlers:
            continue
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        _attach_handlers(logger)


def set_log_level(level: str) -> None:
    """
    设置全局日志级别

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric = getattr(logging, level.upper())
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(numeric)
    for logger in _package_loggers():
        logger.setLevel(numeric)
        for handler in logger.handlers:
            handler.setLevel(numeric)
