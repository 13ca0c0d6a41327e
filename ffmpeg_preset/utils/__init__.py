"""工具模块 - 配置、日志等"""

from ffmpeg_preset.utils.config import config
from ffmpeg_preset.utils.logger import get_logger

__all__ = ["config", "get_logger"]
