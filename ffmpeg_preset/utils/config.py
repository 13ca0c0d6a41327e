"""
配置管理模块

支持从环境变量、配置文件加载配置
"""

import json
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional


@dataclass
class Config:
    """应用配置"""

    # FFmpeg 配置
    ffmpeg_path: str = "ffmpeg"
    preset: Optional[str] = None

    # 日志配置
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """从环境变量加载配置"""
        return cls(
            ffmpeg_path=os.getenv("FP_FFMPEG_PATH", "ffmpeg"),
            preset=os.getenv("FP_PRESET"),
            log_level=os.getenv("FP_LOG_LEVEL", "INFO"),
            log_file=os.getenv("FP_LOG_FILE"),
        )

    @classmethod
    def from_file(cls, path: str) -> "Config":
        """从 JSON 文件加载配置"""
        return cls(**read_config_file(path))

    def to_file(self, path: str) -> None:
        """保存配置到 JSON 文件"""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.__dict__, f, indent=2)


def read_config_file(path: str) -> Dict[str, Any]:
    """
    读取 JSON 配置文件

    Returns:
        文件中出现的配置项

    Raises:
        TypeError: 文件中有未知配置项
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    unknown = sorted(set(data) - {field.name for field in fields(Config)})
    if unknown:
        raise TypeError(f"未知配置项: {', '.join(unknown)}")
    return data


# 全局配置实例
config = Config.from_env()


def load_config(config_path: Optional[str] = None) -> Config:
    """
    加载配置

    优先级：配置文件 > 环境变量 > 默认值

    Args:
        config_path: 配置文件路径

    Returns:
        配置实例（原地更新全局 config，已导入的引用同样生效）
    """
    env_config = Config.from_env()
    for key, value in env_config.__dict__.items():
        setattr(config, key, value)

    # 如果有配置文件，只覆盖文件中出现的键
    if config_path and os.path.exists(config_path):
        for key, value in read_config_file(config_path).items():
            setattr(config, key, value)

    return config
