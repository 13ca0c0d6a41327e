"""
FFmpeg Preset - 把预设字符串翻译为 FFmpeg 参数

将用户输入的预设（如 "h265-nvidia-low"）解析、校验，并编译为 FFmpeg 的输入/输出参数列表。
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ffmpeg-preset")
except PackageNotFoundError:
    # 未安装时（直接从源码目录运行）
    __version__ = "0.0.0-dev"

from ffmpeg_preset.preset import (
    DEFAULT_PRESET,
    SOFTSUB_CONTAINERS,
    Codec,
    CustomPreset,
    HardwareAccelerator,
    PredefinedPreset,
    Preset,
    PresetError,
    Quality,
    compile_preset,
    parse_preset,
)

__all__ = [
    "Codec",
    "HardwareAccelerator",
    "Quality",
    "Preset",
    "PredefinedPreset",
    "CustomPreset",
    "PresetError",
    "DEFAULT_PRESET",
    "SOFTSUB_CONTAINERS",
    "parse_preset",
    "compile_preset",
    "__version__",
]
