"""
预设数据模型

预设有两种形态：由编码器/硬件加速/画质组成的预定义预设，以及原样传递给输出端的自定义参数
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ffmpeg_preset.preset.catalog import Codec, HardwareAccelerator, Quality, token_form


@dataclass(frozen=True)
class PredefinedPreset:
    """预定义预设"""

    codec: Codec
    hwaccel: Optional[HardwareAccelerator] = None
    quality: Quality = Quality.NORMAL

    def __str__(self) -> str:
        quality = None if self.quality is Quality.NORMAL else self.quality
        return token_form(self.codec, self.hwaccel, quality)

    def to_ffmpeg_args(self) -> Tuple[List[str], List[str]]:
        """转换为 (输入参数, 输出参数)"""
        from ffmpeg_preset.preset.compiler import compile_preset

        return compile_preset(self)


@dataclass(frozen=True)
class CustomPreset:
    """自定义预设，args 为 shell 风格的输出参数字符串"""

    args: Optional[str] = None

    def __str__(self) -> str:
        return self.args or ""

    def to_ffmpeg_args(self) -> Tuple[List[str], List[str]]:
        """转换为 (输入参数, 输出参数)"""
        from ffmpeg_preset.preset.compiler import compile_preset

        return compile_preset(self)


Preset = Union[PredefinedPreset, CustomPreset]

# 未配置预设时直接复制音视频流
DEFAULT_PRESET = CustomPreset("-c:v copy -c:a copy")
