"""
预设目录模块

定义编码器、硬件加速、画质三个维度，以及它们之间受支持的组合
"""

from enum import Enum
from functools import total_ordering
from pathlib import PurePath
from typing import List, Optional, Tuple

from ffmpeg_preset.preset.exceptions import PresetError

# 支持软字幕封装的容器格式
SOFTSUB_CONTAINERS: Tuple[str, ...] = ("mkv", "mov", "mp4")


@total_ordering
class PresetAxis(Enum):
    """
    预设维度基类

    枚举值即规范的小写名称，成员按声明顺序排序
    """

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        members = list(type(self))
        return members.index(self) < members.index(other)

    @classmethod
    def all(cls) -> List["PresetAxis"]:
        """按规范顺序返回全部成员"""
        return list(cls)

    @classmethod
    def find(cls, name: str) -> Optional["PresetAxis"]:
        """按名称查找成员（不区分大小写），找不到返回 None"""
        lowered = name.lower()
        for member in cls:
            if member.value == lowered:
                return member
        return None

    @classmethod
    def from_name(cls, name: str) -> "PresetAxis":
        """
        按名称解析成员

        Raises:
            PresetError: 名称不属于该维度
        """
        member = cls.find(name)
        if member is None:
            raise PresetError(f"{name} is not a valid {AXIS_LABELS[cls]}")
        return member


class Codec(PresetAxis):
    """目标视频编码"""

    H264 = "h264"
    H265 = "h265"
    AV1 = "av1"


class HardwareAccelerator(PresetAxis):
    """硬件加速后端"""

    NVIDIA = "nvidia"
    AMD = "amd"
    APPLE = "apple"


class Quality(PresetAxis):
    """画质档位，NORMAL 表示使用编码器默认值"""

    LOSSLESS = "lossless"
    NORMAL = "normal"
    LOW = "low"


AXIS_LABELS = {
    Codec: "codec",
    HardwareAccelerator: "hardware acceleration",
    Quality: "preset quality",
}

# 每种编码器允许的硬件加速
SUPPORTED_HWACCELS = {
    Codec.H264: HardwareAccelerator.all(),
    Codec.H265: HardwareAccelerator.all(),
    Codec.AV1: [HardwareAccelerator.AMD],
}

Match = Tuple[Codec, Optional[HardwareAccelerator], Optional[Quality]]


def available_matches() -> List[Match]:
    """
    获取全部受支持的 (编码器, 硬件加速, 画质) 组合

    每种编码器依次产出：仅编码器、编码器+硬件加速、编码器+画质、编码器+硬件加速+画质

    Returns:
        组合列表，缺省的维度为 None
    """
    matches: List[Match] = []

    for codec in Codec.all():
        hwaccels = SUPPORTED_HWACCELS[codec]
        qualities = Quality.all()

        matches.append((codec, None, None))
        for hwaccel in hwaccels:
            matches.append((codec, hwaccel, None))
        for quality in qualities:
            matches.append((codec, None, quality))
        for hwaccel in hwaccels:
            for quality in qualities:
                matches.append((codec, hwaccel, quality))

    return matches


def token_form(
    codec: Codec,
    hwaccel: Optional[HardwareAccelerator] = None,
    quality: Optional[Quality] = None,
) -> str:
    """把组合还原为预设字符串，如 "h265-nvidia-low" """
    return "-".join(str(part) for part in (codec, hwaccel, quality) if part is not None)


def _describe(
    codec: Codec,
    hwaccel: Optional[HardwareAccelerator],
    quality: Optional[Quality],
) -> str:
    details = []
    if hwaccel is not None:
        details.append(f"{hwaccel} hardware acceleration")
    if quality is not None:
        details.append(f"{quality} video quality/compression")

    if not details:
        return f"{codec} encoded with default video quality/compression"
    if len(details) == 1:
        return f"{codec} encoded with {details[0]}"
    return f"{codec} encoded with {', '.join(details[:-1])} and {details[-1]}"


def available_matches_human_readable() -> List[str]:
    """获取组合的可读描述，每项形如 "h264-nvidia (h264 encoded with nvidia hardware acceleration)" """
    return [
        f"{token_form(codec, hwaccel, quality)} ({_describe(codec, hwaccel, quality)})"
        for codec, hwaccel, quality in available_matches()
    ]


def supports_softsubs(path: str) -> bool:
    """
    判断输出文件（或扩展名）是否支持软字幕封装

    Args:
        path: 文件路径、"mkv" 或 ".mkv" 形式的扩展名
    """
    suffix = PurePath(path).suffix or path
    return suffix.lstrip(".").lower() in SOFTSUB_CONTAINERS
