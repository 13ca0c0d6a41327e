"""
预设解析模块

把用户输入的字符串解析为预设：由 "-" 连接的单词视为预定义预设，其余原样作为自定义参数
"""

import re
from typing import Optional

from ffmpeg_preset.preset.catalog import (
    AXIS_LABELS,
    Codec,
    HardwareAccelerator,
    Quality,
    available_matches,
)
from ffmpeg_preset.preset.exceptions import PresetError
from ffmpeg_preset.preset.models import DEFAULT_PRESET, CustomPreset, PredefinedPreset, Preset
from ffmpeg_preset.utils.logger import get_logger

logger = get_logger(__name__)

PREDEFINED_PRESET = re.compile(r"\w+(-\w+)*")

# 多个 token 命中同一维度时的报错用语
_DUPLICATE_LABELS = {
    Codec: "codecs",
    HardwareAccelerator: "hardware accelerations",
    Quality: "preset qualities",
}


def _supported(
    codec: Codec, hwaccel: Optional[HardwareAccelerator], has_quality: bool
) -> bool:
    # 画质只校验是否出现，不限制具体档位
    return any(
        (c, h, q is not None) == (codec, hwaccel, has_quality)
        for c, h, q in available_matches()
    )


def parse_preset(text: Optional[str]) -> Preset:
    """
    解析预设字符串

    Args:
        text: 预设字符串，如 "h264-nvidia-low" 或 "-c:v libx265 -crf 28"；None 表示使用默认预设

    Returns:
        预定义预设或自定义预设

    Raises:
        PresetError: token 无法识别、同一维度重复、缺少编码器或组合不受支持
    """
    if text is None:
        return DEFAULT_PRESET

    if not PREDEFINED_PRESET.fullmatch(text):
        logger.debug(f"作为自定义参数处理: {text!r}")
        return CustomPreset(text)

    found = {Codec: None, HardwareAccelerator: None, Quality: None}
    for token in text.split("-"):
        for axis in (Codec, HardwareAccelerator, Quality):
            member = axis.find(token)
            if member is None:
                continue
            if found[axis] is not None:
                raise PresetError(
                    f"cannot use multiple {_DUPLICATE_LABELS[axis]} "
                    f"(found {found[axis]} and {member})"
                )
            found[axis] = member
            break
        else:
            raise PresetError(f"'{text}' is not a valid preset (unknown token '{token}')")

    codec = found[Codec]
    hwaccel = found[HardwareAccelerator]
    quality = found[Quality]

    if codec is None:
        raise PresetError("cannot use preset without a codec")

    if not _supported(codec, hwaccel, quality is not None):
        description = ", ".join(
            f"{AXIS_LABELS[axis]} {member}" for axis, member in found.items() if member is not None
        )
        raise PresetError(f"preset is not supported ({description})")

    preset = PredefinedPreset(codec, hwaccel, quality if quality is not None else Quality.NORMAL)
    logger.debug(f"解析预设 {text!r}: {preset!r}")
    return preset
