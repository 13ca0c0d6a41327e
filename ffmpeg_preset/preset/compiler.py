"""
参数编译模块

把已校验的预设编译为 FFmpeg 的输入参数和输出参数
"""

import shlex
from typing import Dict, List, Optional, Tuple

from ffmpeg_preset.preset.catalog import Codec, HardwareAccelerator, Quality
from ffmpeg_preset.preset.models import CustomPreset, Preset
from ffmpeg_preset.utils.config import config
from ffmpeg_preset.utils.logger import get_logger

logger = get_logger(__name__)

# CRF 数值，越小画质越高
CRF_VALUES: Dict[Codec, Dict[Quality, str]] = {
    Codec.H264: {Quality.LOSSLESS: "18", Quality.LOW: "35"},
    Codec.H265: {Quality.LOSSLESS: "20", Quality.LOW: "35"},
    Codec.AV1: {Quality.LOSSLESS: "22", Quality.LOW: "35"},
}

# VideoToolbox 忽略 -crf，改用 1-100 的 -q:v（100 为无损），由 (1 - crf/51) * 99 + 1 估算
VIDEOTOOLBOX_QUALITY_VALUES: Dict[Codec, Dict[Quality, str]] = {
    Codec.H264: {Quality.LOSSLESS: "65", Quality.LOW: "32"},
    Codec.H265: {Quality.LOSSLESS: "61", Quality.LOW: "32"},
}

CUDA_DECODE_ARGS = [
    "-hwaccel", "cuda",
    "-hwaccel_output_format", "cuda",
    "-c:v", "h264_cuvid",
]

VIDEO_ENCODERS: Dict[Tuple[Codec, Optional[HardwareAccelerator]], str] = {
    (Codec.H264, None): "libx264",
    (Codec.H264, HardwareAccelerator.NVIDIA): "h264_nvenc",
    (Codec.H264, HardwareAccelerator.AMD): "h264_amf",
    (Codec.H264, HardwareAccelerator.APPLE): "h264_videotoolbox",
    (Codec.H265, None): "libx265",
    (Codec.H265, HardwareAccelerator.NVIDIA): "hevc_nvenc",
    (Codec.H265, HardwareAccelerator.AMD): "hevc_amf",
    (Codec.H265, HardwareAccelerator.APPLE): "hevc_videotoolbox",
    (Codec.AV1, HardwareAccelerator.AMD): "av1_amf",
}

# AV1 仅 AMD 有硬件编码器，其它情况回落到 SVT-AV1
AV1_SOFTWARE_ENCODER = "libsvtav1"


def quality_args(
    codec: Codec, hwaccel: Optional[HardwareAccelerator], quality: Quality
) -> Optional[Tuple[str, str]]:
    """
    获取画质参数

    Returns:
        如 ("-crf", "18")；NORMAL 画质返回 None
    """
    if hwaccel is HardwareAccelerator.APPLE and codec in VIDEOTOOLBOX_QUALITY_VALUES:
        value = VIDEOTOOLBOX_QUALITY_VALUES[codec].get(quality)
        return ("-q:v", value) if value else None

    value = CRF_VALUES[codec].get(quality)
    return ("-crf", value) if value else None


def _video_encoder(codec: Codec, hwaccel: Optional[HardwareAccelerator]) -> str:
    if codec is Codec.AV1:
        return VIDEO_ENCODERS.get((codec, hwaccel), AV1_SOFTWARE_ENCODER)
    return VIDEO_ENCODERS[(codec, hwaccel)]


def _split_custom_args(args: Optional[str]) -> List[str]:
    if args is None:
        return []
    try:
        return shlex.split(args)
    except ValueError as e:
        logger.warning(f"无法解析自定义参数 {args!r}: {e}")
        return []


def compile_preset(preset: Preset) -> Tuple[List[str], List[str]]:
    """
    编译预设

    Args:
        preset: 已校验的预设

    Returns:
        (输入参数, 输出参数)，输入参数位于 -i 之前
    """
    if isinstance(preset, CustomPreset):
        return [], _split_custom_args(preset.args)

    codec, hwaccel, quality = preset.codec, preset.hwaccel, preset.quality
    input_args: List[str] = []
    output_args: List[str] = []

    if hwaccel is HardwareAccelerator.NVIDIA and codec is not Codec.AV1:
        input_args.extend(CUDA_DECODE_ARGS)

    flag = quality_args(codec, hwaccel, quality)
    if flag:
        output_args.extend(flag)

    output_args.extend(["-c:v", _video_encoder(codec, hwaccel), "-c:a", "copy"])
    if codec is Codec.H265:
        output_args.extend(["-tag:v", "hvc1"])

    return input_args, output_args


def build_command(
    preset: Preset,
    input_path: str,
    output_path: str,
    ffmpeg_path: Optional[str] = None,
) -> List[str]:
    """
    构建完整的 FFmpeg 命令（不执行）

    Args:
        preset: 已校验的预设
        input_path: 输入文件路径
        output_path: 输出文件路径
        ffmpeg_path: FFmpeg 可执行文件路径，默认取配置

    Returns:
        命令参数列表
    """
    input_args, output_args = compile_preset(preset)
    return [
        ffmpeg_path or config.ffmpeg_path,
        "-y",
        *input_args,
        "-i", input_path,
        *output_args,
        output_path,
    ]
