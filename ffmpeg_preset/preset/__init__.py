"""预设模块 - 目录、解析与参数编译"""

from ffmpeg_preset.preset.catalog import (
    SOFTSUB_CONTAINERS,
    Codec,
    HardwareAccelerator,
    Quality,
    available_matches,
    available_matches_human_readable,
    supports_softsubs,
)
from ffmpeg_preset.preset.compiler import build_command, compile_preset, quality_args
from ffmpeg_preset.preset.exceptions import PresetError
from ffmpeg_preset.preset.models import DEFAULT_PRESET, CustomPreset, PredefinedPreset, Preset
from ffmpeg_preset.preset.parser import parse_preset

__all__ = [
    "Codec",
    "HardwareAccelerator",
    "Quality",
    "SOFTSUB_CONTAINERS",
    "available_matches",
    "available_matches_human_readable",
    "supports_softsubs",
    "Preset",
    "PredefinedPreset",
    "CustomPreset",
    "DEFAULT_PRESET",
    "PresetError",
    "parse_preset",
    "compile_preset",
    "quality_args",
    "build_command",
]
