#!/usr/bin/env python3
"""
FFmpeg Preset 命令行入口

列出受支持的预设，或把预设编译为 FFmpeg 参数
"""

import argparse
import shlex
import sys

from ffmpeg_preset.preset import (
    PresetError,
    available_matches_human_readable,
    build_command,
    compile_preset,
    parse_preset,
)
from ffmpeg_preset.utils.config import config, load_config
from ffmpeg_preset.utils.logger import get_logger, reload_handlers, set_log_level

logger = get_logger("ffmpeg_preset.cli")


def main(argv=None):
    """FFmpeg Preset 命令行入口"""
    parser = argparse.ArgumentParser(
        prog="ffmpeg-preset",
        description="FFmpeg Preset - 把预设翻译为 FFmpeg 参数",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  # 查看可用预设
  ffmpeg-preset --list-presets

  # 查看预设对应的输入/输出参数
  ffmpeg-preset --preset h265-nvidia-low

  # 生成完整命令
  ffmpeg-preset -p av1-amd -i video.mkv -o output.mkv

  # 使用自定义参数
  ffmpeg-preset -p "-c:v libx265 -crf 28"
        """,
    )

    parser.add_argument("--list-presets", action="store_true", help="列出所有受支持的预设")
    parser.add_argument("--preset", "-p", type=str, help="预设名称或自定义 FFmpeg 参数 (默认: 复制音视频流)")
    parser.add_argument("--input", "-i", type=str, help="输入文件路径")
    parser.add_argument("--output", "-o", type=str, help="输出文件路径")

    # 配置
    parser.add_argument("--config", "-c", type=str, help="配置文件路径")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="日志级别 (默认: 取配置)",
    )

    args = parser.parse_args(argv)

    try:
        load_config(args.config)
    except (TypeError, ValueError) as e:
        print(f"错误: 配置文件无效: {e}", file=sys.stderr)
        return 2
    reload_handlers()
    set_log_level(args.log_level or config.log_level)

    if args.list_presets:
        for line in available_matches_human_readable():
            print(line)
        return 0

    preset_text = args.preset if args.preset is not None else config.preset
    try:
        preset = parse_preset(preset_text)
    except PresetError as e:
        print(f"错误: {e}", file=sys.stderr)
        return 2

    logger.info(f"使用预设: {preset!r}")

    if args.input or args.output:
        if not (args.input and args.output):
            parser.error("--input 与 --output 需要同时指定")
        cmd = build_command(preset, args.input, args.output)
        print(shlex.join(cmd))
        return 0

    input_args, output_args = compile_preset(preset)
    print(f"输入参数: {shlex.join(input_args)}")
    print(f"输出参数: {shlex.join(output_args)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
