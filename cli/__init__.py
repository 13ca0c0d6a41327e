"""CLI 命令行入口模块"""


def preset_main():
    """懒加载预设 CLI 入口，避免 -m 执行时重复导入告警。"""
    from cli.preset import main

    return main()


__all__ = ["preset_main"]
