"""配置模块测试"""

import json
import os
import tempfile

import pytest

from ffmpeg_preset.utils.config import Config, config, load_config, read_config_file


class TestConfig:
    """配置测试类"""

    def test_default_config(self):
        """测试默认配置"""
        config = Config()
        assert config.ffmpeg_path == "ffmpeg"
        assert config.preset is None
        assert config.log_level == "INFO"

    def test_config_from_env(self, monkeypatch):
        """测试从环境变量加载配置"""
        monkeypatch.setenv("FP_PRESET", "h265-amd")
        monkeypatch.setenv("FP_LOG_LEVEL", "DEBUG")

        config = Config.from_env()
        assert config.preset == "h265-amd"
        assert config.log_level == "DEBUG"

    def test_config_to_file(self):
        """测试保存配置到文件"""
        config = Config(preset="av1-low", log_level="WARNING")

        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            temp_path = f.name

        try:
            config.to_file(temp_path)

            loaded = Config.from_file(temp_path)
            assert loaded.preset == "av1-low"
            assert loaded.log_level == "WARNING"
        finally:
            os.unlink(temp_path)

    def test_load_config_file_overrides_env(self, monkeypatch, tmp_path):
        """测试配置文件只覆盖其中出现的键，其余保留环境变量"""
        monkeypatch.setenv("FP_FFMPEG_PATH", "/usr/bin/ffmpeg")
        monkeypatch.setenv("FP_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("FP_PRESET", "h264")
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"preset": "h265-nvidia-low"}), encoding="utf-8")

        try:
            loaded = load_config(str(path))
            assert loaded is config
            assert config.preset == "h265-nvidia-low"
            assert config.ffmpeg_path == "/usr/bin/ffmpeg"
            assert config.log_level == "DEBUG"
        finally:
            monkeypatch.delenv("FP_FFMPEG_PATH")
            monkeypatch.delenv("FP_LOG_LEVEL")
            monkeypatch.delenv("FP_PRESET")
            load_config()

    def test_unknown_key_rejected(self, tmp_path):
        """测试未知配置项"""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"presett": "h264"}), encoding="utf-8")

        with pytest.raises(TypeError, match="presett"):
            read_config_file(str(path))
        with pytest.raises(TypeError):
            Config.from_file(str(path))
