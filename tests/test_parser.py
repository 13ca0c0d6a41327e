"""预设解析测试"""

import pytest
from ffmpeg_preset.preset import (
    DEFAULT_PRESET,
    Codec,
    CustomPreset,
    HardwareAccelerator,
    PredefinedPreset,
    PresetError,
    Quality,
    available_matches,
    parse_preset,
)
from ffmpeg_preset.preset.catalog import token_form


class TestParsePredefined:
    """预定义预设解析测试类"""

    def test_codec_only(self):
        """测试仅指定编码器"""
        assert parse_preset("h264") == PredefinedPreset(Codec.H264, None, Quality.NORMAL)

    def test_full_combination(self):
        """测试完整组合"""
        preset = parse_preset("h265-nvidia-low")
        assert preset == PredefinedPreset(Codec.H265, HardwareAccelerator.NVIDIA, Quality.LOW)

    def test_order_independent(self):
        """测试 token 顺序无关"""
        assert parse_preset("low-amd-av1") == parse_preset("av1-amd-low")

    @pytest.mark.parametrize("text", ["h264-nvidia", "H264-Nvidia", "H264-NVIDIA"])
    def test_case_insensitive(self, text):
        """测试大小写不敏感"""
        assert parse_preset(text) == PredefinedPreset(Codec.H264, HardwareAccelerator.NVIDIA)

    def test_every_available_match_round_trips(self):
        """测试所有受支持组合都能解析回来"""
        for codec, hwaccel, quality in available_matches():
            preset = parse_preset(token_form(codec, hwaccel, quality))
            assert preset.codec is codec
            assert preset.hwaccel is hwaccel
            assert preset.quality is (quality or Quality.NORMAL)

    def test_explicit_normal_quality(self):
        """测试显式 normal 画质"""
        assert parse_preset("av1-normal") == parse_preset("av1")

    def test_str(self):
        """测试预设显示为 token 形式"""
        assert str(parse_preset("LOW-h265")) == "h265-low"
        assert str(parse_preset("h264-apple")) == "h264-apple"


class TestParseErrors:
    """解析错误测试类"""

    def test_duplicate_codec(self):
        """测试重复编码器"""
        with pytest.raises(PresetError, match=r"multiple codecs \(found h264 and h264\)"):
            parse_preset("h264-h264")

    def test_duplicate_hwaccel(self):
        """测试重复硬件加速"""
        with pytest.raises(PresetError, match="multiple hardware accelerations .*nvidia and amd"):
            parse_preset("h264-nvidia-amd")

    def test_duplicate_quality(self):
        """测试重复画质"""
        with pytest.raises(PresetError, match="multiple preset qualities .*low and lossless"):
            parse_preset("h265-low-lossless")

    def test_unknown_token(self):
        """测试未知 token"""
        with pytest.raises(PresetError) as exc_info:
            parse_preset("h264-vp9")
        assert "'h264-vp9'" in exc_info.value.message
        assert "unknown token 'vp9'" in exc_info.value.message

    def test_missing_codec(self):
        """测试缺少编码器"""
        with pytest.raises(PresetError, match="cannot use preset without a codec"):
            parse_preset("nvidia-low")

    def test_av1_nvidia_not_supported(self):
        """测试 AV1 不支持 NVIDIA"""
        with pytest.raises(PresetError, match="preset is not supported"):
            parse_preset("av1-nvidia")

    def test_av1_apple_with_quality_not_supported(self):
        """测试带画质的 AV1 + Apple 同样不受支持"""
        with pytest.raises(PresetError, match="preset is not supported"):
            parse_preset("av1-apple-lossless")

    def test_error_is_value_error(self):
        """测试异常类型"""
        with pytest.raises(ValueError):
            parse_preset("foo")


class TestParseCustom:
    """自定义参数解析测试类"""

    @pytest.mark.parametrize(
        "text",
        ["", "-c:v copy -c:a copy", "h264 nvidia", "h264--low", "-h264", "h264-", "h264-low\n"],
    )
    def test_non_token_strings_are_custom(self, text):
        """测试不符合 token 语法的字符串原样作为自定义参数"""
        assert parse_preset(text) == CustomPreset(text)

    def test_none_is_default(self):
        """测试未指定预设时使用默认预设"""
        assert parse_preset(None) is DEFAULT_PRESET
        assert DEFAULT_PRESET == CustomPreset("-c:v copy -c:a copy")
