"""预设相关异常"""


class PresetError(ValueError):
    """预设无法解析或不受支持"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)
