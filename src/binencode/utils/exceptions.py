"""自定义异常类"""
from typing import Any


class FormatError(ValueError):
    """编码文本格式错误（长度、填充字符或非法字符），属于可恢复的输入错误"""
    pass


class AssertError(AssertionError):
    """
    编码类型断言错误
    传入了未注册的编码类型，属于调用方的编程缺陷，不应被常规错误处理逻辑捕获
    """

    def __init__(self, encode_type: Any):
        # 枚举成员统一还原为数值，便于定位
        self.encode_type = int(encode_type) if isinstance(encode_type, int) else encode_type
        super().__init__(f"invalid encode type {self.encode_type}")
