"""编码类型枚举"""
from enum import IntEnum


class EncodeType(IntEnum):
    """支持的编码方案，新增方案时在此追加成员并注册对应编解码器"""
    BASE64 = 0

    @classmethod
    def from_name(cls, name: str) -> "EncodeType":
        """
        按名称（大小写不敏感）查找编码类型
        :param name: 编码类型名称，如 base64
        :return: 编码类型
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            supported = ", ".join(member.name.lower() for member in cls)
            raise ValueError(f"不支持的编码类型：{name}（支持：{supported}）") from None
