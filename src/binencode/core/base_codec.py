"""编解码器基类与注册表"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Type

from binencode.models.encode_type import EncodeType
from binencode.utils.exceptions import AssertError
from binencode.utils.log_utils import get_logger

logger = get_logger()

# 全局编解码器注册表 - 按 EncodeType 组织
_codec_registry: Dict[EncodeType, "BaseCodec"] = {}


def register_codec(encode_type: EncodeType):
    """
    编解码器注册装饰器
    用于将编解码器类与编码类型关联，注册时实例化一次（编解码器无状态）

    :param encode_type: 编码类型

    使用示例:
        @register_codec(EncodeType.BASE64)
        class Base64Codec(BaseCodec):
            ...
    """
    def decorator(cls: Type["BaseCodec"]) -> Type["BaseCodec"]:
        if not issubclass(cls, BaseCodec):
            raise TypeError(f"被装饰的类 {cls.__name__} 必须继承 BaseCodec")

        if encode_type in _codec_registry:
            logger.warning(f"编码类型 {encode_type.name} 已经注册，将被新的类 {cls.__name__} 覆盖")

        _codec_registry[encode_type] = cls()
        logger.debug(f"编码类型 {encode_type.name} 注册成功: {cls.__name__}")

        return cls

    return decorator


def get_codec(encode_type: Any) -> "BaseCodec":
    """
    根据编码类型获取编解码器

    :param encode_type: 编码类型（EncodeType 或其数值）
    :return: 编解码器实例
    :raises AssertError: 编码类型未知或未注册
    """
    try:
        key = EncodeType(encode_type)
    except (ValueError, TypeError):
        raise AssertError(encode_type) from None

    codec = _codec_registry.get(key)
    if codec is None:
        raise AssertError(encode_type)
    return codec


def list_registered_codecs() -> List[EncodeType]:
    """
    列出所有已注册的编码类型

    :return: 编码类型列表
    """
    return list(_codec_registry.keys())


class BaseCodec(ABC):
    """
    编解码器基类，定义"先计算大小、再写入缓冲区"的两步调用约定
    调用方负责按 *_size() 的结果分配目标缓冲区，编解码器只写入、不分配
    """

    @abstractmethod
    def encode_to_str(self, source: bytes, source_size: int, destination: bytearray) -> None:
        """
        将二进制数据编码为文本，写入目标缓冲区
        :param source: 源数据
        :param source_size: 需要编码的字节数
        :param destination: 目标缓冲区，容量不小于 encode_to_str_size(source_size)
        """
        raise NotImplementedError

    @abstractmethod
    def encode_to_str_size(self, source_size: int) -> int:
        """
        计算编码结果长度
        :param source_size: 源数据字节数
        :return: 编码后文本长度
        """
        raise NotImplementedError

    @abstractmethod
    def decode_to_bin(self, source: str, destination: bytearray) -> None:
        """
        校验并解码文本，写入目标缓冲区
        :param source: 编码文本
        :param destination: 目标缓冲区，容量不小于 decode_to_bin_size(source)
        """
        raise NotImplementedError

    @abstractmethod
    def decode_to_bin_size(self, source: str) -> int:
        """
        校验编码文本并计算解码结果长度
        :param source: 编码文本
        :return: 解码后字节数
        """
        raise NotImplementedError

    @abstractmethod
    def decode_to_bin_validate(self, source: str) -> None:
        """
        校验编码文本，格式错误时抛出 FormatError
        :param source: 编码文本
        """
        raise NotImplementedError
