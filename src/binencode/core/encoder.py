"""
通用编解码入口
所有函数第一个参数为编码类型，按注册表分发到对应编解码器
未注册的编码类型抛出 AssertError（编程缺陷），格式错误抛出 FormatError
"""
from typing import Any, Union

# 导入即注册
import binencode.core.base64_codec  # noqa: F401
from binencode.core.base_codec import get_codec
from binencode.utils.exceptions import FormatError
from binencode.utils.log_utils import get_logger

logger = get_logger()

TextSource = Union[str, bytes, bytearray]


def encode_to_str(encode_type: Any, source: bytes, source_size: int, destination: bytearray) -> None:
    """
    将二进制数据编码为文本写入 destination
    :param encode_type: 编码类型
    :param source: 源数据
    :param source_size: 需要编码的字节数
    :param destination: 目标缓冲区，需先用 encode_to_str_size() 确定容量
    """
    get_codec(encode_type).encode_to_str(source, source_size, destination)


def encode_to_str_size(encode_type: Any, source_size: int) -> int:
    """
    计算编码结果长度
    :param encode_type: 编码类型
    :param source_size: 源数据字节数
    :return: 编码后文本长度
    """
    return get_codec(encode_type).encode_to_str_size(source_size)


def decode_to_bin(encode_type: Any, source: TextSource, destination: bytearray) -> None:
    """
    校验并解码文本写入 destination
    :param encode_type: 编码类型
    :param source: 编码文本
    :param destination: 目标缓冲区，需先用 decode_to_bin_size() 确定容量
    """
    get_codec(encode_type).decode_to_bin(source, destination)


def decode_to_bin_size(encode_type: Any, source: TextSource) -> int:
    """
    校验编码文本并计算解码结果长度
    :param encode_type: 编码类型
    :param source: 编码文本
    :return: 解码后字节数
    """
    return get_codec(encode_type).decode_to_bin_size(source)


def decode_to_bin_valid(encode_type: Any, source: TextSource) -> bool:
    """
    判断编码文本是否合法，只将 FormatError 转换为 False，其余异常照常抛出
    :param encode_type: 编码类型
    :param source: 编码文本
    :return: 合法返回True
    """
    try:
        decode_to_bin_validate(encode_type, source)
    except FormatError as e:
        logger.debug(f"编码文本校验未通过：{e}")
        return False
    return True


def decode_to_bin_validate(encode_type: Any, source: TextSource) -> None:
    """
    校验编码文本，格式错误时抛出 FormatError
    :param encode_type: 编码类型
    :param source: 编码文本
    """
    get_codec(encode_type).decode_to_bin_validate(source)


def encode_to_str_alloc(encode_type: Any, source: bytes) -> str:
    """按两步约定分配缓冲区并编码，返回编码文本"""
    destination = bytearray(encode_to_str_size(encode_type, len(source)))
    encode_to_str(encode_type, source, len(source), destination)
    return destination.decode("ascii")


def decode_to_bin_alloc(encode_type: Any, source: TextSource) -> bytes:
    """按两步约定分配缓冲区并解码，返回解码后的字节"""
    destination = bytearray(decode_to_bin_size(encode_type, source))
    decode_to_bin(encode_type, source, destination)
    return bytes(destination)
