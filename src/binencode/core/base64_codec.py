"""Base64 编解码器"""
from typing import Tuple, Union

from binencode.core.base_codec import BaseCodec, register_codec
from binencode.models.encode_type import EncodeType
from binencode.utils.exceptions import FormatError

BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD_CHAR = "="

# 不属于字母表的字符
INVALID = -1

_ENCODE_LOOKUP = BASE64_ALPHABET.encode("ascii")
_PAD_BYTE = ord(PAD_CHAR)


def _build_decode_lookup() -> Tuple[int, ...]:
    """构建 256 项反查表：字节值 -> 6 位取值，非字母表字符为 INVALID"""
    table = [INVALID] * 256
    for value, char in enumerate(BASE64_ALPHABET):
        table[ord(char)] = value
    return tuple(table)


DECODE_LOOKUP = _build_decode_lookup()

TextSource = Union[str, bytes, bytearray]


def _as_text(source: TextSource) -> str:
    """字节形式的编码文本按 latin-1 还原，保证每个字节对应一个 0-255 的码位"""
    if isinstance(source, (bytes, bytearray)):
        return source.decode("latin-1")
    return source


def _lookup(char: str) -> int:
    code = ord(char)
    return DECODE_LOOKUP[code] if code < 256 else INVALID


def _check_capacity(destination, required: int) -> None:
    if len(destination) < required:
        raise ValueError(f"目标缓冲区容量不足：需要 {required}，实际 {len(destination)}")


@register_codec(EncodeType.BASE64)
class Base64Codec(BaseCodec):
    """
    Base64 编解码器
    每 3 个字节编码为 4 个字符，末尾不足 3 字节的分组用 '=' 补齐
    """

    def encode_to_str(self, source: bytes, source_size: int, destination: bytearray) -> None:
        if source_size < 0 or source_size > len(source):
            raise ValueError(f"source_size 超出源数据范围：{source_size}（源数据长度 {len(source)}）")
        _check_capacity(destination, self.encode_to_str_size(source_size))

        destination_idx = 0

        for source_idx in range(0, source_size, 3):
            remaining = source_size - source_idx
            b0 = source[source_idx]

            # 第一个字符总是完整使用
            c0 = _ENCODE_LOOKUP[b0 >> 2]

            if remaining == 1:
                # 只剩一个字节：第二个字符只用到一部分，后两个字符填充
                group = (c0, _ENCODE_LOOKUP[(b0 & 0x03) << 4], _PAD_BYTE, _PAD_BYTE)
            else:
                b1 = source[source_idx + 1]
                c1 = _ENCODE_LOOKUP[((b0 & 0x03) << 4) | ((b1 & 0xf0) >> 4)]

                if remaining == 2:
                    # 只剩两个字节：第三个字符只用到一部分，第四个字符填充
                    group = (c0, c1, _ENCODE_LOOKUP[(b1 & 0x0f) << 2], _PAD_BYTE)
                else:
                    b2 = source[source_idx + 2]
                    group = (
                        c0,
                        c1,
                        _ENCODE_LOOKUP[((b1 & 0x0f) << 2) | ((b2 & 0xc0) >> 6)],
                        _ENCODE_LOOKUP[b2 & 0x3f],
                    )

            destination[destination_idx:destination_idx + 4] = bytes(group)
            destination_idx += 4

    def encode_to_str_size(self, source_size: int) -> int:
        if source_size < 0:
            raise ValueError(f"source_size 不能为负数：{source_size}")

        # 完整的 3 字节分组数，存在不完整分组时加一
        encode_group_total = source_size // 3
        if source_size % 3 != 0:
            encode_group_total += 1

        # 每个分组编码为 4 个字符
        return encode_group_total * 4

    def decode_to_bin_validate(self, source: TextSource) -> None:
        source = _as_text(source)
        source_size = len(source)

        if source_size % 4 != 0:
            raise FormatError(f"base64 size {source_size} is not evenly divisible by 4")

        for source_idx, char in enumerate(source):
            if char == PAD_CHAR:
                # '=' 只能出现在最后两个位置
                if source_idx < source_size - 2:
                    raise FormatError("base64 '=' character may only appear in last two positions")

                # 倒数第二个是 '=' 时，最后一个也必须是 '='
                if source_idx == source_size - 2 and source[source_size - 1] != PAD_CHAR:
                    raise FormatError("base64 last character must be '=' if second to last is")
            elif _lookup(char) == INVALID:
                raise FormatError(f"base64 invalid character found at position {source_idx}")

    def decode_to_bin(self, source: TextSource, destination: bytearray) -> None:
        source = _as_text(source)
        self.decode_to_bin_validate(source)
        _check_capacity(destination, self._decoded_size(source))

        destination_idx = 0

        # 每 4 个字符解码为最多 3 个字节
        for source_idx in range(0, len(source), 4):
            s0, s1, s2, s3 = source[source_idx:source_idx + 4]

            # 第一个字节总是存在
            destination[destination_idx] = ((_lookup(s0) << 2) | (_lookup(s1) >> 4)) & 0xff
            destination_idx += 1

            # 第三个字符不是填充时才有第二个字节
            if s2 != PAD_CHAR:
                destination[destination_idx] = ((_lookup(s1) << 4) | (_lookup(s2) >> 2)) & 0xff
                destination_idx += 1

            # 第四个字符不是填充时才有第三个字节
            if s3 != PAD_CHAR:
                destination[destination_idx] = ((_lookup(s2) << 6) & 0xc0) | _lookup(s3)
                destination_idx += 1

    def decode_to_bin_size(self, source: TextSource) -> int:
        source = _as_text(source)
        self.decode_to_bin_validate(source)
        return self._decoded_size(source)

    @staticmethod
    def _decoded_size(source: str) -> int:
        """按已校验的编码文本计算解码长度"""
        source_size = len(source)
        destination_size = source_size // 4 * 3

        # 去掉填充字符对应的字节
        if source_size and source[-1] == PAD_CHAR:
            destination_size -= 1
            if source[-2] == PAD_CHAR:
                destination_size -= 1

        return destination_size
