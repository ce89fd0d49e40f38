"""核心模块导出"""
from binencode.core.base64_codec import Base64Codec
from binencode.core.base_codec import (
    BaseCodec,
    get_codec,
    list_registered_codecs,
    register_codec,
)
from binencode.core.encoder import (
    decode_to_bin,
    decode_to_bin_alloc,
    decode_to_bin_size,
    decode_to_bin_valid,
    decode_to_bin_validate,
    encode_to_str,
    encode_to_str_alloc,
    encode_to_str_size,
)

__all__ = [
    "BaseCodec",
    "Base64Codec",
    "register_codec",
    "get_codec",
    "list_registered_codecs",
    "encode_to_str",
    "encode_to_str_size",
    "encode_to_str_alloc",
    "decode_to_bin",
    "decode_to_bin_size",
    "decode_to_bin_alloc",
    "decode_to_bin_valid",
    "decode_to_bin_validate",
]
