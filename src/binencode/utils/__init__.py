"""工具模块导出"""
from binencode.utils.exceptions import AssertError, FormatError
from binencode.utils.log_utils import get_logger, setup_logger

__all__ = [
    "AssertError",
    "FormatError",
    "get_logger",
    "setup_logger",
]
