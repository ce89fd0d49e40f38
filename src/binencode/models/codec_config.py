"""编解码运行配置模型"""
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from binencode.models.encode_type import EncodeType
from binencode.utils.log_utils import LOG_LEVELS


class CodecConfig(BaseModel):
    """编解码命令行运行配置"""
    # 编码方案（支持名称或数值，如 "base64" / 0）
    encode_type: EncodeType = Field(default=EncodeType.BASE64, description="编码方案")
    # 日志级别
    log_level: str = Field(default="WARNING", description="日志级别（loguru级别名称）")
    # 日志文件路径（为空则只输出到控制台）
    log_path: Optional[Path] = Field(default=None, description="日志文件路径")

    @field_validator("encode_type", mode="before")
    @classmethod
    def parse_encode_type(cls, v):
        """允许使用编码方案名称配置"""
        if isinstance(v, str):
            return EncodeType.from_name(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """校验日志级别是否为loguru支持的级别"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"日志级别必须为 {', '.join(LOG_LEVELS)} 之一，当前为：{v}")
        return level
