"""配置加载器"""
from pathlib import Path
from typing import Any, Dict, Optional

import toml

from binencode.models.codec_config import CodecConfig
from binencode.utils.log_utils import get_logger

logger = get_logger()


def load_config_dict(config_file: Path) -> Dict[str, Any]:
    """
    读取TOML配置文件
    配置可以写在 [codec] 表中，也可以直接写在顶层：

        [codec]
        encode_type = "base64"
        log_level = "INFO"

    :param config_file: 配置文件路径
    :return: 配置字典
    """
    config_file = Path(config_file)
    if not config_file.exists():
        raise FileNotFoundError(f"配置文件不存在: {config_file}")

    logger.debug(f"加载配置: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        config = toml.load(f)

    # 如果配置有嵌套结构（例如 [codec]），提取内容
    if "codec" in config:
        return config["codec"]

    return config


def load_codec_config(config_file: Optional[Path] = None, **overrides: Any) -> CodecConfig:
    """
    加载编解码配置，命令行参数优先于配置文件
    :param config_file: 配置文件路径（可选）
    :param overrides: 覆盖项，值为None的项会被忽略
    :return: 编解码配置
    """
    config_dict: Dict[str, Any] = load_config_dict(config_file) if config_file else {}
    config_dict.update({k: v for k, v in overrides.items() if v is not None})
    return CodecConfig(**config_dict)
