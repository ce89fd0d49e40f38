"""日志工具模块"""
from loguru import logger
import sys
from pathlib import Path
from typing import Optional

# loguru 内置的日志级别名称
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logger(
    log_path: Optional[Path] = None,
    level: str = "WARNING",
    rotation: str = "100 MB",
    retention: int = 7,
    format_string: Optional[str] = None
) -> None:
    """
    配置 Loguru 日志
    编解码库本身只输出 DEBUG 日志，命令行默认级别为 WARNING，避免污染标准输出
    :param log_path: 日志文件路径
    :param level: 日志级别
    :param rotation: 轮转规则
    :param retention: 保留天数
    :param format_string: 自定义格式字符串
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"不支持的日志级别：{level}")

    # 移除默认处理器
    logger.remove()

    # 控制台输出到 stderr，stdout 留给编解码结果
    logger.add(
        sys.stderr,
        level=level,
        format=format_string or DEFAULT_CONSOLE_FORMAT
    )

    if log_path:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_path),
            level=level,
            rotation=rotation,
            retention=f"{retention} days",
            format=format_string or "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            serialize=False
        )


def get_logger():
    """获取 logger 实例"""
    return logger
