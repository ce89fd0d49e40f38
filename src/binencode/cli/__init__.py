"""命令行接口"""
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from binencode.core.encoder import (
    decode_to_bin_alloc,
    decode_to_bin_size,
    decode_to_bin_validate,
    encode_to_str_alloc,
    encode_to_str_size,
)
from binencode.models.codec_config import CodecConfig
from binencode.utils.config_loader import load_codec_config
from binencode.utils.exceptions import FormatError
from binencode.utils.log_utils import get_logger, setup_logger

logger = get_logger()


def _fail(message: str) -> None:
    click.echo(f"❌ {message}", err=True)
    sys.exit(1)


@click.group()
@click.option("--conf", "-c", type=click.Path(path_type=Path), help="配置文件路径（TOML格式）")
@click.option("--type", "-t", "encode_type", help="编码方案（默认：base64）")
@click.option("--log-level", help="日志级别（默认：WARNING）")
@click.pass_context
def cli(ctx: click.Context, conf: Optional[Path], encode_type: Optional[str], log_level: Optional[str]):
    """binencode - 二进制与文本互转命令行工具"""
    try:
        config = load_codec_config(conf, encode_type=encode_type, log_level=log_level)
    except FileNotFoundError as e:
        _fail(str(e))
    except ValidationError as e:
        click.echo("❌ 配置验证失败：", err=True)
        for error in e.errors():
            click.echo(f"   字段: {'.'.join(str(loc) for loc in error['loc'])}", err=True)
            click.echo(f"   错误: {error['msg']}", err=True)
        sys.exit(1)

    setup_logger(log_path=config.log_path, level=config.log_level)
    logger.debug(f"使用编码方案：{config.encode_type.name}")
    ctx.obj = config


@cli.command("encode")
@click.argument("text", required=False)
@click.option("--file", "-f", "file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="编码文件内容（二进制）")
@click.pass_obj
def encode(config: CodecConfig, text: Optional[str], file_path: Optional[Path]):
    """编码文本（UTF-8）或文件内容，未指定时读取标准输入"""
    if text is not None and file_path is not None:
        _fail("TEXT 与 --file 只能指定一个")

    if file_path is not None:
        source = file_path.read_bytes()
    elif text is not None:
        source = text.encode("utf-8")
    else:
        source = click.get_binary_stream("stdin").read()

    click.echo(encode_to_str_alloc(config.encode_type, source))


@cli.command("decode")
@click.argument("encoded_str")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="解码结果输出文件")
@click.pass_obj
def decode(config: CodecConfig, encoded_str: str, output: Optional[Path]):
    """解码编码文本，结果写入文件或标准输出"""
    try:
        data = decode_to_bin_alloc(config.encode_type, encoded_str)
    except FormatError as e:
        _fail(f"解码失败：{e}")

    if output is not None:
        output.write_bytes(data)
        logger.info(f"解码结果已写入：{output}（{len(data)} 字节）")
    else:
        stdout = click.get_binary_stream("stdout")
        stdout.write(data)
        stdout.flush()


@cli.command("validate")
@click.argument("encoded_str")
@click.pass_obj
def validate_cmd(config: CodecConfig, encoded_str: str):
    """校验编码文本"""
    try:
        decode_to_bin_validate(config.encode_type, encoded_str)
    except FormatError as e:
        _fail(f"校验失败：{e}")

    click.echo("✅ 校验通过")


@cli.group("size")
def size():
    """计算编解码结果长度"""
    pass


@size.command("encoded")
@click.argument("source_size", type=click.IntRange(min=0))
@click.pass_obj
def encoded_size(config: CodecConfig, source_size: int):
    """计算 SOURCE_SIZE 字节编码后的文本长度"""
    click.echo(encode_to_str_size(config.encode_type, source_size))


@size.command("decoded")
@click.argument("encoded_str")
@click.pass_obj
def decoded_size(config: CodecConfig, encoded_str: str):
    """计算编码文本解码后的字节数"""
    try:
        click.echo(decode_to_bin_size(config.encode_type, encoded_str))
    except FormatError as e:
        _fail(f"校验失败：{e}")


if __name__ == "__main__":
    cli()
