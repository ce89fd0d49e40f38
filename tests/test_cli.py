"""CLI tests."""
import pytest
from click.testing import CliRunner

from binencode.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_encode_text(runner):
    result = runner.invoke(cli, ["encode", "Man"])
    assert result.exit_code == 0
    assert result.output == "TWFu\n"


def test_encode_file(runner, tmp_path):
    source = tmp_path / "data.bin"
    source.write_bytes(b"\x4d\x61")
    result = runner.invoke(cli, ["encode", "--file", str(source)])
    assert result.exit_code == 0
    assert result.output == "TWE=\n"


def test_encode_stdin(runner):
    result = runner.invoke(cli, ["encode"], input="M")
    assert result.exit_code == 0
    assert result.output == "TQ==\n"


def test_encode_text_and_file_conflict(runner, tmp_path):
    source = tmp_path / "data.bin"
    source.write_bytes(b"x")
    result = runner.invoke(cli, ["encode", "Man", "--file", str(source)])
    assert result.exit_code == 1


def test_decode_stdout(runner):
    result = runner.invoke(cli, ["decode", "TWFu"])
    assert result.exit_code == 0
    assert result.stdout_bytes == b"Man"


def test_decode_output_file(runner, tmp_path):
    target = tmp_path / "out.bin"
    result = runner.invoke(cli, ["decode", "//8=", "--output", str(target)])
    assert result.exit_code == 0
    assert target.read_bytes() == b"\xff\xff"


def test_decode_malformed(runner):
    result = runner.invoke(cli, ["decode", "QQ Q"])
    assert result.exit_code == 1
    assert "base64 invalid character found at position 2" in result.output


def test_validate_ok(runner):
    result = runner.invoke(cli, ["validate", "TWE="])
    assert result.exit_code == 0
    assert "校验通过" in result.output


@pytest.mark.parametrize(
    "text, message",
    [
        ("QQ=", "not evenly divisible by 4"),
        ("Q=QQ", "may only appear in last two positions"),
        ("QQ=Q", "last character must be '=' if second to last is"),
    ],
)
def test_validate_malformed(runner, text, message):
    result = runner.invoke(cli, ["validate", text])
    assert result.exit_code == 1
    assert message in result.output


def test_size_encoded(runner):
    result = runner.invoke(cli, ["size", "encoded", "4"])
    assert result.exit_code == 0
    assert result.output.strip() == "8"


def test_size_decoded(runner):
    result = runner.invoke(cli, ["size", "decoded", "TWE="])
    assert result.exit_code == 0
    assert result.output.strip() == "2"


def test_size_decoded_malformed(runner):
    result = runner.invoke(cli, ["size", "decoded", "QQ=Q"])
    assert result.exit_code == 1


def test_unknown_type(runner):
    result = runner.invoke(cli, ["--type", "base32", "encode", "Man"])
    assert result.exit_code == 1
    assert "配置验证失败" in result.output


def test_config_file(runner, tmp_path):
    conf = tmp_path / "binencode.toml"
    conf.write_text('[codec]\nencode_type = "base64"\n', encoding="utf-8")
    result = runner.invoke(cli, ["--conf", str(conf), "encode", "Man"])
    assert result.exit_code == 0
    assert result.output == "TWFu\n"


def test_missing_config_file(runner, tmp_path):
    result = runner.invoke(cli, ["--conf", str(tmp_path / "missing.toml"), "encode", "Man"])
    assert result.exit_code == 1
    assert "配置文件不存在" in result.output
