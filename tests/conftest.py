import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """CLI会把日志输出绑定到测试时的stderr，测试结束后移除"""
    yield
    logger.remove()


@pytest.fixture
def sample_bytes():
    return bytes(range(256)) * 2
