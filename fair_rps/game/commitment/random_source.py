"""
随机数源
Random Source - 密钥和电脑招式的随机来源，可注入以便测试
"""
import secrets
from abc import ABC, abstractmethod
from ...utils.exceptions import EntropyException
from ...utils.logger import setup_logger

logger = setup_logger("RPS.RandomSource")

# 密钥长度：32字节（256位）
KEY_SIZE_BYTES = 32


class RandomSource(ABC):
    """随机数源抽象基类"""

    @abstractmethod
    def next_index(self, n: int) -> int:
        """
        在 [0, n) 中均匀抽取一个下标

        Args:
            n: 上界（不含）

        Returns:
            int: 随机下标
        """
        pass

    @abstractmethod
    def next_key(self) -> bytes:
        """
        生成一个新的密钥

        Returns:
            bytes: KEY_SIZE_BYTES 字节的随机数据
        """
        pass


class SecureRandomSource(RandomSource):
    """基于操作系统密码学安全随机数的实现"""

    def next_index(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"n必须为正数: {n}")
        try:
            return secrets.randbelow(n)
        except (OSError, NotImplementedError) as e:
            logger.critical(f"随机数源不可用: {e}")
            raise EntropyException(f"无法获取随机数: {e}") from e

    def next_key(self) -> bytes:
        try:
            return secrets.token_bytes(KEY_SIZE_BYTES)
        except (OSError, NotImplementedError) as e:
            logger.critical(f"随机数源不可用: {e}")
            raise EntropyException(f"无法生成密钥: {e}") from e
