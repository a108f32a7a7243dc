"""
密钥生成器
Key Generator
"""
from typing import Optional
from .random_source import RandomSource, SecureRandomSource, KEY_SIZE_BYTES
from ...utils.exceptions import EntropyException
from ...utils.logger import setup_logger

logger = setup_logger("RPS.KeyGenerator")


class KeyGenerator:
    """每局游戏生成一次性的HMAC密钥"""

    def __init__(self, random_source: Optional[RandomSource] = None):
        """
        初始化密钥生成器

        Args:
            random_source: 随机数源（默认使用 SecureRandomSource）
        """
        self.random_source = random_source or SecureRandomSource()

    def generate_key(self) -> bytes:
        """
        生成新密钥

        Returns:
            bytes: 32字节密钥

        Raises:
            EntropyException: 随机数源失败或返回的长度不对
        """
        key = self.random_source.next_key()
        if not isinstance(key, bytes) or len(key) != KEY_SIZE_BYTES:
            raise EntropyException(
                f"随机数源返回的密钥长度无效: 期望 {KEY_SIZE_BYTES} 字节"
            )
        logger.debug("已生成新的会话密钥")
        return key


def key_to_hex(key: bytes) -> str:
    """密钥的十六进制显示形式（64个小写字符）"""
    return key.hex()


def key_from_hex(text: str) -> bytes:
    """
    把公开的十六进制密钥还原为字节，用于事后验证

    Args:
        text: 十六进制字符串

    Returns:
        bytes: 密钥

    Raises:
        ValueError: 不是合法的十六进制或长度不对
    """
    key = bytes.fromhex(text.strip())
    if len(key) != KEY_SIZE_BYTES:
        raise ValueError(f"密钥长度必须为 {KEY_SIZE_BYTES} 字节，实际为 {len(key)}")
    return key


def hmac_key(key: bytes) -> bytes:
    """
    HMAC使用的密钥材料：公开显示的十六进制文本本身

    这样玩家把公开的 "HMAC key" 原样粘贴到常见的HMAC工具里就能复算承诺值。

    Args:
        key: 会话密钥

    Returns:
        bytes: 十六进制文本的ASCII编码
    """
    return key_to_hex(key).encode('ascii')
