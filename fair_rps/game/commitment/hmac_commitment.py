"""
HMAC承诺
HMAC Commitment Engine

电脑在玩家出招前公布 HMAC-SHA256(key, move)，回合结束后公开密钥和招式，
玩家可以自行重新计算并核对。
"""
import hashlib
import hmac


def commit(key: bytes, move: str) -> str:
    """
    计算招式的承诺值

    Args:
        key: HMAC密钥材料（会话中为 hmac_key(key)，即十六进制文本）
        move: 招式名称

    Returns:
        str: 64位小写十六进制摘要
    """
    return hmac.new(key, move.encode('utf-8'), hashlib.sha256).hexdigest()


def verify_commitment(expected: str, key: bytes, move: str) -> bool:
    """
    用公开的密钥和招式核对之前公布的承诺值

    Args:
        expected: 之前公布的十六进制承诺值
        key: 公开的密钥
        move: 公开的招式名称

    Returns:
        bool: 是否一致
    """
    computed = commit(key, move)
    return hmac.compare_digest(expected.strip().lower().encode('utf-8'), computed.encode('ascii'))
