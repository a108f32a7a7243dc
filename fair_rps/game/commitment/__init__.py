"""
承诺模块
Commitment Module
"""
from .random_source import RandomSource, SecureRandomSource, KEY_SIZE_BYTES
from .key_generator import KeyGenerator, key_to_hex, key_from_hex, hmac_key
from .hmac_commitment import commit, verify_commitment

__all__ = [
    'RandomSource',
    'SecureRandomSource',
    'KEY_SIZE_BYTES',
    'KeyGenerator',
    'key_to_hex',
    'key_from_hex',
    'hmac_key',
    'commit',
    'verify_commitment'
]
