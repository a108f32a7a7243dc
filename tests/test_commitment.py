"""
HMAC承诺与密钥测试
Commitment and Key Tests
"""
import hashlib
import hmac
import re

import pytest

from fair_rps.game.commitment import (
    KEY_SIZE_BYTES, KeyGenerator, SecureRandomSource, commit, verify_commitment,
    key_to_hex, key_from_hex, hmac_key
)
from fair_rps.game.commitment import random_source as random_source_module
from fair_rps.utils.exceptions import EntropyException

KEY = bytes(range(KEY_SIZE_BYTES))


def test_commit_matches_hmac_sha256():
    expected = hmac.new(KEY, "rock".encode("utf-8"), hashlib.sha256).hexdigest()
    assert commit(KEY, "rock") == expected


def test_commit_is_64_hex_chars():
    assert re.fullmatch(r"[0-9a-f]{64}", commit(KEY, "paper"))


def test_commit_is_deterministic():
    assert commit(KEY, "scissors") == commit(KEY, "scissors")


def test_commit_changes_with_move_or_key():
    moves = ["rock", "paper", "scissors", "lizard", "spock", "Rock", "rock "]
    digests = {commit(KEY, move) for move in moves}
    assert len(digests) == len(moves)

    other_key = bytes(KEY_SIZE_BYTES)
    assert commit(other_key, "rock") != commit(KEY, "rock")


def test_commit_handles_non_ascii_moves():
    expected = hmac.new(KEY, "石头".encode("utf-8"), hashlib.sha256).hexdigest()
    assert commit(KEY, "石头") == expected


def test_verify_commitment_round_trip():
    commitment = commit(KEY, "spock")
    revealed = key_from_hex(key_to_hex(KEY))
    assert verify_commitment(commitment, revealed, "spock")
    assert verify_commitment(commitment.upper(), revealed, "spock")
    assert not verify_commitment(commitment, revealed, "lizard")
    assert not verify_commitment("不是十六进制", revealed, "spock")


def test_hmac_key_is_revealed_hex_text():
    """会话用公开的十六进制文本作HMAC密钥，普通HMAC工具可以直接复算"""
    text = key_to_hex(KEY)
    assert hmac_key(KEY) == text.encode("ascii")
    expected = hmac.new(text.encode("ascii"), b"rock", hashlib.sha256).hexdigest()
    assert commit(hmac_key(KEY), "rock") == expected
    assert verify_commitment(expected, text.encode("ascii"), "rock")


def test_key_hex_round_trip():
    text = key_to_hex(KEY)
    assert len(text) == 64
    assert key_from_hex(text) == KEY


@pytest.mark.parametrize("text", ["zz", "abcd", "0" * 63])
def test_key_from_hex_rejects_malformed(text):
    with pytest.raises(ValueError):
        key_from_hex(text)


def test_secure_source_generates_fresh_keys():
    generator = KeyGenerator(SecureRandomSource())
    first = generator.generate_key()
    second = generator.generate_key()
    assert len(first) == KEY_SIZE_BYTES
    assert first != second


def test_secure_source_index_in_range():
    source = SecureRandomSource()
    for _ in range(200):
        assert 0 <= source.next_index(5) < 5
    with pytest.raises(ValueError):
        source.next_index(0)


def test_key_generator_uses_injected_source(fake_random):
    assert KeyGenerator(fake_random).generate_key() == fake_random.key
    assert fake_random.key_calls == 1


def test_key_generator_rejects_short_key(make_random):
    with pytest.raises(EntropyException):
        KeyGenerator(make_random(key=b"short")).generate_key()


def test_entropy_failure_is_wrapped(monkeypatch):
    def broken(_size):
        raise OSError("no entropy")

    monkeypatch.setattr(random_source_module.secrets, "token_bytes", broken)
    with pytest.raises(EntropyException) as exc_info:
        SecureRandomSource().next_key()
    assert isinstance(exc_info.value.__cause__, OSError)
