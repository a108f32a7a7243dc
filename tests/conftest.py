"""
测试公共夹具
Shared Test Fixtures
"""
import sys
from pathlib import Path

import pytest

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fair_rps.game.commitment import RandomSource, KEY_SIZE_BYTES  # noqa: E402


class FakeRandomSource(RandomSource):
    """可预测的随机数源，记录每次调用"""

    def __init__(self, index: int = 0, key: bytes = bytes(range(KEY_SIZE_BYTES))):
        self.index = index
        self.key = key
        self.index_calls = []
        self.key_calls = 0

    def next_index(self, n: int) -> int:
        self.index_calls.append(n)
        return self.index % n

    def next_key(self) -> bytes:
        self.key_calls += 1
        return self.key


@pytest.fixture
def fake_random():
    return FakeRandomSource()


@pytest.fixture
def make_random():
    def _make(index: int = 0, key: bytes = bytes(range(KEY_SIZE_BYTES))):
        return FakeRandomSource(index=index, key=key)
    return _make


@pytest.fixture
def rps_moves():
    return ["rock", "paper", "scissors"]


@pytest.fixture
def five_moves():
    return ["rock", "paper", "scissors", "lizard", "spock"]
