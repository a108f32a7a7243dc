"""
游戏状态枚举
Game State Enumeration
"""
from enum import Enum, auto


class GameState(Enum):
    """游戏状态枚举"""
    AWAITING_MOVE = auto()   # 已公布承诺，等待玩家输入
    RESOLVED = auto()        # 已处理玩家输入（有结果或输入无效）
    TERMINAL = auto()        # 本局结束

    def __str__(self):
        return self.name
