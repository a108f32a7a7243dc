"""
游戏规则实现
Game Rules Implementation

N个招式（N为奇数）围成一圈，每个招式胜过它后面的 N // 2 个招式，
输给前面的 N // 2 个招式。N=3 时就是普通的剪刀石头布。
"""
from typing import FrozenSet
from enum import Enum
from ...utils.logger import setup_logger

logger = setup_logger("RPS.GameRules")


class GameResult(Enum):
    """游戏结果枚举（玩家视角）"""
    WIN = "win"      # 玩家获胜
    LOSE = "lose"    # 电脑获胜
    DRAW = "draw"    # 平局

    def __str__(self):
        return self.label

    @property
    def label(self) -> str:
        """规则表中使用的标签"""
        return _LABELS[self]

    @property
    def message(self) -> str:
        """回合结束时显示的结果文字"""
        return _MESSAGES[self]

    def opposite(self) -> "GameResult":
        """交换玩家和电脑后的结果"""
        if self is GameResult.WIN:
            return GameResult.LOSE
        if self is GameResult.LOSE:
            return GameResult.WIN
        return GameResult.DRAW


_LABELS = {
    GameResult.WIN: "Win",
    GameResult.LOSE: "Lose",
    GameResult.DRAW: "Draw",
}

_MESSAGES = {
    GameResult.WIN: "You win!",
    GameResult.LOSE: "You lose!",
    GameResult.DRAW: "It's a draw!",
}


class GameRules:
    """游戏规则类"""

    @staticmethod
    def half_moves(num_moves: int) -> int:
        """每个招式能胜过的招式数量"""
        return num_moves // 2

    @staticmethod
    def beaten_by(index: int, num_moves: int) -> FrozenSet[int]:
        """
        获取指定招式能胜过的招式下标

        Args:
            index: 招式下标
            num_moves: 招式总数

        Returns:
            FrozenSet[int]: 按循环顺序紧随其后的 half 个下标
        """
        half = GameRules.half_moves(num_moves)
        return frozenset((index + i) % num_moves for i in range(1, half + 1))

    @staticmethod
    def judge(player_index: int, computer_index: int, num_moves: int) -> GameResult:
        """
        判断游戏结果

        调用方负责保证 num_moves 为不小于3的奇数。

        Args:
            player_index: 玩家招式下标
            computer_index: 电脑招式下标
            num_moves: 招式总数

        Returns:
            GameResult: 玩家视角的结果

        Raises:
            ValueError: 下标超出范围
        """
        for index in (player_index, computer_index):
            if not 0 <= index < num_moves:
                raise ValueError(f"招式下标超出范围: {index} (共 {num_moves} 个招式)")

        if player_index == computer_index:
            return GameResult.DRAW

        if computer_index in GameRules.beaten_by(player_index, num_moves):
            return GameResult.WIN
        return GameResult.LOSE
