"""
规则表
Rules Table Renderer
"""
from typing import Callable, Sequence
import numpy as np
from tabulate import tabulate
from .game_rules import GameRules, GameResult

Resolver = Callable[[int, int, int], GameResult]


def build_rules_matrix(num_moves: int, resolver: Resolver = GameRules.judge) -> np.ndarray:
    """
    构建 N×N 结果矩阵，matrix[i][j] 为玩家出 i、电脑出 j 时的结果

    Args:
        num_moves: 招式总数
        resolver: 判定函数

    Returns:
        np.ndarray: dtype=object 的 GameResult 矩阵
    """
    judge = np.frompyfunc(lambda i, j: resolver(int(i), int(j), num_moves), 2, 1)
    indices = np.arange(num_moves)
    return judge(indices[:, np.newaxis], indices[np.newaxis, :])


def render_rules_table(moves: Sequence[str],
                       resolver: Resolver = GameRules.judge,
                       tablefmt: str = "plain") -> str:
    """
    渲染规则表：第一行为招式名称，每行左侧为玩家招式

    Args:
        moves: 招式列表
        resolver: 判定函数
        tablefmt: tabulate 表格格式

    Returns:
        str: 格式化后的表格文本
    """
    matrix = build_rules_matrix(len(moves), resolver)
    rows = [
        [move] + [result.label for result in matrix[i]]
        for i, move in enumerate(moves)
    ]
    return tabulate(rows, headers=[""] + list(moves), tablefmt=tablefmt,
                    disable_numparse=True)
