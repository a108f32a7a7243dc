"""
游戏逻辑模块
Game Logic Module
"""
from .game_rules import GameRules, GameResult
from .move_list import validate_moves, MIN_MOVES
from .rules_table import build_rules_matrix, render_rules_table

__all__ = [
    'GameRules',
    'GameResult',
    'validate_moves',
    'MIN_MOVES',
    'build_rules_matrix',
    'render_rules_table'
]
