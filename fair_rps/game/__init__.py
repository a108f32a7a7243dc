"""
游戏逻辑模块
Game Module
"""
from .game_session import GameSession, SessionAction, SessionResult
from .game_logic import GameRules, GameResult, validate_moves, build_rules_matrix, render_rules_table
from .state_machine import GameState, GameStateMachine
from .commitment import (
    RandomSource, SecureRandomSource, KeyGenerator, commit, verify_commitment,
    key_to_hex, key_from_hex, hmac_key
)

__all__ = [
    'GameSession',
    'SessionAction',
    'SessionResult',
    'GameRules',
    'GameResult',
    'validate_moves',
    'build_rules_matrix',
    'render_rules_table',
    'GameState',
    'GameStateMachine',
    'RandomSource',
    'SecureRandomSource',
    'KeyGenerator',
    'commit',
    'verify_commitment',
    'key_to_hex',
    'key_from_hex',
    'hmac_key'
]
