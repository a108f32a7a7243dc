"""
招式列表校验
Move List Validation
"""
from collections import Counter
from typing import Iterable, Tuple
from ...utils.exceptions import ConfigurationException

MIN_MOVES = 3


def validate_moves(moves: Iterable[str], require_unique: bool = True) -> Tuple[str, ...]:
    """
    校验招式列表：数量为不小于3的奇数，且名称不重复

    Args:
        moves: 招式名称
        require_unique: 是否检查重名

    Returns:
        Tuple[str, ...]: 不可变的招式列表

    Raises:
        ConfigurationException: 数量不对或有重复名称
    """
    move_list = tuple(moves)

    if len(move_list) < MIN_MOVES or len(move_list) % 2 != 1:
        raise ConfigurationException(
            "Incorrect number of arguments. "
            "Please provide an odd number >= 3 of non-repeating strings.",
            config_key='moves'
        )

    if require_unique:
        duplicates = [name for name, count in Counter(move_list).items() if count > 1]
        if duplicates:
            raise ConfigurationException(
                f"Moves must not repeat: {', '.join(duplicates)}",
                config_key='moves'
            )

    return move_list
