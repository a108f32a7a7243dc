"""
自定义异常类
Custom Exception Classes
"""
from typing import Optional


class ConfigurationException(Exception):
    """配置异常（命令行参数或配置文件）"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
        self.message = message


class GameException(Exception):
    """游戏逻辑异常"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state
        self.message = message


class InvalidMoveException(GameException):
    """玩家输入了无效的招式编号"""
    def __init__(self, message: str, raw_input: Optional[str] = None,
                 game_state: Optional[str] = None):
        super().__init__(message, game_state=game_state)
        self.raw_input = raw_input


class EntropyException(Exception):
    """随机数源不可用"""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
