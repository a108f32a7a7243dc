"""
应用程序主类
Application Main Class - 控制台输入输出
"""
import sys
from typing import Callable, Optional, Sequence, TextIO
from .game import GameSession, SessionAction, SessionResult, RandomSource
from .utils.config_loader import ConfigLoader
from .utils.error_handler import global_error_handler
from .utils.exceptions import ConfigurationException, InvalidMoveException, EntropyException
from .utils.logger import setup_logger, setup_logger_from_config

logger = setup_logger("RPS.App")

USAGE_EXAMPLE = "Example: fair-rps rock paper scissors"


class Application:
    """应用程序主类"""

    def __init__(self,
                 config_path: Optional[str] = None,
                 log_level: Optional[str] = None,
                 random_source: Optional[RandomSource] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None):
        """
        初始化应用程序

        Args:
            config_path: 配置文件路径（None表示默认路径）
            log_level: 覆盖配置中的日志级别
            random_source: 随机数源（测试时注入）
            input_func: 读取一行输入的函数
            stdout: 游戏输出流
            stderr: 错误输出流

        Raises:
            ConfigurationException: 配置文件不存在或无法解析
        """
        self.config = ConfigLoader.load_or_default(config_path)
        self.game_config = ConfigLoader.get_game_config(self.config)

        logging_config = ConfigLoader.get_logging_config(self.config)
        if log_level:
            logging_config['level'] = log_level
        setup_logger_from_config(logging_config)
        logger.debug(f"日志级别: {logging_config['level']}")

        self.random_source = random_source
        self.input_func = input_func or input
        self.stdout = stdout
        self.stderr = stderr
        self.session: Optional[GameSession] = None

        logger.info("应用程序初始化完成")

    def run(self, moves: Sequence[str]) -> int:
        """
        运行一局游戏

        Args:
            moves: 命令行给出的招式列表

        Returns:
            int: 进程退出码
        """
        try:
            self.session = GameSession(
                moves,
                random_source=self.random_source,
                require_unique_moves=bool(self.game_config['require_unique_moves']),
                rules_table_format=self.game_config['rules_table_format']
            )
        except ConfigurationException as e:
            global_error_handler.handle(e, "校验招式")
            self._error(f"Error: {e.message}")
            self._error(USAGE_EXAMPLE)
            return 1
        except EntropyException as e:
            global_error_handler.handle(e, "创建会话")
            self._error(f"Error: {e.message}")
            return 1

        self._print_menu()

        try:
            raw = self.input_func(self.game_config['prompt'])
        except EOFError:
            logger.info("输入已结束，按退出处理")
            raw = "0"

        try:
            result = self.session.handle_input(raw)
        except InvalidMoveException as e:
            global_error_handler.handle(e, "读取玩家招式")
            self._error(f"Error: {e.message}")
            return 0

        self._print_result(result)
        return 0

    def _print_menu(self):
        """输出承诺值和招式菜单"""
        self._out(f"HMAC: {self.session.commitment}")
        self._out("Available moves:")
        for number, move in enumerate(self.session.moves, start=1):
            self._out(f"{number} - {move}")
        self._out("0 - exit")
        self._out("? - help")

    def _print_result(self, result: SessionResult):
        """根据处理结果输出"""
        if result.action == SessionAction.HELP:
            self._out("\nRules:")
            self._out(result.rules_table)
        elif result.action == SessionAction.PLAYED:
            self._out(f"Your move: {result.player_move}")
            self._out(f"Computer move: {result.computer_move}")
            self._out(result.result.message)
            self._out(f"HMAC key: {result.key_hex}")

    def _out(self, text: str):
        print(text, file=self.stdout or sys.stdout)

    def _error(self, text: str):
        print(text, file=self.stderr or sys.stderr)
