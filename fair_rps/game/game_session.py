"""
游戏会话
Game Session - 单回合：承诺、读取玩家输入、判定、公开密钥
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence
from .commitment import RandomSource, SecureRandomSource, KeyGenerator, commit, hmac_key, key_to_hex
from .game_logic import GameRules, GameResult, validate_moves, render_rules_table
from .state_machine import GameState, GameStateMachine
from ..utils.exceptions import GameException, InvalidMoveException
from ..utils.logger import setup_logger

logger = setup_logger("RPS.GameSession")

EXIT_COMMAND = "0"
HELP_COMMAND = "?"

_MOVE_NUMBER = re.compile(r"[0-9]+")


class SessionAction(Enum):
    """玩家输入触发的动作"""
    EXIT = "exit"
    HELP = "help"
    PLAYED = "played"


@dataclass(frozen=True)
class SessionResult:
    """一次输入的处理结果"""
    action: SessionAction
    player_move: Optional[str] = None
    computer_move: Optional[str] = None
    result: Optional[GameResult] = None
    key_hex: Optional[str] = None
    rules_table: Optional[str] = None


class GameSession:
    """
    单回合游戏会话

    构造时即生成密钥、抽取电脑招式并计算承诺，因此公布的承诺一定对应
    最终公开的电脑招式。
    """

    def __init__(self,
                 moves: Sequence[str],
                 random_source: Optional[RandomSource] = None,
                 require_unique_moves: bool = True,
                 rules_table_format: str = "plain"):
        """
        初始化游戏会话

        Args:
            moves: 招式列表（不小于3的奇数个）
            random_source: 随机数源（默认使用 SecureRandomSource）
            require_unique_moves: 是否拒绝重复的招式名称
            rules_table_format: 帮助表格的 tabulate 格式

        Raises:
            ConfigurationException: 招式列表不合法
            EntropyException: 随机数源失败
        """
        self.moves = validate_moves(moves, require_unique=require_unique_moves)
        self.num_moves = len(self.moves)
        self.half_moves = GameRules.half_moves(self.num_moves)
        self.rules_table_format = rules_table_format

        random_source = random_source or SecureRandomSource()
        self._key = KeyGenerator(random_source).generate_key()
        self._computer_index = random_source.next_index(self.num_moves)
        self._commitment = commit(hmac_key(self._key), self.moves[self._computer_index])

        self.state_machine = GameStateMachine(initial_state=GameState.AWAITING_MOVE)
        self.state_machine.register_state_handler(GameState.TERMINAL, self._handle_terminal)

        logger.info(f"游戏会话初始化完成，招式数: {self.num_moves}")
        logger.debug(f"承诺值: {self._commitment}")

    @property
    def commitment(self) -> str:
        """开局时公布的HMAC"""
        return self._commitment

    @property
    def state(self) -> GameState:
        return self.state_machine.get_current_state()

    def commit(self, move: str) -> str:
        """用本局密钥计算任意招式的承诺值"""
        return commit(hmac_key(self._key), move)

    def rules_table(self) -> str:
        """渲染规则表"""
        return render_rules_table(self.moves, GameRules.judge, self.rules_table_format)

    def handle_input(self, raw: str) -> SessionResult:
        """
        处理玩家的一行输入，本局随即结束

        Args:
            raw: 玩家输入

        Returns:
            SessionResult: 处理结果

        Raises:
            InvalidMoveException: 输入不是 0、? 或 1..N 的编号
            GameException: 本局已经结束
        """
        if self.state_machine.is_in_state(GameState.TERMINAL):
            raise GameException("本局已结束，不能再次出招", game_state=str(self.state))

        choice = raw.strip()

        if choice == EXIT_COMMAND:
            logger.info("玩家选择退出")
            self.state_machine.transition_to(GameState.TERMINAL)
            return SessionResult(action=SessionAction.EXIT)

        if choice == HELP_COMMAND:
            logger.info("玩家查看规则表")
            table = self.rules_table()
            self.state_machine.transition_to(GameState.AWAITING_MOVE)
            # 单回合设计：显示帮助后直接结束
            self.state_machine.transition_to(GameState.TERMINAL)
            return SessionResult(action=SessionAction.HELP, rules_table=table)

        player_index = self._parse_move_number(choice)
        if player_index is None:
            self.state_machine.transition_to(GameState.RESOLVED)
            self.state_machine.transition_to(GameState.TERMINAL)
            raise InvalidMoveException(
                "Invalid move. Please enter a valid move number.",
                raw_input=raw,
                game_state=str(GameState.RESOLVED)
            )

        result = GameRules.judge(player_index, self._computer_index, self.num_moves)
        self.state_machine.transition_to(GameState.RESOLVED)

        session_result = SessionResult(
            action=SessionAction.PLAYED,
            player_move=self.moves[player_index],
            computer_move=self.moves[self._computer_index],
            result=result,
            key_hex=key_to_hex(self._key)
        )
        logger.info(f"回合结果: {session_result.player_move} vs "
                    f"{session_result.computer_move}: {result.value}")

        self.state_machine.transition_to(GameState.TERMINAL)
        return session_result

    def _parse_move_number(self, choice: str) -> Optional[int]:
        """把 1..N 的编号转换为下标，不合法返回None"""
        if not _MOVE_NUMBER.fullmatch(choice):
            return None
        # 位数多于招式总数的输入必然越界，也避免超长数字串转换失败
        if len(choice.lstrip("0")) > len(str(self.num_moves)):
            return None
        number = int(choice)
        if not 1 <= number <= self.num_moves:
            return None
        return number - 1

    def _handle_terminal(self):
        """进入结束状态"""
        logger.debug("本局结束")
