"""
可验证公平的剪刀石头布游戏主程序入口
Provably Fair Rock Paper Scissors Main Entry
"""
import sys
import argparse
from typing import List, Optional

from fair_rps.app import Application
from fair_rps.utils.error_handler import global_error_handler
from fair_rps.utils.exceptions import ConfigurationException
from fair_rps.utils.logger import setup_logger

logger = setup_logger("RPS.Main")


def build_parser() -> argparse.ArgumentParser:
    """构建命令行解析器"""
    parser = argparse.ArgumentParser(
        prog='fair-rps',
        description='可验证公平的N招式剪刀石头布 (Provably fair N-move rock-paper-scissors)'
    )
    parser.add_argument(
        'moves',
        nargs='*',
        help='招式名称，数量为不小于3的奇数，按循环顺序排列'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='配置文件路径（默认: config/config.yaml）'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='日志级别，覆盖配置文件'
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """主函数"""
    args = build_parser().parse_args(argv)

    try:
        app = Application(config_path=args.config, log_level=args.log_level)
    except ConfigurationException as e:
        global_error_handler.handle(e, "加载配置")
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    try:
        exit_code = app.run(args.moves)
    except KeyboardInterrupt:
        logger.info("用户中断程序")
        exit_code = 130
    except Exception as e:
        logger.error(f"程序异常退出: {e}", exc_info=True)
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
