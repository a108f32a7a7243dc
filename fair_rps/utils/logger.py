"""
日志工具模块
Logger Utility Module
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any

ROOT_LOGGER_NAME = "RPS"
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_log_level(level_str: str) -> int:
    """
    从字符串获取日志级别

    Args:
        level_str: 日志级别字符串（DEBUG, INFO, WARNING, ERROR, CRITICAL）

    Returns:
        int: 日志级别
    """
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }
    return level_map.get(str(level_str).upper(), logging.WARNING)


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    log_file: Optional[str] = None,
    level: int = logging.WARNING,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    设置日志记录器

    处理器只挂在根记录器 "RPS" 上，子记录器（"RPS.GameSession" 等）向上传播，
    避免同一条日志输出多次。控制台输出写到stderr，stdout留给游戏输出。

    Args:
        name: 日志记录器名称
        log_file: 日志文件路径（可选）
        level: 日志级别
        format_string: 日志格式字符串（可选）

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    if name != ROOT_LOGGER_NAME and name.startswith(ROOT_LOGGER_NAME + "."):
        setup_logger(ROOT_LOGGER_NAME, log_file=log_file, level=level,
                     format_string=format_string)
        return logging.getLogger(name)

    logger = logging.getLogger(name)

    # 避免重复添加处理器
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    # 控制台处理器
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 文件处理器（如果指定）
    if log_file:
        _add_file_handler(logger, log_file, formatter)

    return logger


def _add_file_handler(logger: logging.Logger, log_file: str, formatter: logging.Formatter):
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)


def setup_logger_from_config(config: Dict[str, Any], name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    从配置字典设置日志记录器

    模块导入时已经创建了根记录器，这里负责调整级别并补上文件处理器。

    Args:
        config: 配置字典（包含level和file键）
        name: 日志记录器名称

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    level = get_log_level(config.get('level', 'WARNING'))
    log_file = config.get('file')

    root = setup_logger(ROOT_LOGGER_NAME, level=level)
    root.setLevel(level)

    if log_file and not any(isinstance(h, logging.FileHandler) for h in root.handlers):
        _add_file_handler(root, log_file, logging.Formatter(DEFAULT_FORMAT))

    return logging.getLogger(name)


# 默认日志记录器
default_logger = setup_logger()
