"""
配置加载工具模块
Configuration Loader Utility
"""
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from .exceptions import ConfigurationException
from .logger import setup_logger

logger = setup_logger("RPS.ConfigLoader")

# 默认配置文件路径：项目根目录下的 config/config.yaml
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

DEFAULT_LOGGING_CONFIG: Dict[str, Any] = {
    'level': 'WARNING',
    'file': None,
}

DEFAULT_GAME_CONFIG: Dict[str, Any] = {
    'require_unique_moves': True,
    'rules_table_format': 'plain',
    'prompt': 'Enter your move: ',
}


class ConfigLoader:
    """配置加载器类"""

    @staticmethod
    def load_config(config_path: str) -> Dict[str, Any]:
        """
        从YAML文件加载配置

        Args:
            config_path: 配置文件路径

        Returns:
            Dict[str, Any]: 配置字典

        Raises:
            FileNotFoundError: 配置文件不存在
            ConfigurationException: YAML解析错误或顶层不是映射
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f"配置文件不存在: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML解析错误: {e}")
            raise ConfigurationException(f"无法解析配置文件 {config_path}: {e}") from e

        if config is None:
            logger.warning(f"配置文件为空: {config_path}")
            return {}

        if not isinstance(config, dict):
            raise ConfigurationException(f"配置文件顶层必须是映射: {config_path}")

        logger.info(f"成功加载配置文件: {config_path}")
        return config

    @staticmethod
    def load_or_default(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        加载配置；未指定路径且默认文件不存在时返回空配置

        Args:
            config_path: 配置文件路径（None表示使用默认路径）

        Returns:
            Dict[str, Any]: 配置字典

        Raises:
            ConfigurationException: 显式指定的配置文件不存在或无法解析
        """
        if config_path is None:
            if not DEFAULT_CONFIG_PATH.exists():
                logger.debug(f"默认配置文件不存在，使用内置默认值: {DEFAULT_CONFIG_PATH}")
                return {}
            config_path = str(DEFAULT_CONFIG_PATH)

        try:
            return ConfigLoader.load_config(config_path)
        except FileNotFoundError as e:
            raise ConfigurationException(str(e), config_key='config') from e

    @staticmethod
    def get_game_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取游戏配置（已合并默认值）

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 游戏配置字典
        """
        return ConfigLoader._section(config, 'game', DEFAULT_GAME_CONFIG)

    @staticmethod
    def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取日志配置（已合并默认值）

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 日志配置字典
        """
        return ConfigLoader._section(config, 'logging', DEFAULT_LOGGING_CONFIG)

    @staticmethod
    def _section(config: Dict[str, Any], key: str, defaults: Dict[str, Any]) -> Dict[str, Any]:
        section = config.get(key) or {}
        if not isinstance(section, dict):
            raise ConfigurationException(f"配置项 '{key}' 必须是映射", config_key=key)
        merged = dict(defaults)
        merged.update(section)
        return merged
