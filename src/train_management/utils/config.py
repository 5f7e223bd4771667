"""配置管理"""

import logging
from typing import Optional
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """应用配置"""
    log_level: str = Field(default="INFO", description="日志级别")
    debug: bool = Field(default=False, description="调试模式")
    default_train_status: str = Field(default="On Time", description="新建列车的默认状态")
    cargo_weight_unit: str = Field(default="tons", description="货运重量单位")
    timezone: str = Field(default="UTC", description="计算当天日期使用的时区")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """获取配置实例"""
    global _settings
    if _settings is None:
        env_file_path = Path(".env")
        if not env_file_path.exists():
            logger.debug(f"环境配置文件 {env_file_path.absolute()} 不存在，使用默认配置")
        else:
            logger.info(f"加载环境配置文件: {env_file_path.absolute()}")

        try:
            _settings = Settings()
            logger.info(f"配置加载成功 - 日志级别: {_settings.log_level}, 默认状态: {_settings.default_train_status}, 时区: {_settings.timezone}")
        except Exception as e:
            logger.error(f"配置加载失败: {e}，使用默认配置")
            _settings = Settings.model_construct()

    return _settings
