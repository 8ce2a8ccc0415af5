"""应用配置模块 - 使用 Pydantic Settings 管理环境变量"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类"""

    model_config = SettingsConfigDict(
        env_prefix="NODE_DIRTINESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Node Dirtiness", description="应用名称")
    env: Literal["development", "production", "test"] = Field(
        default="development", description="运行环境"
    )
    debug: bool = Field(default=False, description="调试模式")

    # Logging
    log_level: str = Field(default="INFO", description="日志级别")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        description="日志格式",
    )

    # Partial Execution
    partial_execution_version: int = Field(
        default=2, ge=1, le=2, description="局部执行版本（1 为旧版，不计算节点脏状态）"
    )

    @property
    def partial_execution_enabled(self) -> bool:
        return self.partial_execution_version != 1


@lru_cache
def get_settings() -> Settings:
    """返回缓存的配置实例"""
    return Settings()


# 全局配置实例
settings = get_settings()
