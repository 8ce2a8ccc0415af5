"""日志配置"""

import logging

from node_dirtiness.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """按配置设置根日志级别和格式

    debug 模式下强制使用 DEBUG 级别。
    """
    settings = settings or get_settings()
    level = "DEBUG" if settings.debug else settings.log_level.upper()

    logging.basicConfig(level=level, format=settings.log_format)
    logging.getLogger("node_dirtiness").setLevel(level)
