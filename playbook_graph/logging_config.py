"""日志初始化

各模块统一使用 logging.getLogger(__name__)，结构化字段通过 extra= 传入；
这里只负责根 logger 的级别和输出格式，且只初始化一次。
"""

import logging
import sys

from playbook_graph.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s"

_logging_initialized = False


def setup_logging() -> None:
    """根据 settings.log_level 配置根 logger（测试环境下不做任何事）"""
    global _logging_initialized

    if _logging_initialized or settings.env == "test":
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(settings.log_level.upper())

    _logging_initialized = True
