#  配置 / Settings
import os

from commons.base_logger import to_level
from commons.normalizers import to_bool_or_none
from tools.config_loader import load_config

_LOG_CFG = load_config("logging")

LOG_LEVEL      = to_level(os.getenv("PLAYER_LOG_LEVEL", _LOG_CFG.get("level", "INFO")))            # 控制台级别
LOG_TO_FILE    = bool(to_bool_or_none(os.getenv("PLAYER_LOG_TO_FILE", _LOG_CFG.get("to_file"))))  # 是否写文件
LOG_FILE_LEVEL = to_level(os.getenv("PLAYER_LOG_FILE_LEVEL", _LOG_CFG.get("file_level", "ERROR")))  # 文件级别
