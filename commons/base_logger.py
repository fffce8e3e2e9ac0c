import inspect
import logging
import os
from logging.handlers import TimedRotatingFileHandler

LOG_FORMAT = (
    "%(asctime)s | %(name)s | %(levelname)s | "
    "[%(filename)s:%(lineno)d %(funcName)s] | %(threadName)s | %(message)s"
)


def to_level(level: int | str) -> int:
    """
    把 "DEBUG" / "info" / 10 之类统一为 logging 级别整数。
    无法识别的名字抛 ValueError（配置写错应尽早暴露）。
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"未知日志级别: {level!r}")
    return value


class BaseLogger:
    """
    基础日志类：
    - 控制台 + 按天轮转文件输出（文件可选）
    - 未指定名字时自动推断调用类名作为 logger 名
    - 同名 logger 只挂一次 handler，重复构造不会重复输出
    """

    def __init__(
        self,
        name: str | None = None,
        level: int | str = logging.INFO,
        to_file: bool = False,
        file_path: str | None = None,
        file_level: int | str = logging.ERROR,
    ):
        """
        :param name: logger 名称（默认取调用者类名）
        :param level: 控制台日志级别，接受整数或级别名
        :param to_file: 是否启用文件日志
        :param file_path: 日志文件路径（默认 <项目根>/logs/<name>.log）
        :param file_level: 文件日志的最低级别（默认 ERROR）
        """
        if name is None:
            name = self._get_caller_class_name() or self.__class__.__name__

        level = to_level(level)
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.propagate = False  # 防止重复输出

        if not self.logger.handlers:
            formatter = logging.Formatter(LOG_FORMAT)

            ch = logging.StreamHandler()
            ch.setLevel(level)
            ch.setFormatter(formatter)
            self.logger.addHandler(ch)

            if to_file:
                if file_path is None:
                    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
                    log_dir = os.path.join(project_root, "logs")
                    os.makedirs(log_dir, exist_ok=True)
                    file_path = os.path.join(log_dir, f"{self.logger.name}.log")

                fh = TimedRotatingFileHandler(
                    filename=file_path,
                    when="midnight",  # 每天轮转
                    interval=1,
                    backupCount=7,  # 保留 7 天
                    encoding="utf-8",
                )
                fh.setLevel(to_level(file_level))
                fh.setFormatter(formatter)
                self.logger.addHandler(fh)

    def _get_caller_class_name(self) -> str | None:
        """获取调用者类名（跳过 BaseLogger 自身）。"""
        for frame_record in inspect.stack():
            instance = frame_record.frame.f_locals.get("self")
            if instance and instance.__class__ != self.__class__:
                return instance.__class__.__name__
        return None

    # ------------------ 对外日志接口 ------------------

    def log_info(self, message: str, exc_info: bool = False):
        self.logger.info(message, exc_info=exc_info)
