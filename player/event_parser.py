# 事件解析器 EventParser

from __future__ import annotations
from typing import Any, Dict, Optional

from commons.base_logger import BaseLogger
from commons.normalizers import parse_float_strict, percent_decode_or_raw
from player.constants import (
    DATA_EXCLUDED_KEYS,
    ERROR_CODE_KEY,
    ERROR_MESSAGE_KEY,
    ERROR_TITLE_KEY,
    EVENT_KEY,
    TIME_KEYS,
    WebPlayerEvent,
)
from player.models import ErrorEvent, NamedEvent, PlayerEvent, TimeEvent
from player.setting import LOG_FILE_LEVEL, LOG_LEVEL, LOG_TO_FILE

_LOGGER = BaseLogger(
    name="EventParser", level=LOG_LEVEL, to_file=LOG_TO_FILE, file_level=LOG_FILE_LEVEL,
).logger


class EventParser:
    """
    把网页播放器经消息通道发来的一条 "k1=v1&k2=v2" 文本解析为播放器事件。
    - 无状态、纯函数，可并发调用
    - 判定优先级固定：时间字段 > 错误字段 > 命名事件
    - 任何无法识别的输入都返回 None（调用方忽略即可），从不抛异常
    """

    @staticmethod
    def parse_event(raw: Any) -> Optional[PlayerEvent]:
        """
        解析一条原始消息。

        返回：
            TimeEvent：time（优先）或 duration 能解析为浮点数
            ErrorEvent：存在 code
            NamedEvent：其余情况，data 为剔除保留键并 %XX 解码后的参数
            None：非字符串输入，或缺少 event
        """
        if not isinstance(raw, str):
            _LOGGER.debug("忽略非字符串消息: %s", type(raw).__name__)
            return None

        params = EventParser._parse_parameters(raw)

        name = params.get(EVENT_KEY)
        if name is None:
            _LOGGER.debug("忽略缺少 event 的消息: %.120r", raw)
            return None
        if not WebPlayerEvent.is_known(name):
            _LOGGER.debug("未登记的播放器事件: %r", name)

        time = EventParser._parse_time(params)
        if time is not None:
            return TimeEvent(name=name, time=time)

        error = EventParser._parse_error(params)
        if error is not None:
            return error

        return NamedEvent(name=name, data=EventParser._parse_data(params))

    @staticmethod
    def _parse_parameters(raw: str) -> Dict[str, str]:
        """
        按 & 切分条目、按 = 切分键值。
        - 每个条目取第一段作 key、最后一段作 value，中间段丢弃（"a=b=c" -> a: c；
          没有 = 的条目 key 与 value 相同）
        - key 或 value 为空的条目丢弃
        - 重复 key 后者覆盖前者
        """
        params: Dict[str, str] = {}
        for entry in raw.split("&"):
            pieces = entry.split("=")
            key, value = pieces[0], pieces[-1]
            if key and value:
                params[key] = value
        return params

    @staticmethod
    def _parse_time(params: Dict[str, str]) -> Optional[float]:
        # time 在前，duration 在后；解析失败的字段直接跳过
        for key in TIME_KEYS:
            if key in params:
                parsed = parse_float_strict(params[key])
                if parsed is not None:
                    return parsed
        return None

    @staticmethod
    def _parse_error(params: Dict[str, str]) -> Optional[ErrorEvent]:
        # 保留字段不做 %XX 解码
        code = params.get(ERROR_CODE_KEY)
        if code is None:
            return None
        return ErrorEvent(
            title=params.get(ERROR_TITLE_KEY, ""),
            code=code,
            message=params.get(ERROR_MESSAGE_KEY, ""),
        )

    @staticmethod
    def _parse_data(params: Dict[str, str]) -> Optional[Dict[str, str]]:
        data: Dict[str, str] = {}
        for key, value in params.items():
            if key in DATA_EXCLUDED_KEYS:
                continue
            decoded = percent_decode_or_raw(value)
            if decoded is value and "%" in value:
                _LOGGER.debug("参数 %s 解码失败，保留原值: %.120r", key, value)
            data[key] = decoded
        return data or None


parse_event = EventParser.parse_event
