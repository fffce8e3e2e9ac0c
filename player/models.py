# 数据模型
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar, Dict, Optional, Union

from commons.base_dataclasses import BaseDataClass
from commons.normalizers import empty_to_none


class PlayerStatus(IntEnum):
    """对外公开的播放器状态（事件 -> 状态的映射由宿主 SDK 负责）。"""

    IDLE = 0
    PLAYING = 1
    PAUSED = 2
    BUFFERING = 3
    COMPLETE = 4
    VOLUME_CHANGE = 5
    FULL_SCREEN_CHANGE = 6
    NORMAL_SCREEN_CHANGE = 7
    RESUME = 8
    SEEKING = 9
    ERROR = 10


class PlayerError(Exception):
    """播放器上报的错误；由 ErrorEvent.to_error() 生成，解析器本身从不抛出。"""

    def __init__(self, title: str = "", code: str = "", message: str = ""):
        self.title = title
        self.code = code
        self.message = message
        super().__init__(title, code, message)

    def __str__(self) -> str:
        head = f"[{self.code}] {self.title}".rstrip()
        return f"{head}: {self.message}" if self.message else head


class _Tagged:
    """带 KIND 标签的序列化（下游按 kind 做穷举分发）。"""

    __slots__ = ()

    KIND: ClassVar[str] = ""

    def to_payload(self) -> Dict[str, Any]:
        return {"kind": self.KIND, **self.to_dict()}  # type: ignore[attr-defined]


@dataclass(slots=True)
class TimeEvent(_Tagged, BaseDataClass):
    """进度类通知：timeupdate / durationchange / ad_timeupdate 等。"""

    name: str
    time: float

    KIND: ClassVar[str] = "time"


@dataclass(slots=True, kw_only=True)
class ErrorEvent(_Tagged, BaseDataClass):
    """错误通知；字段顺序 title, code, message，只接受关键字构造。code 必填，title / message 缺省为空串。"""

    title: str = ""
    code: str
    message: str = ""

    KIND: ClassVar[str] = "error"

    def to_error(self) -> PlayerError:
        return PlayerError(title=self.title, code=self.code, message=self.message)


@dataclass(slots=True)
class NamedEvent(_Tagged, BaseDataClass):
    """兜底的命名事件；data 没有剩余参数时为 None，而不是 {}。"""

    name: str
    data: Optional[Dict[str, str]] = None

    KIND: ClassVar[str] = "named"

    def param(self, key: str, default: Optional[str] = None) -> Optional[str]:
        if not self.data:
            return default
        return self.data.get(key, default)


PlayerEvent = Union[TimeEvent, ErrorEvent, NamedEvent]


@dataclass(slots=True)
class VerificationScriptInfo(BaseDataClass):
    """广告可见性校验脚本信息（宿主 SDK 透传，不参与事件解析）。"""

    url: Optional[str] = None
    vendor_key: Optional[str] = None
    parameters: Optional[str] = None

    FIELD_MAPPING: ClassVar[Dict[str, str]] = {
        "vendorKey": "vendor_key",
    }

    CONVERTERS: ClassVar[Dict[str, Any]] = {
        "url": empty_to_none,
        "vendor_key": empty_to_none,
        "parameters": empty_to_none,
    }
