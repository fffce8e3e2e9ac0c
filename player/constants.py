# 网页播放器协议常量：事件名 / 参数名 / 保留键
from __future__ import annotations

from typing import FrozenSet


class WebPlayerEvent:
    """网页播放器通过消息通道上报的事件名（event=<name>）。"""

    VIDEO_START = "video_start"
    PLAYING = "playing"
    END = "end"
    PAUSE = "pause"
    SEEKING = "seeking"
    TIME_UPDATE = "timeupdate"
    DURATION_CHANGE = "durationchange"
    VOLUME_CHANGE = "volumechange"

    # 广告
    AD_LOADED = "ad_loaded"
    AD_START = "ad_start"
    AD_END = "ad_end"
    AD_BUFFER_START = "ad_bufferStart"
    AD_BUFFER_END = "ad_bufferEnd"
    AD_PLAY = "ad_play"
    AD_PAUSE = "ad_pause"
    AD_RESUME = "ad_resume"
    AD_TIME_UPDATE = "ad_timeupdate"
    AD_CLICK = "ad_click"

    # 全屏 / 画中画
    PRESENTATION_MODE_CHANGE = "presentationmodechange"
    FULLSCREEN_CHANGE = "fullscreenchange"
    FULLSCREEN_TOGGLE_REQUESTED = "fullscreen_toggle_requested"

    # 菜单与用户操作
    MENU_DID_SHOW = "menu_did_show"
    MENU_DID_HIDE = "menu_did_hide"
    LIKE_REQUESTED = "like_requested"
    LIKE_CHANGED = "notifyLikeChanged"
    WATCH_LATER_REQUESTED = "watch_later_requested"
    WATCH_LATER_CHANGED = "notifyWatchLaterChanged"
    ADD_TO_COLLECTION_REQUESTED = "add_to_collection_requested"
    SHARE_REQUESTED = "share_requested"

    ERROR = "error"
    API_READY = "apiready"

    @classmethod
    def all(cls) -> FrozenSet[str]:
        return frozenset(
            v for k, v in vars(cls).items()
            if k.isupper() and isinstance(v, str)
        )

    @classmethod
    def is_known(cls, name: str) -> bool:
        return name in _KNOWN_EVENTS


_KNOWN_EVENTS = WebPlayerEvent.all()


class WebPlayerParam:
    """命名事件 data 中常见的参数名。"""

    STATE = "state"
    MODE = "mode"
    MUTED = "muted"
    URL = "url"
    CODE = "code"
    PIP = "picture-in-picture"
    INLINE = "inline"
    FULLSCREEN = "fullscreen"


# 解析器保留键
EVENT_KEY = "event"

TIME_KEY = "time"
DURATION_KEY = "duration"
TIME_KEYS = (TIME_KEY, DURATION_KEY)  # 按优先级排列

ERROR_TITLE_KEY = "title"
ERROR_CODE_KEY = "code"
ERROR_MESSAGE_KEY = "message"

# 命名事件的 data 中剔除的键；title/message 没有 code 时照常透传
DATA_EXCLUDED_KEYS = frozenset((EVENT_KEY, TIME_KEY, DURATION_KEY))
