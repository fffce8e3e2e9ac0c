import json

import pytest

from player.models import (
    ErrorEvent,
    NamedEvent,
    PlayerError,
    PlayerStatus,
    TimeEvent,
    VerificationScriptInfo,
)


def test_player_status_values():
    assert PlayerStatus.IDLE == 0
    assert PlayerStatus.PLAYING == 1
    assert PlayerStatus.NORMAL_SCREEN_CHANGE == 7
    assert PlayerStatus.ERROR == 10
    assert len(PlayerStatus) == 11
    assert PlayerStatus(9) is PlayerStatus.SEEKING


def test_events_have_no_instance_dict():
    # 事件对象只有声明字段，不能随手挂额外属性
    for ev in (
        TimeEvent(name="timeupdate", time=1.0),
        ErrorEvent(code="1"),
        NamedEvent(name="apiready"),
        VerificationScriptInfo(),
    ):
        assert not hasattr(ev, "__dict__")
        with pytest.raises(AttributeError):
            ev.extra = "x"


def test_error_event_field_order_and_keyword_only():
    ev = ErrorEvent(title="Oops", code="4001", message="Bad thing")
    assert list(ev.to_dict()) == ["title", "code", "message"]
    with pytest.raises(TypeError):
        ErrorEvent("Oops", "4001", "Bad thing")
    with pytest.raises(TypeError):
        ErrorEvent(title="Oops")  # code 必填


def test_error_event_defaults():
    assert ErrorEvent(code="4001") == ErrorEvent(title="", code="4001", message="")


def test_to_payload_tags_variant():
    assert TimeEvent(name="timeupdate", time=1.0).to_payload() == {
        "kind": "time", "name": "timeupdate", "time": 1.0,
    }
    assert ErrorEvent(code="1", title="t").to_payload() == {
        "kind": "error", "code": "1", "title": "t", "message": "",
    }
    assert NamedEvent(name="apiready").to_payload() == {
        "kind": "named", "name": "apiready", "data": None,
    }


def test_named_event_to_json_drop_none():
    ev = NamedEvent(name="apiready")
    assert json.loads(ev.to_json()) == {"name": "apiready", "data": None}
    assert json.loads(ev.to_json(drop_none=True)) == {"name": "apiready"}


def test_named_event_to_json_keeps_unicode():
    ev = NamedEvent(name="menu_did_show", data={"label": "中文"})
    assert "中文" in ev.to_json()


def test_named_event_param():
    ev = NamedEvent(name="volumechange", data={"muted": "true"})
    assert ev.param("muted") == "true"
    assert ev.param("volume") is None
    assert ev.param("volume", "1") == "1"
    assert NamedEvent(name="apiready").param("muted", "false") == "false"


def test_error_event_to_error():
    err = ErrorEvent(title="Oops", code="4001", message="Bad thing").to_error()
    assert isinstance(err, PlayerError)
    assert (err.title, err.code, err.message) == ("Oops", "4001", "Bad thing")
    assert str(err) == "[4001] Oops: Bad thing"
    with pytest.raises(PlayerError):
        raise err


def test_player_error_str_without_title_or_message():
    assert str(PlayerError(code="DM007")) == "[DM007]"
    assert str(PlayerError(code="DM007", message="gone")) == "[DM007]: gone"


def test_verification_script_info_from_wire_names():
    info = VerificationScriptInfo.from_dict({
        "url": "https://cdn.example.com/omid.js",
        "vendorKey": "vendor-1",
        "parameters": "",
    })
    assert info.url == "https://cdn.example.com/omid.js"
    assert info.vendor_key == "vendor-1"
    assert info.parameters is None
    assert info.to_dict(drop_none=True) == {
        "url": "https://cdn.example.com/omid.js",
        "vendor_key": "vendor-1",
    }


def test_verification_script_info_all_optional():
    assert VerificationScriptInfo.from_dict({}) == VerificationScriptInfo()


def test_verification_script_info_from_non_mapping():
    with pytest.raises(TypeError):
        VerificationScriptInfo.from_dict("url=x", strict=True)
    # 非严格模式降级为空行
    assert VerificationScriptInfo.from_dict("url=x") == VerificationScriptInfo()
