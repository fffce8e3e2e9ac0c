# -*- coding: utf-8 -*-
"""
BaseDataClass
-------------
为 dataclass 子类提供统一的构造/清洗与序列化能力。
流程：字段映射 -> 字段转换 -> 构造实例 -> 序列化。

使用约定：
- 子类必须使用 @dataclass 装饰；本类声明空 __slots__，子类可用 slots=True。
- 缺省值直接写在 dataclass 字段上；CONVERTERS 为纯函数。
- 本基类只提供“数据包”能力，不承载任何业务行为。
"""
from __future__ import annotations

import dataclasses
import json
import logging
from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    Mapping,
    Type,
    TypeVar,
)

from commons.base_logger import BaseLogger

# 模块级默认 logger（子类可覆盖 BaseDataClass.LOGGER 来定向到其他日志名/文件）
_DEFAULT_LOGGER = BaseLogger(name="BaseDataClass").logger

T = TypeVar("T", bound="BaseDataClass")
Converter = Callable[[Any], Any]


class BaseDataClass:
    """dataclass 子类的通用基类：构造、清洗、序列化。

    子类可配置以下类变量以定制行为：
    - FIELD_MAPPING: 外部字段名 -> 内部字段名（例如 "vendorKey" -> "vendor_key"）。
    - CONVERTERS: 字段级转换器；在字段映射之后、构造之前执行。
    - LOGGER: 日志器。
    - JSON_DEFAULT: 提供给 json.dumps 的 default 钩子。

    典型用法：
        info = VerificationScriptInfo.from_dict({"url": "https://x/omid.js", "vendorKey": "v"})
        info.to_dict()                # {"url": "https://x/omid.js", "vendor_key": "v", "parameters": None}
        info.to_json(drop_none=True)
    """

    __slots__ = ()

    FIELD_MAPPING: ClassVar[Dict[str, str]] = {}
    CONVERTERS: ClassVar[Dict[str, Converter]] = {}

    LOGGER: ClassVar[logging.Logger] = _DEFAULT_LOGGER

    JSON_DEFAULT: ClassVar[Callable[[Any], Any] | None] = None

    @classmethod
    def _logger(cls) -> logging.Logger:
        return getattr(cls, "LOGGER", _DEFAULT_LOGGER) or _DEFAULT_LOGGER

    # ---------------- 构造 ----------------
    @classmethod
    def from_dict(
        cls: Type[T],
        data: Mapping[str, Any],
        *,
        strict: bool = False,
        log_errors: bool = True,
    ) -> T:
        """从单个字典构造实例：映射 -> 转换 -> 构造。

        参数：
            data: 外部输入行（Mapping）。若非 Mapping：
                  - strict=True 则 TypeError；
                  - 否则降级为空 dict，并记录警告（若 log_errors）。
            strict: True 则转换异常直接抛出；False 则记录日志并保留原值。
            log_errors: 是否记录警告日志。

        缺少必填字段在两种模式下都会抛出 TypeError。
        """
        logger = cls._logger()

        if not isinstance(data, Mapping):
            msg = f"from_dict 需要 Mapping，实际得到: {type(data).__name__}"
            if strict:
                raise TypeError(msg)
            if log_errors:
                logger.warning(msg)
            data = {}

        try:
            dc_names = {f.name for f in dataclasses.fields(cls)}
        except TypeError:
            raise TypeError(f"{cls.__name__} 必须使用 @dataclass 装饰")

        # 1) 字段映射（外键 -> 内部字段名），并检测冲突
        mapped: Dict[str, Any] = {}
        _seen_src: Dict[str, str] = {}
        for ext_key, val in data.items():
            internal = cls.FIELD_MAPPING.get(ext_key, ext_key)
            if internal in dc_names:
                if internal in mapped and log_errors:
                    logger.warning(
                        "字段映射冲突: %r 与 %r 都映射到 %r，后者覆盖前者",
                        _seen_src[internal], ext_key, internal,
                    )
                mapped[internal] = val
                _seen_src[internal] = ext_key

        # 2) 字段级转换
        for key, fn in cls.CONVERTERS.items():
            if key in mapped:
                try:
                    mapped[key] = fn(mapped[key])
                except Exception as e:
                    if strict:
                        raise
                    if log_errors:
                        snippet = repr(str(mapped.get(key))[:120])
                        logger.warning(
                            "字段转换失败 %s (%s): %s; 值片段=%s",
                            key, type(e).__name__, e, snippet,
                        )

        # 3) 构造 dataclass 实例（仅使用声明字段）
        slim = {k: v for k, v in mapped.items() if k in dc_names}
        try:
            return cls(**slim)  # type: ignore[arg-type]
        except TypeError as e:
            if log_errors:
                missing = [f.name for f in dataclasses.fields(cls) if f.name not in slim]
                logger.warning("构造实例失败: %s; 缺失=%r; 数据片段=%r", e, missing, str(slim)[:200])
            raise

    # ---------------- 序列化 ----------------
    def to_dict(self, *, drop_none: bool = False) -> Dict[str, Any]:
        """导出为 dict；
        - drop_none=False：等同 dataclasses.asdict(self)
        - drop_none=True：递归剔除 None（对嵌套 dict/list 生效）
        """
        if not dataclasses.is_dataclass(self):
            raise TypeError(f"{type(self).__name__} 不是 dataclass，无法 asdict")
        d = dataclasses.asdict(self)
        if not drop_none:
            return d

        def _strip_none(obj: Any) -> Any:
            if isinstance(obj, dict):
                return {k: _strip_none(v) for k, v in obj.items() if v is not None}
            if isinstance(obj, list):
                return [_strip_none(x) for x in obj if x is not None]
            return obj

        return _strip_none(d)

    def to_json(
        self,
        *,
        ensure_ascii: bool = False,
        drop_none: bool = False,
        default: Callable[[Any], Any] | None = None,
    ) -> str:
        """导出 JSON 文本；ensure_ascii=False 保留中文，default 未提供时使用 JSON_DEFAULT。"""
        cls = type(self)
        return json.dumps(
            self.to_dict(drop_none=drop_none),
            ensure_ascii=ensure_ascii,
            default=default or cls.JSON_DEFAULT,
        )
