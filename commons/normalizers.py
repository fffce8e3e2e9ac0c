# -*- coding: utf-8 -*-  # 指定 UTF-8 编码
# commons/normalizers.py  # 文件路径说明
from __future__ import annotations  # 允许前向引用注解

"""
normalizers
-----------
通用“字段级转换”函数库。  # 模块文档：说明用途与函数签名
转换函数：func(value) -> new_value；转换失败一律返回 None 或原值，不抛异常。  # 签名约定
"""

import re  # 百分号转义合法性检查
from typing import Any, Optional  # 导入通用类型注解
from urllib.parse import unquote  # %XX 解码

# 一个 % 后面必须紧跟两位十六进制，否则整串视为非法编码
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")

# 带 0x / 0X 前缀的按十六进制浮点解析
_HEX_FLOAT = re.compile(r"[+-]?0[xX]")


def empty_to_none(x: Any) -> Any:  # 将空串转换为 None 的转换器
    """将空串（含全空白）转换为 None，其它值保持不变。"""  # 文档字符串说明
    return None if isinstance(x, str) and x.strip() == "" else x  # 逻辑：字符串且空白则 None，否则原样返回


def to_bool_or_none(x: Any) -> Optional[bool]:
    """
    将值转换为 bool；常见真值：True/1/"1"/"true"/"True"/"yes"/"y"
    常见假值：False/0/"0"/"false"/"False"/"no"/"n"
    其它或空返回 None。
    """
    if x is None:
        return None
    if isinstance(x, bool):
        return x
    s = str(x).strip().lower()
    if s in {"1", "true", "yes", "y"}:
        return True
    if s in {"0", "false", "no", "n"}:
        return False
    return None


def parse_float_strict(x: Any) -> Optional[float]:
    """
    严格的浮点解析（播放器上报的 time / duration 字段使用）：
    - "12.5" -> 12.5，"300" -> 300.0，"-1e3" -> -1000.0，"inf"/"nan" 照常接受
    - 十六进制浮点 "0x10" -> 16.0，"-0x1p-2" -> -0.25
    - 首尾带空白（" 1"）、数字分组下划线（"1_0"）、非 ASCII 数字（"١٢"）、空串 -> None
    - 非字符串：bool 一律 None；int/float 直接转为 float
    """
    if isinstance(x, bool) or x is None:
        return None
    if isinstance(x, (int, float)):
        return float(x)
    if not isinstance(x, str) or x == "" or not x.isascii() or x != x.strip() or "_" in x:
        return None
    try:
        if _HEX_FLOAT.match(x):
            return float.fromhex(x)
        return float(x)
    except ValueError:
        return None


def percent_decode_or_raw(x: str) -> str:
    """
    对 %XX 转义做 UTF-8 解码；编码不合法时原样返回：
    - "Bad%20thing" -> "Bad thing"
    - "100%"、"%zz"、"%E4" (残缺的 UTF-8) -> 原样返回
    - "+" 不当作空格
    """
    if "%" not in x:
        return x
    if _BAD_PERCENT.search(x):
        return x
    try:
        return unquote(x, encoding="utf-8", errors="strict")
    except UnicodeDecodeError:
        return x
