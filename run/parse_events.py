# run/parse_events.py
"""
逐行解析抓到的播放器消息，每行输出一条 JSON：
    python -m run.parse_events captured.txt
    cat captured.txt | python -m run.parse_events --skip-unparsed
被忽略的消息输出 null（--skip-unparsed 时不输出）。
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional, TextIO

from commons.base_logger import BaseLogger, to_level
from player.event_parser import parse_event


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Decode web player messages into JSON events")
    ap.add_argument("path", nargs="?", help="消息文件，一行一条；缺省读 stdin")
    ap.add_argument("--skip-unparsed", action="store_true", help="不输出被忽略的消息")
    ap.add_argument("--log-level", default=None, help="覆盖 EventParser 日志级别，例如 DEBUG")
    return ap


def decode_lines(lines: TextIO, out: TextIO, skip_unparsed: bool = False) -> int:
    """解析每一行并写出 JSON，返回成功解析的条数。"""
    parsed = 0
    for line in lines:
        ev = parse_event(line.rstrip("\r\n"))
        if ev is None:
            if not skip_unparsed:
                out.write("null\n")
            continue
        parsed += 1
        out.write(json.dumps(ev.to_payload(), ensure_ascii=False) + "\n")
    return parsed


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    log = BaseLogger(name="parse_events")

    if args.log_level:
        level = to_level(args.log_level)
        parser_logger = BaseLogger(name="EventParser").logger
        parser_logger.setLevel(level)
        for h in parser_logger.handlers:
            h.setLevel(level)

    if args.path:
        with open(args.path, "r", encoding="utf-8") as f:
            n = decode_lines(f, sys.stdout, args.skip_unparsed)
    else:
        n = decode_lines(sys.stdin, sys.stdout, args.skip_unparsed)

    log.log_info(f"parsed {n} events")
    return 0


if __name__ == "__main__":
    sys.exit(main())
