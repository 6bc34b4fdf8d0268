"""
どこで: `engine.platform.exception`
何を: 発生位置（ファイル/行/関数）とスタックトレースを保持する例外 `PlatformError` と、
      その整形出力・`panic()`・デバッガ検出/デバッグ出力。
なぜ: 起動処理などで致命的な失敗を報告する際、どこで何が起きたかを 1 つの書式で残すため。
"""

from __future__ import annotations

import inspect
import logging
import sys
import traceback
from dataclasses import dataclass
from types import FrameType
from typing import NoReturn, TextIO

logger = logging.getLogger(__name__)

REPORT_FORMAT = (
    "Error occurs while invoke function:\n{function}\nat {file}:{line}\nReason:\n{message}\n"
    "Stack trace:\n{stacktrace}"
)


def _caller_frame(depth: int) -> FrameType | None:
    frame = inspect.currentframe()
    # 自身 + depth 段さかのぼる
    for _ in range(depth + 1):
        if frame is None:
            return None
        frame = frame.f_back
    return frame


@dataclass(frozen=True)
class SourceLocation:
    file: str
    line: int
    function: str

    @classmethod
    def current(cls, depth: int = 1) -> "SourceLocation":
        """呼び出し元から `depth` 段上のフレーム位置を返す（1 = 直接の呼び出し元）。"""
        frame = _caller_frame(depth)
        if frame is None:
            return cls("<unknown>", 0, "<unknown>")
        return cls(frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_name)


class PlatformError(Exception):
    """発生位置とスタックトレースを添えた例外。

    `location`/`stacktrace` を省略した場合は、生成した呼び出し元で取得する。
    """

    def __init__(
        self,
        message: str,
        *,
        location: SourceLocation | None = None,
        stacktrace: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.location = location if location is not None else SourceLocation.current(depth=2)
        if stacktrace is None:
            frame = _caller_frame(1)
            stacktrace = "".join(traceback.format_stack(frame)) if frame is not None else ""
        self.stacktrace = stacktrace

    def report(self) -> str:
        """報告用の複数行テキストを返す。"""
        return REPORT_FORMAT.format(
            function=self.location.function,
            file=self.location.file,
            line=self.location.line,
            message=self.message,
            stacktrace=self.stacktrace,
        )

    def print_report(self, file: TextIO | None = None) -> None:
        """`report()` を `file`（既定は標準エラー）へ書き出す。"""
        stream = file if file is not None else sys.stderr
        print(self.report(), file=stream)


def panic(message: str, error_type: type[PlatformError] = PlatformError) -> NoReturn:
    """呼び出し元の位置を添えて `error_type` を送出する。"""
    location = SourceLocation.current(depth=2)
    logger.debug("panic at %s:%s: %s", location.file, location.line, message)
    raise error_type(message, location=location)


def is_debugger_present() -> bool:
    """トレース関数（pdb/debugpy 等）が設定されていれば True。"""
    return sys.gettrace() is not None


def write_debug_message(message: str) -> None:
    """デバッグ用メッセージを DEBUG ログへ出し、デバッガ接続中は標準エラーにも書く。"""
    logger.debug(message)
    if is_debugger_present():
        sys.stderr.write(message + "\n")


__all__ = [
    "PlatformError",
    "SourceLocation",
    "is_debugger_present",
    "panic",
    "write_debug_message",
]
