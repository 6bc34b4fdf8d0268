"""
どこで: `engine.platform` サブパッケージ。
何を: コマンドライン引数・例外報告・スコープ解放といった実行環境まわりの薄いユーティリティ。
"""

from .environment import command_args
from .exception import PlatformError, SourceLocation, is_debugger_present, panic, write_debug_message
from .guard import Guard

__all__ = [
    "Guard",
    "PlatformError",
    "SourceLocation",
    "command_args",
    "is_debugger_present",
    "panic",
    "write_debug_message",
]
