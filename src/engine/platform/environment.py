"""
どこで: `engine.platform.environment`
何を: プロセス全体で共有するコマンドライン引数のアクセサ。
なぜ: 起動時点の `sys.argv` を不変のまま参照させ、途中での書き換えの影響を受けないようにするため。
"""

from __future__ import annotations

import sys

# 初回 import 時点のスナップショット
_COMMAND_ARGS: tuple[str, ...] = tuple(sys.argv)


def command_args() -> tuple[str, ...]:
    """起動時のコマンドライン引数（先頭はプログラム名）を返す。"""
    return _COMMAND_ARGS


__all__ = ["command_args"]
