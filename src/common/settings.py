"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str

LOG_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"

    # math2d
    DEBUG_SINK: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `PB_LOG_LEVEL`: ロギングレベル名（不正値は `INFO`）。
    - `PB_DEBUG_SINK`: `circle_vector` の出力先判定を DEBUG ログに出す。
    """
    _settings.LOG_LEVEL = env_str("PB_LOG_LEVEL", "INFO", choices=LOG_LEVEL_NAMES).upper()
    _settings.DEBUG_SINK = env_bool("PB_DEBUG_SINK", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
