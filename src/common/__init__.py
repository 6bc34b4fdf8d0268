"""
どこで: `common` パッケージ。
何を: engine 配下で共有する軽量ユーティリティ（ロギング初期化・環境変数設定・型エイリアス）。
なぜ: 依存の最も内側に置き、engine.math2d / engine.platform の双方から再利用するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
