"""
どこで: `engine.platform.guard`
何を: スコープ終了時に解放処理を呼ぶ `Guard`（コンテキストマネージャ）。
なぜ: ウィンドウ/レンダラ等の外部リソースを、生成と対になる解放関数で確実に閉じるため。

使用例:
    with Guard(create_window(), destroy_window) as window:
        ...

    with Guard.on_exit(shutdown_backend):
        ...
"""

from __future__ import annotations

import functools
from types import TracebackType
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Guard(Generic[T]):
    """リソースと解放関数の組。`with` 終了時（または `close()`）に 1 度だけ解放する。

    - `resource` が None の場合は解放関数を呼ばない（生成失敗時にそのまま使える）。
    - 解放関数の例外はそのまま伝播する。
    """

    __slots__ = ("_resource", "_callback")

    def __init__(self, resource: Optional[T], release: Callable[[T], None]) -> None:
        self._resource = resource
        self._callback: Optional[Callable[[], None]] = (
            None if resource is None else functools.partial(release, resource)
        )

    @classmethod
    def on_exit(cls, callback: Callable[[], None]) -> "Guard[None]":
        """リソースを持たず、終了時に `callback()` だけを呼ぶガード。"""
        guard: Guard[None] = cls(None, _noop)
        guard._callback = callback
        return guard

    @property
    def resource(self) -> Optional[T]:
        return self._resource

    @property
    def active(self) -> bool:
        """まだ解放していなければ True。"""
        return self._callback is not None

    def close(self) -> None:
        """解放処理を呼ぶ（2 回目以降は何もしない）。"""
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()

    def __enter__(self) -> Optional[T]:
        return self._resource

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


def _noop(_: object) -> None:
    return None


__all__ = ["Guard"]
