"""
どこで: `engine.math2d.sink`
何を: `Angle.circle_vector` の出力先（シンク）を能力ベースで判定し、`(x, y)` を受け取る関数へ統一する。
なぜ: list/deque/set/独自コンテナ/2 引数コールバックを同一 API で受け付けつつ、
      受け付けられない出力先はループ開始前に明示的なエラーで弾くため。

判定順（固定。先に一致したものを採用）:
1. `sink(x, y)` と 2 つの位置引数で呼べる呼び出し可能オブジェクト
2. 1 つの `(x, y)` タプルを受け取るメソッド: `append` → `push` → `put` → `add`

いずれにも一致しない場合は `SinkCapabilityError` を送出する（何も出力しない）。
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

from common import settings

logger = logging.getLogger(__name__)

PointEmitter = Callable[[float, float], None]

# コンテナ側の追加メソッド（優先順）
CONTAINER_METHODS: tuple[str, ...] = ("append", "push", "put", "add")


class SinkCapabilityError(TypeError):
    """出力先が受け付け可能などの形にも一致しない場合に送出される。"""

    def __init__(self, sink: object, message: str | None = None) -> None:
        if message is None:
            message = _describe_failure(sink)
        super().__init__(message)
        self.sink = sink

    def __reduce__(self) -> tuple[type["SinkCapabilityError"], tuple[object, str]]:
        return (type(self), (self.sink, str(self)))


def _describe_failure(sink: object) -> str:
    methods = ", ".join(f"`.{m}((x, y))`" for m in CONTAINER_METHODS)
    return (
        f"circle_vector の出力先として使用できません: {type(sink).__qualname__}。"
        f" `sink(x, y)` で呼べる関数、または {methods} のいずれかを持つコンテナを渡してください。"
    )


def _accepts_positional(fn: Callable[..., Any], count: int) -> bool:
    """`fn` が `count` 個の位置引数で束縛可能かを調べる。

    シグネチャを取得できない組込み関数等は受け付けるものとして扱う。
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return True
    try:
        sig.bind(*([0.0] * count))
    except TypeError:
        return False
    return True


def _is_point_callable(sink: object) -> bool:
    # クラスそのもの（list 等）は呼べても出力先ではない
    if isinstance(sink, type) or not callable(sink):
        return False
    return _accepts_positional(sink, 2)


def _container_method(sink: object) -> str | None:
    for name in CONTAINER_METHODS:
        method = getattr(sink, name, None)
        if method is None or not callable(method):
            continue
        if _accepts_positional(method, 1):
            return name
    return None


def describe_sink(sink: object) -> str | None:
    """採用される能力名を返す（`"call"` またはメソッド名）。一致しなければ None。"""
    if _is_point_callable(sink):
        return "call"
    return _container_method(sink)


def make_emitter(sink: object) -> PointEmitter:
    """シンクを `(x, y) -> None` の関数へ変換する。

    Raises
    ------
    SinkCapabilityError
        受け付け可能な形にどれも一致しない場合。
    """
    capability = describe_sink(sink)
    if capability is None:
        raise SinkCapabilityError(sink)
    if settings.get().DEBUG_SINK:
        logger.debug("circle_vector sink resolved: %s -> %s", type(sink).__qualname__, capability)

    if capability == "call":
        return sink  # type: ignore[return-value]

    method = getattr(sink, capability)

    def emit(x: float, y: float) -> None:
        method((x, y))

    return emit


__all__ = [
    "CONTAINER_METHODS",
    "PointEmitter",
    "SinkCapabilityError",
    "describe_sink",
    "make_emitter",
]
