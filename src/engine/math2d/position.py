"""
どこで: `engine.math2d.position`
何を: 2D 座標の値型 `Position` と、他点への角度/距離。
なぜ: 2 点間の向きを `Angle.from_position`（数学系: +X が 0°）に一本化するため。
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np

from common.types import Vec2Like

from .angle import Angle, as_vec2


class Position:
    """2D 座標（不変）。内部は読み取り専用の `float32 (2,)` 配列。

    `(x, y)` として反復でき、`np.asarray(pos)` でも配列化できるため、
    ベクトルを受け付ける API（`Angle.from_position` 等）へそのまま渡せる。
    """

    __slots__ = ("_xy",)

    _xy: np.ndarray

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        xy = np.array([x, y], dtype=np.float32)
        xy.setflags(write=False)
        object.__setattr__(self, "_xy", xy)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Position は不変です")

    def __reduce__(self) -> tuple[type["Position"], tuple[float, float]]:
        return (Position, (self.x, self.y))

    @classmethod
    def from_vec2(cls, vec: Vec2Like) -> "Position":
        x, y = as_vec2(vec)
        return cls(float(x), float(y))

    @property
    def x(self) -> float:
        return float(self._xy[0])

    @property
    def y(self) -> float:
        return float(self._xy[1])

    def as_array(self, *, copy: bool = False) -> np.ndarray:
        """座標配列を返す。`copy=False` は読み取り専用ビュー。"""
        return self._xy.copy() if copy else self._xy

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        arr = self._xy if dtype is None else self._xy.astype(dtype)
        return arr.copy() if copy else arr

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return bool(np.array_equal(self._xy, other._xy))

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Position(x={self.x!r}, y={self.y!r})"

    def _target(self, other: "Position | Vec2Like | float", y: float | None) -> np.ndarray:
        if y is None:
            return as_vec2(other)
        return as_vec2((other, y))

    def angle_to(self, other: "Position | Vec2Like | float", y: float | None = None) -> Angle:
        """`other`（または `(x, y)`）への向き。`Angle.from_position(self, other)` と同じ。"""
        return Angle.from_position(self._xy, self._target(other, y))

    def distance_2(self, other: "Position | Vec2Like | float", y: float | None = None) -> float:
        """2 乗距離（平方根を取らない）。大小比較にはこちらを使う。"""
        with np.errstate(all="ignore"):
            delta = self._target(other, y) - self._xy
            return float(np.dot(delta, delta))

    def distance(self, other: "Position | Vec2Like | float", y: float | None = None) -> float:
        with np.errstate(all="ignore"):
            return float(np.sqrt(np.float32(self.distance_2(other, y))))


__all__ = ["Position"]
