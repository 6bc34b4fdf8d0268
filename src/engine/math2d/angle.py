"""
どこで: `engine.math2d.angle`
何を: 向き/回転量を表す値型 `Angle`（単精度の度数法、保持時は正規化しない）。
なぜ: 0°/360° をまたぐ距離・補間・追従の符号/方向の取り扱いを 1 か所に集約し、
      呼び出し側で毎回 `% 360` を書かせないため。

データモデル（不変条件）:
- 値は `degrees: float32` のみ。生成時も演算時も `[0, 360)` へは丸めない
  （例外は `from_position` のみで、こちらは生成時に `[0, 360)` へ寄せる）。
- 等価/順序は生の度数で比較する（10° と 370° は等しくない）。
- 正規化は `to_normalized()`/`to_signed_normalized()` を明示的に呼ぶ。

2 つの方向規約:
- 数学系: `from_position` は `atan2(dy, dx)`。+X（東）が 0°、反時計回りに増加。
- 方位系: `from_direction` は `atan2(dx, dy)`、`to_cartesian` は `(sin, cos)`。+Y（上）が 0°。
  `up/right/down/left` の別名は方位系の値。両者は意図的に別物として残す。

直感図（方位系）:

            up (0°)
              |
    left -----+----- right (90°)
   (270°)     |
           down (180°)
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterator

import numpy as np

from common.types import Vec2, Vec2Like

from .sink import make_emitter


def as_vec2(value: Any) -> np.ndarray:
    """2 要素ベクトル相当の入力を `float32 (2,)` 配列へ正規化する。

    Raises
    ------
    ValueError
        形状が `(2,)` に整形できない場合。
    """
    arr = np.asarray(value, dtype=np.float32)
    if arr.shape != (2,):
        raise ValueError(f"2 要素のベクトルが必要です: shape={arr.shape}")
    return arr


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real)


def _f32(value: Any) -> np.float32:
    with np.errstate(all="ignore"):
        return np.float32(value)


class Angle:
    """単精度の度数で表す角度（不変値）。

    生成は名前付きファクトリ（`from_degrees`/`from_radians`/`from_position`/
    `from_direction`）を用いる。演算 `+ - * /` は生の度数に対して行い、正規化しない。
    """

    __slots__ = ("_degrees",)

    value_type = np.float32

    RADIANS_TO_DEGREES = 180.0 / math.pi
    DEGREES_TO_RADIANS = math.pi / 180.0

    _degrees: np.float32

    def __init__(self, degrees: float = 0.0) -> None:
        object.__setattr__(self, "_degrees", _f32(degrees))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Angle は不変です")

    def __reduce__(self) -> tuple[type["Angle"], tuple[float]]:
        return (Angle, (float(self._degrees),))

    # ── ファクトリ ───────────────────
    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(degrees)

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(float(radians) * cls.RADIANS_TO_DEGREES)

    @classmethod
    def from_position(cls, *args: Any) -> "Angle":
        """2 点間（`to - from`）の向きを数学系（+X が 0°）で返す。

        受け付ける呼び出し形:
        - `from_position(from_vec, to_vec)`
        - `from_position(x1, y1, x2, y2)`
        - `from_position(to_vec)`（原点から）
        - `from_position(x, y)`（原点から）

        結果は生成時に `[0, 360)` へ寄せる（負なら +360）。他のファクトリは正規化しない。
        """
        if len(args) == 4:
            start = as_vec2(args[0:2])
            end = as_vec2(args[2:4])
        elif len(args) == 2 and _is_scalar(args[0]) and _is_scalar(args[1]):
            start = np.zeros(2, dtype=np.float32)
            end = as_vec2(args)
        elif len(args) == 2:
            start = as_vec2(args[0])
            end = as_vec2(args[1])
        elif len(args) == 1:
            start = np.zeros(2, dtype=np.float32)
            end = as_vec2(args[0])
        else:
            raise TypeError(f"from_position() は 1, 2, 4 個の引数を受け付けます（{len(args)} 個）")

        with np.errstate(all="ignore"):
            delta = end - start
        degrees = math.atan2(float(delta[1]), float(delta[0])) * cls.RADIANS_TO_DEGREES
        if degrees < 0:
            degrees += 360.0
        value = _f32(degrees)
        # -0 に近い負の角度は +360 の float32 丸めで 360 になるため 0 に畳む
        if value >= 360.0:
            value = np.float32(0.0)
        return cls(value)

    @classmethod
    def from_direction(cls, *args: Any) -> "Angle":
        """方向ベクトルの向きを方位系（+Y が 0°、`atan2(x, y)`）で返す。正規化はしない。

        `from_direction(vec)` / `from_direction(x, y)`。
        """
        if len(args) == 2:
            x, y = as_vec2(args)
        elif len(args) == 1:
            x, y = as_vec2(args[0])
        else:
            raise TypeError(f"from_direction() は 1 または 2 個の引数を受け付けます（{len(args)} 個）")
        return cls.from_radians(math.atan2(float(x), float(y)))

    # ── 定数 ───────────────────
    @classmethod
    def zero(cls) -> "Angle":
        return cls.from_degrees(0.0)

    @classmethod
    def quarter(cls) -> "Angle":
        return cls.from_degrees(90.0)

    @classmethod
    def half(cls) -> "Angle":
        return cls.from_degrees(180.0)

    @classmethod
    def full(cls) -> "Angle":
        return cls.from_degrees(360.0)

    @classmethod
    def up(cls) -> "Angle":
        return cls.zero()

    @classmethod
    def right(cls) -> "Angle":
        return cls.quarter()

    @classmethod
    def down(cls) -> "Angle":
        return cls.half()

    @classmethod
    def left(cls) -> "Angle":
        return cls.from_degrees(270.0)

    # ── 比較（生の度数。NaN はどの比較も False） ────────
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return bool(self._degrees == other._degrees)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return bool(self._degrees != other._degrees)

    def __lt__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return bool(self._degrees < other._degrees)

    def __le__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return bool(self._degrees <= other._degrees)

    def __gt__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return bool(self._degrees > other._degrees)

    def __ge__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return bool(self._degrees >= other._degrees)

    def __hash__(self) -> int:
        return hash(float(self._degrees))

    # ── 演算（正規化しない。inf/NaN はそのまま伝播） ────────
    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Angle(self._degrees + other._degrees)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Angle(self._degrees - other._degrees)

    def __mul__(self, scalar: float) -> "Angle":
        if isinstance(scalar, Angle) or not _is_scalar(scalar):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Angle(self._degrees * _f32(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Angle":
        if isinstance(scalar, Angle) or not _is_scalar(scalar):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Angle(self._degrees / _f32(scalar))

    def __repr__(self) -> str:
        return f"Angle(degrees={float(self._degrees)!r})"

    # ── 変換 ───────────────────
    @property
    def degrees(self) -> float:
        return float(self._degrees)

    def to_degrees(self) -> float:
        return float(self._degrees)

    def to_radians(self) -> float:
        return float(self._degrees) * self.DEGREES_TO_RADIANS

    def _normalized_degrees(self) -> np.float32:
        # 床関数ベースの剰余（負にならない）。float32 丸めで 360 になった場合は 0 に畳む。
        value = _f32(float(self._degrees) % 360.0)
        if value >= 360.0:
            value = np.float32(0.0)
        return value

    def to_normalized(self) -> "Angle":
        """`[0, 360)` へ正規化した角度を返す。"""
        return Angle(self._normalized_degrees())

    def to_signed_normalized(self) -> "Angle":
        """`(-180, 180]` へ正規化した角度を返す。"""
        normalized = self._normalized_degrees()
        if normalized > 180.0:
            normalized = _f32(normalized - np.float32(360.0))
        return Angle(normalized)

    # ── 分類（正規化後の値で判定） ────────
    def is_acute(self) -> bool:
        return bool(self._normalized_degrees() < 90.0)

    def is_obtuse(self) -> bool:
        # 90° ちょうど/180° ちょうどはどちらでもない
        degrees = self._normalized_degrees()
        return bool(90.0 < degrees < 180.0)

    def is_reflex(self) -> bool:
        return bool(self._normalized_degrees() > 180.0)

    # ── 距離 ───────────────────
    def clockwise_distance(self, to: "Angle") -> float:
        """生の度数差の絶対値 `|to - self|`。

        注意: 名前に反して 0°/360° の折り返しは考慮しない（350° → 10° は 340）。
        折り返しを考慮した距離は `shortest_distance` を使う。
        """
        return abs(float(to._degrees) - float(self._degrees))

    def counter_clockwise_distance(self, to: "Angle") -> float:
        """`360 - clockwise_distance(to)`（同じく折り返しは考慮しない）。"""
        return 360.0 - self.clockwise_distance(to)

    def shortest_distance(self, to: "Angle") -> float:
        """折り返しを考慮した最短の角距離。常に `[0, 180]` で、引数の入れ替えに対して対称。"""
        diff = abs(float(self._degrees) - float(to._degrees)) % 360.0
        return min(diff, 360.0 - diff)

    def within(self, other: "Angle", margin: float) -> bool:
        """`shortest_distance <= margin`（境界を含む）。"""
        return self.shortest_distance(other) <= margin

    def near(self, other: "Angle", range_: float) -> bool:
        """`shortest_distance < range_`（境界を含まない）。"""
        return self.shortest_distance(other) < range_

    def _signed_delta(self, target: "Angle") -> float:
        # ((target - self + 180) mod 360) - 180（床関数の剰余）を、丸めの入らない fmod で求める。
        # 値域は [-180, 180)。ちょうど 180° 差は -180。
        delta = float(target._degrees) - float(self._degrees)
        if not math.isfinite(delta):
            return math.nan
        turn = math.fmod(delta, 360.0)
        if turn >= 180.0:
            turn -= 360.0
        elif turn < -180.0:
            turn += 360.0
        return turn

    def _direction(self, target: "Angle") -> float:
        return 1.0 if self._signed_delta(target) >= 0 else -1.0

    # ── 移動 ───────────────────
    def move_toward(self, target: "Angle", speed: float) -> "Angle":
        """最短経路で `target` へ `speed` 度だけ近づく。

        残り距離が `speed` 以下なら `target` をそのまま返す（行き過ぎない）。
        方向は符号付き差分 `((target - self + 180) mod 360) - 180` の符号で決める
        （0 以上なら増加、負なら減少。ちょうど 180° 差は減少側）。
        """
        if self.shortest_distance(target) <= speed:
            return target
        step = speed if self._signed_delta(target) >= 0 else -speed
        return Angle(float(self._degrees) + step)

    def clamp(self, dest: "Angle", range_: float) -> "Angle":
        """`dest` から `range_` 以内に収まるよう、必要な分だけ近づける（`dest` へは吸着しない）。"""
        distance = self.shortest_distance(dest)
        if distance <= range_:
            return self
        return self.move_toward(dest, distance - range_)

    # ── 補間 ───────────────────
    def lerp(self, dest: "Angle", t: float) -> "Angle":
        """度数領域で最短弧に沿って補間する。`t` は [0, 1] に制限しない（外挿可）。"""
        shortest = self.shortest_distance(dest)
        return Angle(float(self._degrees) + self._direction(dest) * shortest * t)

    def slerp(self, dest: "Angle", t: float) -> "Angle":
        """ラジアン領域で最短弧に沿って補間する。

        生の差が半回転（π）を超える場合は ±1 回転（2π）で折り返してから `t` 倍し、
        始点のラジアン値へ加える。折り返しの判定は丸めの入らない度数差（fmod）で行い、
        ちょうど 180° 差は `lerp` と同じ向き（減少側）を取る。これにより両者は常に一致する。
        """
        start = self.to_radians()
        delta = float(dest._degrees) - float(self._degrees)
        if not math.isfinite(delta):
            return Angle.from_radians(start + (dest.to_radians() - start) * t)
        turn = math.fmod(delta, 360.0)
        if abs(turn) == 180.0:
            turn = self._direction(dest) * 180.0
        elif abs(turn) > 180.0:
            turn -= math.copysign(360.0, turn)
        return Angle.from_radians(start + turn * self.DEGREES_TO_RADIANS * t)

    # ── 座標 ───────────────────
    def sin(self) -> float:
        return math.sin(self.to_radians())

    def cos(self) -> float:
        return math.cos(self.to_radians())

    def to_cartesian(self, length: float = 1.0) -> Vec2:
        """方位系の単位ベクトル × `length` を `(length*sin, length*cos)` で返す（0° は +Y）。"""
        return (length * self.sin(), length * self.cos())

    def to_cartesian_x(self, length: float = 1.0) -> float:
        return length * self.sin()

    def to_cartesian_y(self, length: float = 1.0) -> float:
        return length * self.cos()

    def rotate_point(self, point: Vec2Like) -> Vec2:
        """原点まわりに `point` を回転する（標準の 2D 回転行列）。"""
        x, y = (float(v) for v in as_vec2(point))
        radians = self.to_radians()
        cos = math.cos(radians)
        sin = math.sin(radians)
        return (x * cos - y * sin, x * sin + y * cos)

    # ── 頂点列 ───────────────────
    @classmethod
    def _circle_angles(cls, points: int, offset: "Angle | float") -> Iterator["Angle"]:
        if not isinstance(offset, Angle):
            offset = cls.from_degrees(offset)
        count = int(points)
        for index in range(count):
            yield offset + cls.from_degrees(index * (360.0 / count))

    @classmethod
    def circle_vector(
        cls,
        points: int,
        length: float,
        offset: "Angle | float | None" = None,
        sink: Any = None,
    ) -> None:
        """正 `points` 角形の頂点 `(x, y)` を `sink` へ順に書き出す。

        呼び出し形:
        - `circle_vector(points, length, sink)`（offset = 0°）
        - `circle_vector(points, length, offset, sink)`
        - キーワード指定 `circle_vector(points, length, offset=..., sink=...)` も可

        i 番目の頂点は `(offset + i * 360/points).to_cartesian(length)`。
        `sink` の判定はループ前に 1 度だけ行う（優先順は `engine.math2d.sink` を参照）。

        Raises
        ------
        SinkCapabilityError
            `sink` が受け付け可能な形のいずれにも一致しない場合（何も書き出さない）。
        """
        if sink is None:
            if offset is None:
                raise TypeError("circle_vector() には出力先 sink が必要です")
            offset, sink = cls.zero(), offset
        elif offset is None:
            offset = cls.zero()
        emit = make_emitter(sink)
        for angle in cls._circle_angles(points, offset):
            emit(angle.to_cartesian_x(length), angle.to_cartesian_y(length))

    @classmethod
    def circle_array(cls, points: int, length: float, offset: "Angle | float" = 0.0) -> np.ndarray:
        """`circle_vector` と同じ頂点列を `float32 (points, 2)` 配列で返す。"""
        coords = np.empty((max(int(points), 0), 2), dtype=np.float32)
        for i, angle in enumerate(cls._circle_angles(points, offset)):
            coords[i] = angle.to_cartesian(length)
        return coords


__all__ = ["Angle", "as_vec2"]
