"""
どこで: `common` の型定義。
何を: Vec2 などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from typing import Sequence, Union

import numpy as np

Vec2 = tuple[float, float]
# 2 要素の列（tuple/list/ndarray/Position など、反復で (x, y) を返すもの）
Vec2Like = Union[Sequence[float], np.ndarray]


__all__ = ["Vec2", "Vec2Like"]
