"""
どこで: `engine.math2d` サブパッケージ。
何を: 角度 `Angle`・2D 座標 `Position` と、頂点列の出力先判定。
なぜ: ゲームロジック/描画の双方が使う最小の 2D 数学を、描画基盤から独立して提供するため。
"""

from .angle import Angle
from .position import Position
from .sink import SinkCapabilityError

__all__ = [
    "Angle",
    "Position",
    "SinkCapabilityError",
]
