"""共通フィクスチャ。

- 乱数シード固定
- 代表的な角度ペア（折り返しをまたぐもの/ちょうど 180° 差のもの）
- 設定（`common.settings`）の環境変数リセット
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings
from engine.math2d import Angle


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def angle_pairs() -> list[tuple[Angle, Angle]]:
    pairs = [
        (0.0, 90.0),
        (90.0, 0.0),
        (350.0, 10.0),
        (10.0, 350.0),
        (0.0, 180.0),
        (180.0, 0.0),
        (45.0, 225.0),
        (-30.0, 400.0),
        (720.0, 5.0),
    ]
    return [(Angle.from_degrees(a), Angle.from_degrees(b)) for a, b in pairs]


@pytest.fixture()
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("PB_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PB_DEBUG_SINK", raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
