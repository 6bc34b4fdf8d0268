"""
どこで: tests（math2d/angle の正規化・分類・比較・演算）。
何を: 正規化は明示呼び出し時のみ行われ、比較/演算は生の度数で行われることを確認。
"""

from __future__ import annotations

import math

import pytest

from engine.math2d import Angle


@pytest.mark.parametrize(
    "raw, expected",
    [(370.0, 10.0), (-10.0, 350.0), (360.0, 0.0), (-360.0, 0.0), (725.0, 5.0), (0.0, 0.0)],
)
def test_to_normalized(raw: float, expected: float) -> None:
    assert Angle.from_degrees(raw).to_normalized().to_degrees() == pytest.approx(expected)


def test_to_normalized_never_returns_full_turn() -> None:
    # float32 へ丸めると 360 になる微小な負値も [0, 360) に収まる
    out = Angle.from_degrees(-1e-6).to_normalized().to_degrees()
    assert 0.0 <= out < 360.0
    assert out == 0.0


@pytest.mark.parametrize(
    "raw, expected",
    [(190.0, -170.0), (180.0, 180.0), (-180.0, 180.0), (540.0, 180.0), (-190.0, 170.0), (10.0, 10.0)],
)
def test_to_signed_normalized(raw: float, expected: float) -> None:
    assert Angle.from_degrees(raw).to_signed_normalized().to_degrees() == pytest.approx(expected)


def test_arithmetic_does_not_normalize() -> None:
    a = Angle.from_degrees(350.0)
    b = Angle.from_degrees(20.0)
    assert (a + b).to_degrees() == 370.0
    assert (b - a).to_degrees() == -330.0
    assert (b * 2).to_degrees() == 40.0
    assert (3 * b).to_degrees() == 60.0
    assert (a / 2).to_degrees() == 175.0


def test_division_by_zero_propagates_infinity() -> None:
    assert (Angle.from_degrees(10.0) / 0).to_degrees() == math.inf
    assert math.isnan((Angle.zero() / 0.0).to_degrees())


def test_arithmetic_rejects_mixed_operands() -> None:
    with pytest.raises(TypeError):
        Angle.from_degrees(10.0) + 5  # type: ignore[operator]
    with pytest.raises(TypeError):
        Angle.from_degrees(10.0) * Angle.from_degrees(2.0)  # type: ignore[operator]


def test_equality_uses_raw_degrees() -> None:
    assert Angle.from_degrees(10.0) != Angle.from_degrees(370.0)
    assert Angle.from_degrees(10.0).to_normalized() == Angle.from_degrees(370.0).to_normalized()
    assert Angle.from_degrees(10.0) == Angle.from_degrees(10.0)
    assert hash(Angle.from_degrees(10.0)) == hash(Angle.from_degrees(10.0))


def test_ordering_uses_raw_degrees() -> None:
    values = [Angle.from_degrees(d) for d in (370.0, -5.0, 10.0)]
    assert [a.to_degrees() for a in sorted(values)] == [-5.0, 10.0, 370.0]
    assert Angle.from_degrees(10.0) < Angle.from_degrees(370.0)
    assert Angle.from_degrees(10.0) <= Angle.from_degrees(10.0)
    assert Angle.from_degrees(370.0) > Angle.from_degrees(10.0)
    assert Angle.from_degrees(370.0) >= Angle.from_degrees(370.0)


def test_nan_is_unordered() -> None:
    nan = Angle.from_degrees(math.nan)
    assert nan != nan
    assert not nan == nan
    assert not (nan < Angle.zero())
    assert not (nan >= Angle.zero())


def test_acute() -> None:
    assert Angle.from_degrees(45.0).is_acute()
    assert not Angle.from_degrees(90.0).is_acute()
    assert Angle.from_degrees(370.0).is_acute()
    assert not Angle.from_degrees(450.0).is_acute()


def test_obtuse_excludes_both_ends() -> None:
    assert Angle.from_degrees(135.0).is_obtuse()
    assert not Angle.from_degrees(90.0).is_obtuse()
    assert not Angle.from_degrees(180.0).is_obtuse()
    assert Angle.from_degrees(-225.0).is_obtuse()


def test_reflex() -> None:
    assert Angle.from_degrees(181.0).is_reflex()
    assert not Angle.from_degrees(180.0).is_reflex()
    assert Angle.from_degrees(-10.0).is_reflex()
