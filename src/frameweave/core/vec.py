# どこで: `src/frameweave/core/vec.py`。
# 何を: 2D ベクトル（tuple[float, float]）の正規化と四則演算ヘルパを提供する。
# なぜ: canvas / widget の引数を tuple のまま扱い、numpy 配列を API 境界に漏らさないため。

from __future__ import annotations

from numbers import Real
from typing import Any, Sequence

Vec2 = tuple[float, float]


def as_vec2(value: Any) -> Vec2:
    """スカラーまたは長さ 2 のシーケンスを Vec2 に正規化する。

    スカラーは `(v, v)` に展開する（等方 scale 用）。

    Raises
    ------
    ValueError
        長さ 2 でないシーケンスが渡された場合。
    """
    if isinstance(value, Real):
        v = float(value)
        return (v, v)
    try:
        x, y = value
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Vec2 は長さ 2 のシーケンスである必要がある: got={value!r}") from exc
    return (float(x), float(y))


def add(a: Sequence[float], b: Sequence[float]) -> Vec2:
    return (float(a[0]) + float(b[0]), float(a[1]) + float(b[1]))


def mul(v: Sequence[float], k: float) -> Vec2:
    return (float(v[0]) * float(k), float(v[1]) * float(k))


def neg(v: Sequence[float]) -> Vec2:
    return (-float(v[0]), -float(v[1]))


__all__ = ["Vec2", "add", "as_vec2", "mul", "neg"]
