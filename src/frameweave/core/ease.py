# どこで: `src/frameweave/core/ease.py`。
# 何を: 正規化進捗 [0, 1] を補間比率へ写すイージング関数群を提供する。
# なぜ: `gradual` アニメーションの補間カーブを差し替え可能にするため。

from __future__ import annotations

import math
from typing import Callable

EaseFunc = Callable[[float], float]

_HALF_PI = math.pi / 2.0
_BACK_C1 = 1.70158
_BACK_C3 = _BACK_C1 + 1.0
_ELASTIC_C4 = (2.0 * math.pi) / 3.0
_BOUNCE_N1 = 7.5625
_BOUNCE_D1 = 2.75


def in_out(ease_in: EaseFunc, ease_out: EaseFunc | None = None) -> EaseFunc:
    """前半を ease_in、後半を ease_out で補間する関数を組み立てる。

    Parameters
    ----------
    ease_in : EaseFunc
        前半 [0, 0.5) に使う関数。
    ease_out : EaseFunc or None, optional
        後半 [0.5, 1] に使う関数。None の場合は `reflect(ease_in)` を使う。

    Returns
    -------
    EaseFunc
        合成済みイージング関数。
    """
    out = ease_out if ease_out is not None else reflect(ease_in)

    def func(t: float) -> float:
        if t < 0.5:
            return 0.5 * ease_in(2.0 * t)
        return 0.5 * out(2.0 * t - 1.0) + 0.5

    return func


def out_in(ease_out: EaseFunc, ease_in: EaseFunc | None = None) -> EaseFunc:
    """前半を ease_out、後半を ease_in で補間する関数を組み立てる。"""
    in_ = ease_in if ease_in is not None else reflect(ease_out)

    def func(t: float) -> float:
        if t < 0.5:
            return 0.5 * ease_out(2.0 * t)
        return 0.5 * in_(2.0 * t - 1.0) + 0.5

    return func


def reflect(ease: EaseFunc) -> EaseFunc:
    """`1 - f(1 - t)` を返す関数を作る（in 系から out 系への変換）。"""

    def func(t: float) -> float:
        return 1.0 - ease(1.0 - t)

    return func


def linear(t: float) -> float:
    return t


none = linear


def quad_in(t: float) -> float:
    return t**2


def quad_out(t: float) -> float:
    return -t * (t - 2.0)


def cubic_in(t: float) -> float:
    return t**3


def cubic_out(t: float) -> float:
    return (t - 1.0) ** 3 + 1.0


def quart_in(t: float) -> float:
    return t**4


def quart_out(t: float) -> float:
    return -((t - 1.0) ** 4 - 1.0)


def quint_in(t: float) -> float:
    return t**5


def quint_out(t: float) -> float:
    return (t - 1.0) ** 5 + 1.0


def sine_in(t: float) -> float:
    return -math.cos(t * _HALF_PI) + 1.0


def sine_out(t: float) -> float:
    return math.sin(t * _HALF_PI)


def expo_in(t: float) -> float:
    # t=0 で厳密に 0 を返す（2^-10 の残差を避ける）。
    return 0.0 if t == 0.0 else 2.0 ** (10.0 * (t - 1.0))


def expo_out(t: float) -> float:
    return 1.0 if t == 1.0 else -(2.0 ** (-10.0 * t)) + 1.0


def circ_in(t: float) -> float:
    return -(math.sqrt(1.0 - t**2) - 1.0)


def circ_out(t: float) -> float:
    return math.sqrt(1.0 - (t - 1.0) ** 2)


def back_in(t: float) -> float:
    """終端前に一度逆方向へ振れる（オーバーシュート）。"""
    return _BACK_C3 * t**3 - _BACK_C1 * t**2


def back_out(t: float) -> float:
    return 1.0 + _BACK_C3 * (t - 1.0) ** 3 + _BACK_C1 * (t - 1.0) ** 2


def elastic_in(t: float) -> float:
    if t == 0.0 or t == 1.0:
        return t
    return -(2.0 ** (10.0 * t - 10.0)) * math.sin((t * 10.0 - 10.75) * _ELASTIC_C4)


def elastic_out(t: float) -> float:
    if t == 0.0 or t == 1.0:
        return t
    return 2.0 ** (-10.0 * t) * math.sin((t * 10.0 - 0.75) * _ELASTIC_C4) + 1.0


def bounce_out(t: float) -> float:
    if t < 1.0 / _BOUNCE_D1:
        return _BOUNCE_N1 * t * t
    if t < 2.0 / _BOUNCE_D1:
        t -= 1.5 / _BOUNCE_D1
        return _BOUNCE_N1 * t * t + 0.75
    if t < 2.5 / _BOUNCE_D1:
        t -= 2.25 / _BOUNCE_D1
        return _BOUNCE_N1 * t * t + 0.9375
    t -= 2.625 / _BOUNCE_D1
    return _BOUNCE_N1 * t * t + 0.984375


def bounce_in(t: float) -> float:
    return 1.0 - bounce_out(1.0 - t)


quad_in_out = in_out(quad_in, quad_out)
quad_out_in = out_in(quad_out, quad_in)
cubic_in_out = in_out(cubic_in, cubic_out)
cubic_out_in = out_in(cubic_out, cubic_in)
quart_in_out = in_out(quart_in, quart_out)
quart_out_in = out_in(quart_out, quart_in)
quint_in_out = in_out(quint_in, quint_out)
quint_out_in = out_in(quint_out, quint_in)
sine_in_out = in_out(sine_in, sine_out)
sine_out_in = out_in(sine_out, sine_in)
expo_in_out = in_out(expo_in, expo_out)
expo_out_in = out_in(expo_out, expo_in)
circ_in_out = in_out(circ_in, circ_out)
circ_out_in = out_in(circ_out, circ_in)
back_in_out = in_out(back_in, back_out)
back_out_in = out_in(back_out, back_in)
elastic_in_out = in_out(elastic_in, elastic_out)
elastic_out_in = out_in(elastic_out, elastic_in)
bounce_in_out = in_out(bounce_in, bounce_out)
bounce_out_in = out_in(bounce_out, bounce_in)

_FAMILIES = ("quad", "cubic", "quart", "quint", "sine", "expo", "circ", "back", "elastic", "bounce")
_DIRECTIONS = ("in", "out", "in_out", "out_in")

_EASES: dict[str, EaseFunc] = {"linear": linear, "none": none}
for _family in _FAMILIES:
    for _direction in _DIRECTIONS:
        _name = f"{_family}_{_direction}"
        _EASES[_name] = globals()[_name]
del _family, _direction, _name


def get(name: str) -> EaseFunc:
    """名前からイージング関数を引く。

    Raises
    ------
    KeyError
        未登録の名前が指定された場合。
    """
    try:
        return _EASES[name]
    except KeyError:
        raise KeyError(f"未登録の ease: {name!r}") from None


def names() -> tuple[str, ...]:
    """登録済みイージング名を返す。"""
    return tuple(_EASES.keys())


__all__ = ["EaseFunc", "get", "in_out", "linear", "names", "none", "out_in", "reflect", *_EASES.keys()]
