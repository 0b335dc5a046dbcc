# どこで: `src/frameweave/core/animation.py`。
# 何を: 時刻 -> 値の不変アニメーションノードと、その組み合わせ子（combinator）を定義する。
# なぜ: フレームごとの値を「状態を持たない純関数の合成」として記述できるようにするため。

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, TypeVar

from frameweave.core.ease import EaseFunc, linear

T = TypeVar("T")
U = TypeVar("U")

TimePoint = float
Duration = float


def wrap(time: TimePoint, duration: Duration, inflection_point: TimePoint = 0.0) -> TimePoint:
    """時刻を `[inflection_point, duration]` に折り返す。

    Parameters
    ----------
    time : float
        折り返し前の時刻。
    duration : float
        1 周期の長さ。`duration > inflection_point` が前提。
    inflection_point : float, optional
        2 周目以降の開始時刻。

    Returns
    -------
    float
        `time <= duration` ならそのまま、超えていれば
        ``inflection_point + fmod(time - inflection_point, duration - inflection_point)``。
    """
    if time > duration:
        return inflection_point + math.fmod(time - inflection_point, duration - inflection_point)
    return time


def lerp(ratio: float, a: Any, b: Any) -> Any:
    """`(1 - ratio) * a + ratio * b` を計算する。

    tuple/list は要素ごとに補間して tuple を返す。
    それ以外はスカラー倍と加算が定義された型（float, numpy 配列など）を想定する。
    """
    if isinstance(a, (tuple, list)):
        return tuple(lerp(ratio, x, y) for x, y in zip(a, b, strict=True))
    return ((1.0 - ratio) * a) + (ratio * b)


class Animation(Generic[T]):
    """時刻から値を返す不変アニメーションの基底。

    Notes
    -----
    各サブクラスは `duration` と `value` / `start_value` / `end_value` を提供する。
    評価は副作用を持たず、同じ時刻に対しては常に同じ値を返す。
    除算を伴う評価（`duration_ratio`、`rescale`、`repeat` の折り返しなど）は
    `duration > 0` を前提とし、0 の場合は検証せず ZeroDivisionError がそのまま伝播する。
    """

    __slots__ = ()

    duration: Duration

    def value(self, t: TimePoint) -> T:
        raise NotImplementedError

    def start_value(self) -> T:
        raise NotImplementedError

    def end_value(self) -> T:
        raise NotImplementedError

    def __call__(self, t: TimePoint) -> T:
        return self.value(t)

    def wrapped_value(self, t: TimePoint, inflection_point: TimePoint = 0.0) -> T:
        """`wrap` で折り返した時刻で評価する。"""
        return self.value(wrap(t, self.duration, inflection_point))

    def duration_ratio(self, t: TimePoint) -> float:
        """`t / duration` を返す（`duration > 0` が前提）。"""
        return t / self.duration

    # --- メソッドチェーン用ショートカット -------------------------------------

    def reverse(self) -> "Animation[T]":
        return Reverse(self)

    def repeat(self, count: float, inflection_point: TimePoint = 0.0) -> "Animation[T]":
        return Repeat(self, float(count), float(inflection_point))

    def ping_pong(self, count: float, inflection_point: TimePoint = 0.0) -> "Animation[T]":
        return PingPong(self, float(count), float(inflection_point))

    def slice(self, start: TimePoint, end: TimePoint) -> "Animation[T]":
        return Slice(self, float(start), float(end))

    def rescale(self, duration: Duration) -> "Animation[T]":
        return Rescale(self, float(duration))

    def then(self, *others: "Animation[T]") -> "Animation[T]":
        """自身の後ろに others を連結した `Sequence` を返す。"""
        return Sequence((self, *others))

    def map(self, func: Callable[[T], U]) -> "Animation[U]":
        """値に func を適用したアニメーションを返す。"""
        return Mapped(self, func)


@dataclass(frozen=True, slots=True)
class Constant(Animation[T]):
    """時刻に依らず一定値を返すアニメーション。"""

    constant_value: T
    duration: Duration

    def value(self, t: TimePoint) -> T:
        return self.constant_value

    def start_value(self) -> T:
        return self.constant_value

    def end_value(self) -> T:
        return self.constant_value


@dataclass(frozen=True, slots=True)
class Gradual(Animation[T]):
    """start から end へイージング付きで線形補間するアニメーション。

    Parameters
    ----------
    start, end : T
        補間の両端値。
    duration : float
        補間にかける時間。
    ease : EaseFunc
        正規化比率 `t / duration` に適用するイージング関数。
    """

    start: T
    end: T
    duration: Duration
    ease: EaseFunc = linear

    def value(self, t: TimePoint) -> T:
        # ease は生の時刻ではなく正規化比率に適用する。
        return lerp(self.ease(self.duration_ratio(t)), self.start, self.end)

    def start_value(self) -> T:
        return self.start

    def end_value(self) -> T:
        return self.end


@dataclass(frozen=True, slots=True)
class Sequence(Animation[T]):
    """子アニメーションを順に連結したアニメーション。

    Notes
    -----
    境界ちょうどの時刻（`t == 子の duration`）は手前の子に委譲する。
    子が空の場合の `start_value` / `end_value` は未定義（IndexError）。
    """

    items: tuple[Animation[T], ...]
    duration: Duration = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "duration", float(sum(item.duration for item in self.items)))

    def value(self, t: TimePoint) -> T:
        if t < 0.0:
            return self.start_value()
        if t >= self.duration:
            return self.end_value()

        for item in self.items:
            if t > item.duration:
                t -= item.duration
            else:
                return item.value(t)

        return self.end_value()

    def start_value(self) -> T:
        return self.items[0].start_value()

    def end_value(self) -> T:
        return self.items[-1].end_value()


@dataclass(frozen=True, slots=True)
class Repeat(Animation[T]):
    """inner を count 回繰り返すアニメーション（count は非整数も可）。"""

    inner: Animation[T]
    count: float
    inflection_point: TimePoint = 0.0

    @property
    def duration(self) -> Duration:  # type: ignore[override]
        return self.inner.duration * self.count

    def value(self, t: TimePoint) -> T:
        return self.inner.wrapped_value(t, self.inflection_point)

    def start_value(self) -> T:
        return self.inner.start_value()

    def end_value(self) -> T:
        # 繰り返し後の duration で折り返して評価する（非整数 count の端点に揃う）。
        return self.value(self.duration)


@dataclass(frozen=True, slots=True)
class Reverse(Animation[T]):
    """inner を逆再生するアニメーション。"""

    inner: Animation[T]

    @property
    def duration(self) -> Duration:  # type: ignore[override]
        return self.inner.duration

    def value(self, t: TimePoint) -> T:
        return self.inner.value(self.inner.duration - t)

    def start_value(self) -> T:
        return self.inner.end_value()

    def end_value(self) -> T:
        return self.inner.start_value()


@dataclass(frozen=True, slots=True)
class PingPong(Animation[T]):
    """inner を往復（順再生 → 逆再生 → ...）させるアニメーション。

    Notes
    -----
    周期番号 `int(t / inner.duration)` が偶数なら順再生、奇数なら逆再生。
    inflection_point は保持するが評価には使わない。
    """

    inner: Animation[T]
    count: float
    inflection_point: TimePoint = 0.0

    @property
    def duration(self) -> Duration:  # type: ignore[override]
        return self.inner.duration * self.count

    def value(self, t: TimePoint) -> T:
        inner_duration = self.inner.duration
        local = math.fmod(t, inner_duration)
        if int(t / inner_duration) % 2 == 0:
            return self.inner.value(local)
        return self.inner.value(inner_duration - local)

    def start_value(self) -> T:
        return self.inner.start_value()

    def end_value(self) -> T:
        return self.value(self.duration)


@dataclass(frozen=True, slots=True)
class Slice(Animation[T]):
    """inner の `[start, end]` 区間を切り出したアニメーション。"""

    inner: Animation[T]
    start: TimePoint
    end: TimePoint

    @property
    def duration(self) -> Duration:  # type: ignore[override]
        return self.end - self.start

    def value(self, t: TimePoint) -> T:
        return self.inner.value(self._clamp(t))

    def start_value(self) -> T:
        return self.value(0.0)

    def end_value(self) -> T:
        return self.value(self.duration)

    def _clamp(self, t: TimePoint) -> TimePoint:
        # inner の終端も切り出し区間の終端も越えて読まない。
        return min(self.start + t, self.inner.duration, self.end)


@dataclass(frozen=True, slots=True)
class Rescale(Animation[T]):
    """inner の形を保ったまま duration を伸縮したアニメーション。"""

    inner: Animation[T]
    duration: Duration

    def value(self, t: TimePoint) -> T:
        return self.inner.value(t * self.inner.duration / self.duration)

    def start_value(self) -> T:
        return self.value(0.0)

    def end_value(self) -> T:
        return self.value(self.duration)


@dataclass(frozen=True, slots=True)
class Mapped(Animation[U]):
    """inner の値に関数を適用したアニメーション。"""

    inner: Animation[Any]
    func: Callable[[Any], U]

    @property
    def duration(self) -> Duration:  # type: ignore[override]
        return self.inner.duration

    def value(self, t: TimePoint) -> U:
        return self.func(self.inner.value(t))

    def start_value(self) -> U:
        return self.func(self.inner.start_value())

    def end_value(self) -> U:
        return self.func(self.inner.end_value())


def constant(value: T, duration: Duration) -> Animation[T]:
    """一定値アニメーションを生成する。"""
    return Constant(value, float(duration))


def gradual(start: T, end: T, duration: Duration, ease: EaseFunc = linear) -> Animation[T]:
    """start -> end のイージング付き補間アニメーションを生成する。"""
    return Gradual(start, end, float(duration), ease)


def sequence(*items: Animation[T] | Iterable[Animation[T]]) -> Animation[T]:
    """アニメーションを連結する。`sequence(a, b)` と `sequence([a, b])` の両方を受け付ける。"""
    if len(items) == 1 and not isinstance(items[0], Animation):
        return Sequence(tuple(items[0]))
    return Sequence(tuple(items))  # type: ignore[arg-type]


def repeat(inner: Animation[T], count: float, inflection_point: TimePoint = 0.0) -> Animation[T]:
    return inner.repeat(count, inflection_point)


def reverse(inner: Animation[T]) -> Animation[T]:
    return inner.reverse()


def ping_pong(inner: Animation[T], count: float, inflection_point: TimePoint = 0.0) -> Animation[T]:
    return inner.ping_pong(count, inflection_point)


def slice(inner: Animation[T], start: TimePoint, end: TimePoint) -> Animation[T]:  # noqa: A001
    return inner.slice(start, end)


def rescale(inner: Animation[T], duration: Duration) -> Animation[T]:
    return inner.rescale(duration)


__all__ = [
    "Animation",
    "Constant",
    "Gradual",
    "Mapped",
    "PingPong",
    "Repeat",
    "Rescale",
    "Reverse",
    "Sequence",
    "Slice",
    "constant",
    "gradual",
    "lerp",
    "ping_pong",
    "repeat",
    "rescale",
    "reverse",
    "sequence",
    "slice",
    "wrap",
]
