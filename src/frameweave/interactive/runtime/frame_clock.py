# どこで: `src/frameweave/interactive/runtime/frame_clock.py`。
# 何を: `draw(t)` に渡すフレーム時刻 `t` の生成規則を提供する。
# なぜ: 描画頻度とアニメーション時刻を切り離すため。

from __future__ import annotations


class FixedStepClock:
    """固定タイムステップのフレーム時計。

    Notes
    -----
    実経過時間を蓄積し、`frame_duration` を超えた分だけ tick を進める。
    `t` は `frame_index * frame_duration`。端数は次回の `advance` へ持ち越す。
    """

    def __init__(self, frame_duration: float) -> None:
        step = float(frame_duration)
        if step <= 0:
            raise ValueError("frame_duration は正の値である必要がある")
        self._frame_duration = step
        self._accumulated = 0.0
        self._frame_index = 0

    @property
    def frame_duration(self) -> float:
        return self._frame_duration

    @property
    def frame_index(self) -> int:
        """これまでに進めた tick 数を返す。"""

        return int(self._frame_index)

    @property
    def remainder(self) -> float:
        """tick に満たない蓄積時間（秒）を返す。"""

        return float(self._accumulated)

    @property
    def t(self) -> float:
        """現在のフレーム時刻 `t`（秒）を返す。"""

        return float(self._frame_index) * self._frame_duration

    def advance(self, elapsed: float) -> int:
        """elapsed 秒を蓄積し、進めた tick 数を返す。"""

        self._accumulated += max(0.0, float(elapsed))
        ticks = 0
        while self._accumulated >= self._frame_duration:
            self._accumulated -= self._frame_duration
            ticks += 1
        self._frame_index += ticks
        return ticks
