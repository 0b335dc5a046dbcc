# どこで: `src/frameweave/interactive/runtime/window_loop.py`。
# 何を: pyglet の描画ウィンドウを `pyglet.app.run()` で回す最小ランナーを提供する。
# なぜ: OS 依存のイベント配送を pyglet に任せ、描画頻度の制御を 1 か所にまとめるため。

from __future__ import annotations

from typing import Any, Callable

import pyglet


class WindowLoop:
    """1 つのウィンドウを fps 指定で回す。

    `draw_frame()` は back buffer へ描画するだけにし、`flip()` は pyglet が行う。
    """

    def __init__(
        self,
        window: Any,
        draw_frame: Callable[[], None],
        *,
        fps: float,
        on_frame_start: Callable[[float], None] | None = None,
    ) -> None:
        """ループを初期化する。

        Parameters
        ----------
        window : pyglet.window.Window
            描画先ウィンドウ。
        draw_frame : Callable[[], None]
            1 フレーム分の描画処理。
        fps : float
            目標フレームレート。`<=0` の場合はスロットリングしない。
        on_frame_start : Callable[[float], None] | None
            各フレーム冒頭に前フレームからの経過秒 dt で呼ぶコールバック。
        """

        self._window = window
        self._draw_frame = draw_frame
        self._fps = float(fps)
        self._on_frame_start = on_frame_start

    def run(self) -> None:
        """ウィンドウが閉じられるまでループを実行する。"""

        window = self._window

        def request_exit(*_: object) -> None:
            pyglet.app.exit()

        window.push_handlers(on_close=request_exit, on_draw=self._draw_frame)

        def step(dt: float) -> None:
            on_frame_start = self._on_frame_start
            if on_frame_start is not None:
                on_frame_start(dt)
            if window not in pyglet.app.windows:
                return
            window.draw(dt)

        if self._fps <= 0:
            pyglet.clock.schedule(step)
        else:
            pyglet.clock.schedule_interval(step, 1.0 / float(self._fps))

        try:
            pyglet.app.run(interval=None)
        finally:
            pyglet.clock.unschedule(step)
