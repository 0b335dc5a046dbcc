# どこで: `src/frameweave/interactive/runtime/draw_window_system.py`。
# 何を: `draw(t)` が返すシーンを描画ウィンドウへ描画するサブシステムを提供する。
# なぜ: `src/frameweave/api/runner.py` の `run()` を「配線」に寄せ、描画責務を独立させるため。

from __future__ import annotations

import logging
from typing import Any, Callable

from pyglet import gl

from frameweave.core.scene import SceneItem, present_frame
from frameweave.interactive.draw_window import create_draw_window
from frameweave.interactive.pyglet_context import PygletContext
from frameweave.interactive.render_settings import RenderSettings
from frameweave.interactive.runtime.frame_clock import FixedStepClock

_logger = logging.getLogger(__name__)


class DrawWindowSystem:
    """描画（メインウィンドウ）のサブシステム。"""

    def __init__(
        self,
        draw: Callable[[float], SceneItem],
        *,
        settings: RenderSettings,
        window: Any = None,
    ) -> None:
        """描画用の window と固定ステップ時計を初期化する。"""

        self._draw = draw
        self._settings = settings
        self.window = window if window is not None else create_draw_window(settings)
        self._clock = FixedStepClock(settings.frame_duration)

    @property
    def clock(self) -> FixedStepClock:
        return self._clock

    def advance(self, dt: float) -> None:
        """実経過時間 dt 秒を時計へ積む。"""
        ticks = self._clock.advance(dt)
        if ticks > 1:
            _logger.debug("frame clock advanced %d ticks", ticks)

    def draw_frame(self) -> None:
        """背景をクリアし、現在時刻の `draw(t)` を描画する。"""

        r, g, b = self._settings.background_color
        gl.glClearColor(float(r), float(g), float(b), 1.0)
        self.window.clear()

        _, canvas_h = self._settings.canvas_size
        present_frame(self._draw, self._clock.t, PygletContext(float(canvas_h)))

    def close(self) -> None:
        """window を閉じる。"""
        self.window.close()
