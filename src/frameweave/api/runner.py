"""
どこで: `src/frameweave/api/runner.py`。公開 API のランナー実装。
何を: pyglet を使い、`draw(t)` が返す canvas item / widget をウィンドウに描画するランナーを提供する。
なぜ: `main.py` を実行して実際にアニメーションをプレビューできる経路を用意するため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pyglet

from frameweave.core.runtime_config import config_path_from_text, runtime_config, set_config_path
from frameweave.core.scene import SceneItem
from frameweave.interactive.render_settings import RenderSettings
from frameweave.interactive.runtime.draw_window_system import DrawWindowSystem
from frameweave.interactive.runtime.window_loop import WindowLoop

_logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    root = logging.getLogger()
    # アプリ側で handler を設定済みなら尊重する。
    if root.handlers:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(
    draw: Callable[[float], SceneItem],
    *,
    config_path: str | Path | None = None,
    canvas_size: tuple[int, int] | None = None,
    background_color: tuple[float, float, float] | None = None,
    fps: float | None = None,
    frame_duration: float | None = None,
    caption: str | None = None,
    log_level: str | None = None,
) -> None:
    """pyglet ウィンドウを生成し `draw(t)` のシーンをリアルタイム描画する。

    Parameters
    ----------
    draw : Callable[[float], SceneItem]
        固定ステップで進むフレーム時刻 t を受け取り、canvas item / Widget / それらの列を返すコールバック。
    config_path : str | Path | None
        設定ファイル（config.yaml）のパス。指定した場合は探索より優先する。
    canvas_size : tuple[int, int] | None
        ウィンドウ寸法（px）。None の場合は `window.size`。
    background_color : tuple[float, float, float] | None
        背景色 RGB。None の場合は `window.background`。
    fps : float | None
        目標フレームレート。`<=0` の場合はスロットリングしない。None の場合は `window.fps`。
    frame_duration : float | None
        固定タイムステップ（秒）。None の場合は `timing.frame_duration`。
    caption : str | None
        ウィンドウタイトル。None の場合は `window.caption`。
    log_level : str | None
        ログレベル名。None の場合は `logging.level`。

    Returns
    -------
    None
        ウィンドウを閉じると制御を返す。
    """

    if isinstance(config_path, str):
        config_path = config_path_from_text(config_path)
    set_config_path(config_path)
    cfg = runtime_config()

    _configure_logging(log_level if log_level is not None else cfg.log_level)

    pyglet.options["vsync"] = False

    settings = RenderSettings(
        canvas_size=canvas_size if canvas_size is not None else cfg.window_size,
        background_color=background_color if background_color is not None else cfg.background_color,
        caption=caption if caption is not None else cfg.window_caption,
        fps=float(fps) if fps is not None else cfg.fps,
        frame_duration=float(frame_duration) if frame_duration is not None else cfg.frame_duration,
    )
    _logger.info(
        "run: canvas=%s fps=%s frame_duration=%s config=%s",
        settings.canvas_size,
        settings.fps,
        settings.frame_duration,
        cfg.config_path,
    )

    draw_window = DrawWindowSystem(draw, settings=settings)
    loop = WindowLoop(
        draw_window.window,
        draw_window.draw_frame,
        fps=settings.fps,
        on_frame_start=draw_window.advance,
    )
    try:
        loop.run()
    finally:
        draw_window.close()
