# どこで: `src/frameweave/interactive/draw_window.py`。
# 何を: ライブ描画用の pyglet ウィンドウを生成する。
# なぜ: pyglet 依存をこの層に閉じ込め、core をヘッドレスに保つため。

from __future__ import annotations

import logging

import pyglet
from pyglet.gl import Config
from pyglet.window import NoSuchConfigException, Window

from frameweave.interactive.render_settings import RenderSettings

_logger = logging.getLogger(__name__)


def _open_window(settings: RenderSettings, config: Config | None) -> Window:
    width, height = settings.canvas_size
    return pyglet.window.Window(  # type: ignore[abstract]
        width=int(width),
        height=int(height),
        resizable=False,
        caption=settings.caption,
        config=config,
    )


def create_draw_window(settings: RenderSettings) -> Window:
    """設定に基づき描画ウィンドウを生成する。

    Notes
    -----
    図形の縁を滑らかにするため 4x MSAA を要求し、
    環境が対応しない場合は既定の GL config で開き直す。
    """
    msaa = Config(double_buffer=True, sample_buffers=1, samples=4)  # type: ignore[abstract]
    try:
        return _open_window(settings, msaa)
    except NoSuchConfigException:
        _logger.warning("MSAA 対応の GL config が見つからないため既定 config で開きます")
        return _open_window(settings, None)
