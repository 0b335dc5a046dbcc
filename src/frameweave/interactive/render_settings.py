# どこで: `src/frameweave/interactive/render_settings.py`。
# 何を: interactive 描画設定の束を表すデータクラスを定義する。
# なぜ: `run` の引数と config.yaml の値を 1 か所で確定させ、サブシステムへ渡すため。

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """リアルタイム描画に用いる設定値の集合。"""

    canvas_size: tuple[int, int] = (800, 600)
    background_color: tuple[float, float, float] = (0.0, 0.0, 0.0)
    caption: str = "frameweave"
    fps: float = 60.0
    frame_duration: float = 0.01
