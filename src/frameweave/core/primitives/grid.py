"""
どこで: `src/frameweave/core/primitives/grid.py`。
何を: 等間隔の縦線・横線からなるグリッドのプリミティブ。
なぜ: 背景の目盛りなどを 1 回の線分描画でまとめて出すため。
"""

from __future__ import annotations

from typing import Any

import numpy as np

from frameweave.core.context import RenderContext, Segment
from frameweave.core.primitive_registry import primitive
from frameweave.core.render_state import RenderState
from frameweave.core.vec import as_vec2


def grid_segments(size: Any, spacing: Any) -> list[Segment]:
    """グリッドの線分列を返す。

    Parameters
    ----------
    size : Vec2
        グリッド全体の (w, h)。
    spacing : Vec2 | float
        線の間隔 (dx, dy)。正の値が前提。

    Returns
    -------
    list[Segment]
        縦線（x = 0, dx, 2dx, ... < w）の後に横線（y = 0, dy, ... < h）を並べた線分列。
    """
    w, h = as_vec2(size)
    dx, dy = as_vec2(spacing)

    segments: list[Segment] = []
    for x in np.arange(0.0, w, dx, dtype=np.float64):
        segments.append(((float(x), 0.0), (float(x), h)))
    for y in np.arange(0.0, h, dy, dtype=np.float64):
        segments.append(((0.0, float(y)), (w, float(y))))
    return segments


@primitive
def grid(state: RenderState, ctx: RenderContext, size: Any, spacing: Any) -> None:
    """グリッドを線色（outline_color）で描く。"""
    ctx.draw_lines(grid_segments(size, spacing), state)
