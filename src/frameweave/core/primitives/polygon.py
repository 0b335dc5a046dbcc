"""
どこで: `src/frameweave/core/primitives/polygon.py`。
何を: 凸多角形と三角形のプリミティブを定義する。
なぜ: 頂点列で与える任意形状を canvas item として扱えるようにするため。
"""

from __future__ import annotations

from typing import Any, Sequence

from frameweave.core.context import RenderContext
from frameweave.core.primitive_registry import primitive
from frameweave.core.render_state import RenderState
from frameweave.core.vec import Vec2, as_vec2


def _vertices(points: Sequence[Any]) -> tuple[Vec2, ...]:
    return tuple(as_vec2(p) for p in points)


@primitive
def polygon(state: RenderState, ctx: RenderContext, vertices: Sequence[Any]) -> None:
    """凸多角形を塗り/線スタイルで描く（空の頂点列も検証しない）。"""
    ctx.draw_polygon(_vertices(vertices), state)


@primitive
def triangle(
    state: RenderState,
    ctx: RenderContext,
    v0: Any,
    v1: Any = None,
    v2: Any = None,
) -> None:
    """三角形を塗り色の頂点色で描く。

    `triangle(a, b, c)` と `triangle([a, b, c])` の両方を受け付ける。
    """
    if v1 is None and v2 is None:
        points = _vertices(v0)
    else:
        points = _vertices((v0, v1, v2))
    ctx.draw_triangles(points, state)
