"""外接矩形の左上を原点とする円プリミティブ。"""

from __future__ import annotations

from frameweave.core.context import RenderContext
from frameweave.core.primitive_registry import primitive
from frameweave.core.render_state import RenderState


@primitive
def circle(state: RenderState, ctx: RenderContext, radius: float, point_count: int = 30) -> None:
    """半径 radius の円を描く。

    Parameters
    ----------
    radius : float
        半径。
    point_count : int, optional
        近似多角形の頂点数。
    """
    ctx.draw_circle(float(radius), int(point_count), state)
