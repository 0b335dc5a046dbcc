"""原点を左上とする矩形プリミティブ。"""

from __future__ import annotations

from typing import Any

from frameweave.core.context import RenderContext
from frameweave.core.primitive_registry import primitive
from frameweave.core.render_state import RenderState
from frameweave.core.vec import as_vec2


@primitive
def rect(state: RenderState, ctx: RenderContext, size: Any) -> None:
    """幅 w・高さ h の矩形を現在の塗り/線スタイルで描く。

    Parameters
    ----------
    size : Vec2
        (w, h)。負の値も検証せずそのまま渡す。
    """
    ctx.draw_rect(as_vec2(size), state)
