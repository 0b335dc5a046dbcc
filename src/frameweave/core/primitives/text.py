"""文字列プリミティブ。"""

from __future__ import annotations

from frameweave.core.context import RenderContext
from frameweave.core.primitive_registry import primitive
from frameweave.core.render_state import RenderState


@primitive
def text(state: RenderState, ctx: RenderContext, string: str) -> None:
    # font / size / spacing / 装飾は state.text_style から、色は state.style から取る。
    ctx.draw_text(str(string), state)
