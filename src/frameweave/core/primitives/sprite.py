"""テクスチャ領域を貼った矩形（スプライト）プリミティブ。"""

from __future__ import annotations

from frameweave.core.context import RenderContext, TextureRegion
from frameweave.core.primitive_registry import primitive
from frameweave.core.render_state import RenderState


@primitive
def sprite(state: RenderState, ctx: RenderContext, region: TextureRegion) -> None:
    """region を現在の変換で描く。

    Notes
    -----
    region.texture は呼び出し側が所有し、描画が終わるまで生存を保証する。
    """
    ctx.draw_sprite(region, state)
