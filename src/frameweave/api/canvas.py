# どこで: `src/frameweave/api/canvas.py`。
# 何を: canvas item と state modifier を生成する公開名前空間 C を提供する。
# なぜ: registry 上の primitive / modifier と、group などの合成ヘルパを 1 つの入口にまとめるため。

from __future__ import annotations

from typing import Any, Callable, Sequence

from frameweave.core import render_state as _render_state
from frameweave.core.canvas_item import (
    CanvasItem,
    IndexedItemFunc,
    Primitive,
    StateModifier,
    custom,
    group,
    map_items,
    render,
    repeat_item,
)
from frameweave.core.context import RecordingContext, TextureRegion
from frameweave.core.modifier_registry import modifier_registry
from frameweave.core.primitive_registry import primitive_registry
from frameweave.core.render_state import BlendMode, RenderState, TextStyleFlag, rgba
from frameweave.core.transform import Transform
from frameweave.core.vec import as_vec2, mul

# primitive / modifier 実装モジュールをインポートしてレジストリに登録させる。
from frameweave.core.modifiers import style as _modifier_style  # noqa: F401
from frameweave.core.modifiers import text_style as _modifier_text_style  # noqa: F401
from frameweave.core.modifiers import transform as _modifier_transform  # noqa: F401
from frameweave.core.primitives import circle as _primitive_circle  # noqa: F401
from frameweave.core.primitives import grid as _primitive_grid  # noqa: F401
from frameweave.core.primitives import polygon as _primitive_polygon  # noqa: F401
from frameweave.core.primitives import rect as _primitive_rect  # noqa: F401
from frameweave.core.primitives import sprite as _primitive_sprite  # noqa: F401
from frameweave.core.primitives import text as _primitive_text  # noqa: F401

_COLOR_NAMES = ("BLACK", "WHITE", "RED", "GREEN", "BLUE", "YELLOW", "MAGENTA", "CYAN", "TRANSPARENT")


def distribute(dist: Any) -> IndexedItemFunc:
    """i 番目の item を `i * dist` だけ平行移動する map 用関数を返す。"""
    d = as_vec2(dist)

    def func(index: int, _count: int, item: CanvasItem) -> CanvasItem:
        offset = mul(d, index)
        return item | StateModifier.create("translate", modifier_registry.bind("translate", offset))

    return func


class CanvasNamespace:
    """canvas item / state modifier を生成する名前空間。

    Attributes
    ----------
    <primitive> : Callable[..., CanvasItem]
        登録済み primitive 名ごとのファクトリ。
        例: C.rect((10, 20)) -> Primitive(op="rect", args=(("size", (10, 20)),))
    <modifier> : Callable[..., StateModifier]
        登録済み modifier 名ごとのファクトリ。
        例: C.translate((5, 0)) | C.rotate(45)
    """

    Transform = Transform
    RenderState = RenderState
    RecordingContext = RecordingContext
    TextureRegion = TextureRegion
    BlendMode = BlendMode
    TextStyleFlag = TextStyleFlag

    def __getattr__(self, name: str) -> Any:
        """primitive / modifier 名に対応するファクトリ、または色定数を返す。

        Raises
        ------
        AttributeError
            未登録の名前が指定された場合。
        """
        if name.startswith("_"):
            raise AttributeError(name)

        if name in _COLOR_NAMES:
            return getattr(_render_state, name)

        if name in primitive_registry:

            def primitive_factory(*args: Any, **params: Any) -> CanvasItem:
                # 引数はここで束縛しておき、不一致は描画時ではなく生成時に TypeError にする。
                bound = primitive_registry.bind(name, *args, **params)
                return Primitive.create(name, bound)

            primitive_factory.__name__ = name
            return primitive_factory

        if name in modifier_registry:

            def modifier_factory(*args: Any, **params: Any) -> StateModifier:
                bound = modifier_registry.bind(name, *args, **params)
                return StateModifier.create(name, bound)

            modifier_factory.__name__ = name
            return modifier_factory

        raise AttributeError(f"未登録の primitive / modifier: {name!r}")

    @staticmethod
    def group(*items: Any) -> CanvasItem:
        return group(*items)

    @staticmethod
    def map(func: IndexedItemFunc, items: Sequence[CanvasItem]) -> CanvasItem:  # noqa: A003
        return map_items(func, items)

    @staticmethod
    def repeat(func: IndexedItemFunc, item: CanvasItem, count: int) -> CanvasItem:
        return repeat_item(func, item, count)

    @staticmethod
    def distribute(dist: Any) -> IndexedItemFunc:
        return distribute(dist)

    @staticmethod
    def custom(func: Callable[[RenderState, Any], None]) -> CanvasItem:
        return custom(func)

    @staticmethod
    def identity() -> StateModifier:
        return StateModifier.identity()

    @staticmethod
    def rgba(*components: Any) -> tuple[float, float, float, float]:
        return rgba(*components)

    @staticmethod
    def render(item: CanvasItem, ctx: Any, state: RenderState | None = None) -> None:
        render(item, ctx, state)


C = CanvasNamespace()
"""canvas item / state modifier を生成する公開名前空間。"""

__all__ = ["C", "CanvasNamespace", "distribute"]
