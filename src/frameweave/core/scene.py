"""
どこで: `src/frameweave/core/scene.py`。
何を: `draw(t)` の戻り値を「描画単位の一次元リスト」に正規化し、RenderContext へ描画するヘルパを提供する。
なぜ: ランナーとヘッドレス実行（RecordingContext）で同じシーン解釈を使えるようにするため。
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol, TypeAlias

from frameweave.core.canvas_item import CanvasItem, render
from frameweave.core.context import RenderContext
from frameweave.core.widget import Widget

SceneItem: TypeAlias = CanvasItem | Widget | Sequence["SceneItem"] | None


class FrameContext(RenderContext, Protocol):
    """1 フレーム分の描画命令を溜めて実行する RenderContext。"""

    def draw(self) -> None: ...

    def release(self) -> None: ...


def normalize_scene(scene: SceneItem) -> list[CanvasItem | Widget]:
    """canvas item / Widget / ネスト列を描画順の一次元リストへフラット化する。

    Parameters
    ----------
    scene : SceneItem
        `draw(t)` が返す canvas item / Widget / それらのネスト列。None は空扱い。

    Returns
    -------
    list[CanvasItem | Widget]
        描画順を保った一次元リスト。

    Raises
    ------
    TypeError
        未対応の型が含まれる場合。
    """

    result: list[CanvasItem | Widget] = []

    def _walk(item: SceneItem) -> None:
        if item is None:
            return
        if isinstance(item, (CanvasItem, Widget)):
            result.append(item)
            return
        if isinstance(item, Sequence) and not isinstance(item, (str, bytes)):
            for child in item:
                _walk(child)
            return
        raise TypeError(f"normalize_scene で処理できない型: {type(item)!r}")

    _walk(scene)
    return result


def draw_scene(scene: SceneItem, ctx: RenderContext) -> int:
    """シーンを ctx へ描画し、描画した要素数を返す。

    canvas item は既定の RenderState から、Widget は恒等変換から 1 回ずつ描画する。
    """
    items = normalize_scene(scene)
    for item in items:
        if isinstance(item, Widget):
            item.draw(ctx)
        else:
            render(item, ctx)
    return len(items)


def present_frame(draw: Callable[[float], SceneItem], t: float, ctx: FrameContext) -> int:
    """`draw(t)` を ctx へ描画して実行し、描画した要素数を返す。

    `draw(t)` や描画中に例外が出ても ctx は必ず release する。
    """
    try:
        count = draw_scene(draw(t), ctx)
        ctx.draw()
    finally:
        ctx.release()
    return count


__all__ = ["FrameContext", "SceneItem", "draw_scene", "normalize_scene", "present_frame"]
