"""
どこで: `src/frameweave/core/canvas_item.py`。
何を: canvas item（不変の描画レシピ木）と state modifier（RenderState 変換の列）を定義し、木を評価する。
なぜ: シーンを純粋な値として組み立て、1 回のトップダウン走査で描画できるようにするため。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import NotImplementedType
from typing import Any, Callable, Iterable, Sequence, TypeAlias

from frameweave.core.context import RenderContext
from frameweave.core.modifier_registry import modifier_registry
from frameweave.core.primitive_registry import primitive_registry
from frameweave.core.render_state import RenderState

_logger = logging.getLogger(__name__)

ModifierStep = tuple[str, tuple[tuple[str, Any], ...]]


@dataclass(frozen=True, slots=True)
class StateModifier:
    """RenderState を変換する modifier 列。

    Parameters
    ----------
    steps : tuple[tuple[str, tuple[tuple[str, Any], ...]], ...]
        (op 名, パラメータ) の列。左から順に適用する。

    Notes
    -----
    `m1 | m2` は「m1 を適用してから m2 を適用する」modifier を返す。
    steps の連結なので結合則を満たし、空の steps が単位元になる。
    """

    steps: tuple[ModifierStep, ...] = ()

    @classmethod
    def identity(cls) -> "StateModifier":
        return cls(())

    @classmethod
    def create(cls, op: str, params: dict[str, Any]) -> "StateModifier":
        return cls(((op, tuple(params.items())),))

    def apply(self, state: RenderState) -> RenderState:
        """steps を順に適用した新しい RenderState を返す。"""
        for op, params in self.steps:
            state = modifier_registry.get(op)(state, **dict(params))
        return state

    def __call__(self, state: RenderState) -> RenderState:
        return self.apply(state)

    def __or__(self, other: object) -> "StateModifier | NotImplementedType":
        if not isinstance(other, StateModifier):
            return NotImplemented
        return StateModifier(self.steps + other.steps)

    @property
    def ops(self) -> tuple[str, ...]:
        """適用順の op 名列。"""
        return tuple(op for op, _ in self.steps)


class CanvasItem:
    """canvas item の基底。`item(state, ctx)` で描画し、`item | modifier` で状態を差し替える。"""

    __slots__ = ()

    def __call__(self, state: RenderState, ctx: RenderContext) -> None:
        render_item(self, state, ctx)

    def __or__(self, other: object) -> "CanvasItem | NotImplementedType":
        if not isinstance(other, StateModifier):
            return NotImplemented
        if isinstance(self, Modified):
            # (item | m1) | m2 を item | (m1 | m2) に畳み込み、左から順に適用させる。
            return Modified(self.item, self.modifier | other)
        return Modified(self, other)


@dataclass(frozen=True, slots=True)
class Primitive(CanvasItem):
    """registry 経由で 1 回の描画命令を発行する葉ノード。"""

    op: str
    args: tuple[tuple[str, Any], ...]

    @classmethod
    def create(cls, op: str, params: dict[str, Any]) -> "Primitive":
        return cls(op=op, args=tuple(params.items()))


@dataclass(frozen=True, slots=True)
class Group(CanvasItem):
    """子を列順に描画するノード（後の子ほど上に描かれる）。"""

    items: tuple[CanvasItem, ...]


@dataclass(frozen=True, slots=True)
class Modified(CanvasItem):
    """継承した state に modifier を適用してから item を描画するノード。"""

    item: CanvasItem
    modifier: StateModifier


@dataclass(frozen=True, slots=True)
class Custom(CanvasItem):
    """ユーザー関数 `func(state, ctx)` をそのまま描画処理として使うノード。"""

    func: Callable[[RenderState, RenderContext], None]


GroupInput: TypeAlias = CanvasItem | Sequence["GroupInput"]
IndexedItemFunc = Callable[[int, int, CanvasItem], CanvasItem]


def _flatten(items: Iterable[GroupInput]) -> list[CanvasItem]:
    result: list[CanvasItem] = []

    def _walk(item: GroupInput) -> None:
        if isinstance(item, CanvasItem):
            result.append(item)
            return
        if isinstance(item, Sequence) and not isinstance(item, (str, bytes)):
            for child in item:
                _walk(child)
            return
        raise TypeError(f"group で処理できない型: {type(item)!r}")

    for item in items:
        _walk(item)
    return result


def group(*items: GroupInput) -> Group:
    """items（ネスト列はフラット化）を描画順に束ねる。"""
    return Group(tuple(_flatten(items)))


def map_items(func: IndexedItemFunc, items: Sequence[CanvasItem]) -> Group:
    """`func(index, count, item)` を各要素に適用した Group を返す。"""
    count = len(items)
    return Group(tuple(func(index, count, item) for index, item in enumerate(items)))


def repeat_item(func: IndexedItemFunc, item: CanvasItem, count: int) -> Group:
    """同じ item を count 個並べて `map_items` する。"""
    return map_items(func, [item] * int(count))


def custom(func: Callable[[RenderState, RenderContext], None]) -> Custom:
    return Custom(func)


def render_item(item: CanvasItem, state: RenderState, ctx: RenderContext) -> None:
    """item を state で評価し、ctx へ描画命令を発行する。

    Raises
    ------
    TypeError
        未対応のノード型が含まれる場合。
    """
    if isinstance(item, Primitive):
        primitive_registry.draw(item.op, state, ctx, dict(item.args))
        return
    if isinstance(item, Modified):
        render_item(item.item, item.modifier.apply(state), ctx)
        return
    if isinstance(item, Group):
        # 兄弟には同じ state を渡す（state は不変なので互いの変更は見えない）。
        for child in item.items:
            render_item(child, state, ctx)
        return
    if isinstance(item, Custom):
        item.func(state, ctx)
        return
    raise TypeError(f"render で処理できない型: {type(item)!r}")


def render(item: CanvasItem, ctx: RenderContext, state: RenderState | None = None) -> None:
    """既定の RenderState（または state）から item 木を 1 回評価する。"""
    root = state if state is not None else RenderState()
    _logger.debug("render: root=%s", type(item).__name__)
    render_item(item, root, ctx)


__all__ = [
    "CanvasItem",
    "Custom",
    "Group",
    "GroupInput",
    "IndexedItemFunc",
    "Modified",
    "Primitive",
    "StateModifier",
    "custom",
    "group",
    "map_items",
    "render",
    "render_item",
    "repeat_item",
]
