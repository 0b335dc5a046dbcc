# src/frameweave/core/primitive_registry.py
# canvas の primitive ノードに対応する描画関数レジストリ。
# op 名から `func(state, ctx, **params) -> None` を引けるようにする。

from __future__ import annotations

import inspect
from collections.abc import ItemsView
from typing import Any, Callable

from frameweave.core.context import RenderContext
from frameweave.core.render_state import RenderState

PrimitiveFunc = Callable[..., None]


class PrimitiveRegistry:
    """primitive の op 名と描画関数を対応付けるレジストリ。

    Notes
    -----
    登録された関数のシグネチャは
    ``func(state: RenderState, ctx: RenderContext, *args, **params) -> None`` を想定する。
    1 回の呼び出しで ctx へ発行する描画命令は 1 回とする。
    """

    def __init__(self) -> None:
        """空のレジストリを初期化する。"""
        self._items: dict[str, PrimitiveFunc] = {}
        self._signatures: dict[str, inspect.Signature] = {}

    def _register(self, name: str, func: PrimitiveFunc, *, overwrite: bool = True) -> None:
        """primitive を登録する（内部用）。

        Notes
        -----
        登録は `@primitive` デコレータ経由に統一する。
        """
        if not overwrite and name in self._items:
            raise ValueError(f"primitive '{name}' は既に登録されている")
        sig = inspect.signature(func)
        params = list(sig.parameters.values())
        # state, ctx を除いたシグネチャで引数束縛する。
        self._signatures[name] = sig.replace(parameters=params[2:])
        self._items[name] = func

    def get(self, name: str) -> PrimitiveFunc:
        """op 名に対応する primitive を取得する。

        Raises
        ------
        KeyError
            未登録の op 名が指定された場合。
        """
        return self._items[name]

    def bind(self, name: str, *args: Any, **kwargs: Any) -> dict[str, Any]:
        """位置/キーワード引数を登録関数のシグネチャに束縛し、パラメータ辞書を返す。"""
        bound = self._signatures[name].bind(*args, **kwargs)
        bound.apply_defaults()
        return dict(bound.arguments)

    def draw(self, name: str, state: RenderState, ctx: RenderContext, params: dict[str, Any]) -> None:
        """登録関数を呼び出して描画する。"""
        self._items[name](state, ctx, **params)

    def __contains__(self, name: object) -> bool:
        """指定された名前が登録済みかどうかを返す。"""
        return name in self._items

    def __getitem__(self, name: str) -> PrimitiveFunc:
        return self.get(name)

    def items(self) -> ItemsView[str, PrimitiveFunc]:
        """登録済みエントリの (name, func) ビューを返す。"""
        return self._items.items()


primitive_registry = PrimitiveRegistry()
"""グローバルな primitive レジストリインスタンス。"""


def primitive(
    func: PrimitiveFunc | None = None,
    *,
    name: str | None = None,
    overwrite: bool = True,
):
    """グローバル primitive レジストリ用デコレータ。

    関数名（または name）を op 名として登録する。

    Examples
    --------
    @primitive
    def rect(state, ctx, size):
        ctx.draw_rect(as_vec2(size), state)
    """

    def decorator(f: PrimitiveFunc) -> PrimitiveFunc:
        op = name if name is not None else f.__name__
        primitive_registry._register(op, f, overwrite=overwrite)
        return f

    if func is None:
        return decorator
    return decorator(func)


__all__ = ["PrimitiveFunc", "PrimitiveRegistry", "primitive", "primitive_registry"]
