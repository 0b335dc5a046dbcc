# src/frameweave/core/modifier_registry.py
# RenderState を変換する modifier 関数のレジストリ。
# op 名から `func(state, **params) -> RenderState` を引けるようにする。

from __future__ import annotations

import inspect
from collections.abc import ItemsView
from typing import Any, Callable

from frameweave.core.render_state import RenderState

ModifierFunc = Callable[..., RenderState]


class ModifierRegistry:
    """state modifier の op 名と変換関数を対応付けるレジストリ。

    Notes
    -----
    登録された関数のシグネチャは
    ``func(state: RenderState, *args, **params) -> RenderState`` を想定する。
    関数は純粋であること（受け取った state を変更せず、新しい state を返す）。
    """

    def __init__(self) -> None:
        """空のレジストリを初期化する。"""
        self._items: dict[str, ModifierFunc] = {}
        self._signatures: dict[str, inspect.Signature] = {}

    def _register(self, name: str, func: ModifierFunc, *, overwrite: bool = True) -> None:
        """modifier を登録する（内部用）。

        Notes
        -----
        登録は `@modifier` デコレータ経由に統一する。
        """
        if not overwrite and name in self._items:
            raise ValueError(f"modifier '{name}' は既に登録されている")
        sig = inspect.signature(func)
        params = list(sig.parameters.values())
        # 先頭の state 引数を除いたシグネチャで引数束縛する。
        self._signatures[name] = sig.replace(parameters=params[1:])
        self._items[name] = func

    def get(self, name: str) -> ModifierFunc:
        """op 名に対応する modifier を取得する。

        Raises
        ------
        KeyError
            未登録の op 名が指定された場合。
        """
        return self._items[name]

    def bind(self, name: str, *args: Any, **kwargs: Any) -> dict[str, Any]:
        """位置/キーワード引数を登録関数のシグネチャに束縛し、パラメータ辞書を返す。

        Raises
        ------
        TypeError
            引数がシグネチャに合わない場合。
        """
        bound = self._signatures[name].bind(*args, **kwargs)
        bound.apply_defaults()
        return dict(bound.arguments)

    def __contains__(self, name: object) -> bool:
        """指定された名前が登録済みかどうかを返す。"""
        return name in self._items

    def __getitem__(self, name: str) -> ModifierFunc:
        return self.get(name)

    def items(self) -> ItemsView[str, ModifierFunc]:
        """登録済みエントリの (name, func) ビューを返す。"""
        return self._items.items()


modifier_registry = ModifierRegistry()
"""グローバルな modifier レジストリインスタンス。"""


def modifier(
    func: ModifierFunc | None = None,
    *,
    name: str | None = None,
    overwrite: bool = True,
):
    """グローバル modifier レジストリ用デコレータ。

    関数名（または name）を op 名として登録する。

    Examples
    --------
    @modifier
    def fill_color(state, color):
        return state.with_style(fill_color=rgba(color))
    """

    def decorator(f: ModifierFunc) -> ModifierFunc:
        op = name if name is not None else f.__name__
        modifier_registry._register(op, f, overwrite=overwrite)
        return f

    if func is None:
        return decorator
    return decorator(func)


__all__ = ["ModifierFunc", "ModifierRegistry", "modifier", "modifier_registry"]
