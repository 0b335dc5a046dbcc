"""累積変換（translate / scale / rotate / transform）を更新する modifier。"""

from __future__ import annotations

from typing import Any

from frameweave.core.modifier_registry import modifier
from frameweave.core.render_state import RenderState
from frameweave.core.transform import Transform
from frameweave.core.vec import as_vec2, neg


@modifier
def translate(state: RenderState, offset: Any) -> RenderState:
    """平行移動を右から合成する。

    Parameters
    ----------
    state : RenderState
        継承した状態。
    offset : Vec2
        移動量 (dx, dy)。

    Returns
    -------
    RenderState
        変換を合成した新しい状態。
    """
    return state.with_transform(state.transform.translate(as_vec2(offset)))


@modifier
def scale(state: RenderState, factor: Any, pivot: Any = None) -> RenderState:
    """拡大縮小を右から合成する。

    Parameters
    ----------
    factor : float | Vec2
        倍率。スカラーは等方倍率として扱う。
    pivot : Vec2 or None, optional
        指定時は `translate(pivot) ∘ scale ∘ translate(-pivot)` として適用し、pivot を不動点にする。
    """
    t = state.transform
    if pivot is None:
        return state.with_transform(t.scale(factor))
    p = as_vec2(pivot)
    return state.with_transform(t.translate(p).scale(factor).translate(neg(p)))


@modifier
def rotate(state: RenderState, angle: float, pivot: Any = None) -> RenderState:
    """回転 [deg] を右から合成する。pivot の扱いは `scale` と同じ。"""
    t = state.transform
    if pivot is None:
        return state.with_transform(t.rotate(angle))
    p = as_vec2(pivot)
    return state.with_transform(t.translate(p).rotate(angle).translate(neg(p)))


@modifier
def transform(state: RenderState, matrix: Transform) -> RenderState:
    """任意の Transform を右から合成する。"""
    return state.with_transform(state.transform.combine(matrix))
