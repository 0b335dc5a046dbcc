"""塗り/線スタイルとブレンドモードを差し替える modifier。"""

from __future__ import annotations

from typing import Any

from frameweave.core.modifier_registry import modifier
from frameweave.core.render_state import BlendMode, RenderState, rgba


@modifier
def fill_color(state: RenderState, color: Any) -> RenderState:
    return state.with_style(fill_color=rgba(color))


@modifier
def outline_color(state: RenderState, color: Any) -> RenderState:
    return state.with_style(outline_color=rgba(color))


@modifier
def outline_thickness(state: RenderState, thickness: float) -> RenderState:
    return state.with_style(outline_thickness=float(thickness))


@modifier
def blend(state: RenderState, mode: BlendMode | str) -> RenderState:
    """合成モードを差し替える。文字列は `BlendMode` の値（"add" など）として解釈する。"""
    return state.with_blend_mode(BlendMode(mode))
