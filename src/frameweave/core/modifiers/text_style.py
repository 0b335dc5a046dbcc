"""文字スタイル（font / size / spacing / 装飾フラグ）を差し替える modifier。"""

from __future__ import annotations

from typing import Any

from frameweave.core.modifier_registry import modifier
from frameweave.core.render_state import RenderState, TextStyleFlag


@modifier
def font(state: RenderState, font: Any) -> RenderState:
    """font ハンドルを差し替える（借用参照のまま保持する）。"""
    return state.with_text_style(font=font)


@modifier
def font_size(state: RenderState, size: int) -> RenderState:
    return state.with_text_style(font_size=int(size))


@modifier
def letter_spacing(state: RenderState, spacing: float) -> RenderState:
    return state.with_text_style(letter_spacing=float(spacing))


@modifier
def line_spacing(state: RenderState, spacing: float) -> RenderState:
    return state.with_text_style(line_spacing=float(spacing))


@modifier
def text_style(state: RenderState, flags: TextStyleFlag | int) -> RenderState:
    """装飾フラグを上書きする。"""
    return state.with_text_style(style=TextStyleFlag(flags))


def _add_flag(state: RenderState, flag: TextStyleFlag) -> RenderState:
    return state.with_text_style(style=state.text_style.style | flag)


@modifier
def bold(state: RenderState) -> RenderState:
    return _add_flag(state, TextStyleFlag.BOLD)


@modifier
def italic(state: RenderState) -> RenderState:
    return _add_flag(state, TextStyleFlag.ITALIC)


@modifier
def underlined(state: RenderState) -> RenderState:
    return _add_flag(state, TextStyleFlag.UNDERLINED)


@modifier
def strikethrough(state: RenderState) -> RenderState:
    return _add_flag(state, TextStyleFlag.STRIKETHROUGH)
