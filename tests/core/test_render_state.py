"""RenderState と色ヘルパのテスト。"""

from __future__ import annotations

import dataclasses

import pytest

from frameweave.core.render_state import (
    BLACK,
    WHITE,
    BlendMode,
    RenderState,
    TextStyleFlag,
    rgba,
)
from frameweave.core.transform import Transform


def test_defaults() -> None:
    state = RenderState()
    assert state.style.fill_color == BLACK
    assert state.style.outline_color == WHITE
    assert state.style.outline_thickness == 1.0
    assert state.text_style.font is None
    assert state.text_style.font_size == 16
    assert state.text_style.style == TextStyleFlag.REGULAR
    assert state.transform == Transform.identity()
    assert state.blend_mode is BlendMode.ALPHA


def test_with_methods_return_new_state() -> None:
    state = RenderState()
    changed = state.with_style(outline_thickness=2.0).with_text_style(font_size=8)
    assert changed.style.outline_thickness == 2.0
    assert changed.text_style.font_size == 8
    assert state == RenderState()


def test_state_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        RenderState().blend_mode = BlendMode.ADD  # type: ignore[misc]


def test_rgba_forms() -> None:
    assert rgba(1, 0, 0) == (1.0, 0.0, 0.0, 1.0)
    assert rgba(1, 0, 0, 0.5) == (1.0, 0.0, 0.0, 0.5)
    assert rgba((0, 1, 0)) == (0.0, 1.0, 0.0, 1.0)


@pytest.mark.parametrize("bad", [(1, 0), (1, 0, 0, 0, 0)])
def test_rgba_rejects_wrong_length(bad) -> None:
    with pytest.raises(ValueError):
        rgba(bad)
