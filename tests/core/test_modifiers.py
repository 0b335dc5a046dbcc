"""state modifier（変換・スタイル・文字スタイル）の単体テスト。"""

from __future__ import annotations

import numpy as np
import pytest

from frameweave.api import C
from frameweave.core.render_state import BlendMode, RenderState, TextStyleFlag
from frameweave.core.transform import Transform


def _apply(m) -> RenderState:
    return m.apply(RenderState())


def test_rotate_with_pivot_keeps_pivot_fixed() -> None:
    state = _apply(C.rotate(37, pivot=(10, 20)))
    np.testing.assert_allclose(state.transform.transform_point((10, 20)), (10.0, 20.0), atol=1e-12)
    np.testing.assert_allclose(state.transform.transform_point((11, 20)), (10.0 + np.cos(np.radians(37)), 20.0 + np.sin(np.radians(37))))


def test_scale_with_pivot_keeps_pivot_fixed() -> None:
    state = _apply(C.scale((2, 3), pivot=(5, 5)))
    np.testing.assert_allclose(state.transform.transform_point((5, 5)), (5.0, 5.0))
    np.testing.assert_allclose(state.transform.transform_point((6, 6)), (7.0, 8.0))


def test_scalar_scale_is_uniform() -> None:
    state = _apply(C.scale(2))
    assert state.transform == Transform.identity().scale((2, 2))


def test_transform_modifier_combines_on_the_right() -> None:
    extra = Transform.from_values(1, 0, 4, 0, 1, 5)
    state = _apply(C.translate((1, 1)) | C.transform(extra))
    assert state.transform == Transform.identity().translate((1, 1)).combine(extra)


def test_style_modifiers() -> None:
    state = _apply(C.fill_color((1, 0, 0)) | C.outline_color((0, 1, 0, 0.5)) | C.outline_thickness(4))
    assert state.style.fill_color == (1.0, 0.0, 0.0, 1.0)
    assert state.style.outline_color == (0.0, 1.0, 0.0, 0.5)
    assert state.style.outline_thickness == 4.0


def test_blend_accepts_enum_and_string() -> None:
    assert _apply(C.blend(BlendMode.ADD)).blend_mode is BlendMode.ADD
    assert _apply(C.blend("multiply")).blend_mode is BlendMode.MULTIPLY
    with pytest.raises(ValueError):
        _apply(C.blend("screen"))


def test_text_style_modifiers() -> None:
    font = object()
    state = _apply(
        C.font(font) | C.font_size(24) | C.letter_spacing(1.5) | C.line_spacing(2) | C.bold() | C.italic()
    )
    ts = state.text_style
    assert ts.font is font
    assert ts.font_size == 24
    assert ts.letter_spacing == 1.5
    assert ts.line_spacing == 2.0
    assert ts.style == TextStyleFlag.BOLD | TextStyleFlag.ITALIC


def test_text_style_overwrites_flags() -> None:
    state = _apply(C.bold() | C.underlined() | C.text_style(TextStyleFlag.STRIKETHROUGH))
    assert state.text_style.style == TextStyleFlag.STRIKETHROUGH
    state = _apply(C.text_style(TextStyleFlag.REGULAR) | C.strikethrough())
    assert state.text_style.style == TextStyleFlag.STRIKETHROUGH


def test_modifier_does_not_mutate_input_state() -> None:
    root = RenderState()
    C.fill_color((1, 0, 0)).apply(root)
    assert root == RenderState()


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError):
        C.shear((1, 0))


def test_bad_arguments_raise_type_error() -> None:
    with pytest.raises(TypeError):
        C.translate()
    with pytest.raises(TypeError):
        C.rotate(1, 2, 3)
