"""Widget（複製してから書き換えるオブジェクト版）のテスト。"""

from __future__ import annotations

import copy

import numpy as np
import pytest

from frameweave.api import W
from frameweave.core.context import RecordingContext, TextureRegion
from frameweave.core.render_state import RED, TextStyleFlag
from frameweave.core.transform import Transform
from frameweave.core.widget import WidgetModifier


def _draw(widget, transform=None):
    ctx = RecordingContext()
    widget.draw(ctx, transform)
    return ctx.calls


def test_modifier_returns_modified_clone() -> None:
    base = W.rect(10, 20)
    moved = base | W.position((5, 6)) | W.fill(RED)
    assert base.get("position") == (0.0, 0.0)
    assert moved.get("position") == (5.0, 6.0)
    assert moved.get("fill_color") == RED
    assert base.get("fill_color") != RED


def test_move_adds_to_current_position() -> None:
    w = W.circle(3) | W.position((1, 1)) | W.move((2, 3)) | W.move((1, 0))
    assert w.get("position") == (4.0, 4.0)


def test_modifiers_compose_left_to_right() -> None:
    m = W.position((1, 1)) | W.move((1, 0))
    assert isinstance(m, WidgetModifier)
    assert (W.rect(1, 1) | m).get("position") == (2.0, 1.0)
    assert (W.rect(1, 1) | W.all(W.position((1, 1)), W.move((1, 0)), W.rotate(45))).get("rotation") == 45.0


def test_identity_and_keep_leave_widget_unchanged() -> None:
    w = W.rect(1, 1) | W.position((3, 4))
    assert (w | W.identity()).get("position") == (3.0, 4.0)
    assert (w | W.modify("position", W.keep)).get("position") == (3.0, 4.0)
    assert (w | W.modify("position", W.set_value((9.0, 9.0)))).get("position") == (9.0, 9.0)


def test_unsupported_property_is_ignored() -> None:
    w = W.rect(1, 1) | W.font_size(99) | W.texture(None)
    assert not w.supports("font_size")
    with pytest.raises(KeyError):
        w.get("font_size")


def test_rect_draw_uses_local_transform() -> None:
    w = W.rect(10, 20) | W.position((100, 50)) | W.rotate(90) | W.scale((2, 2)) | W.origin((5, 10))
    (call,) = _draw(w)
    assert call.kind == "rect"
    assert call.params["size"] == (10.0, 20.0)
    # origin が position に来る。
    np.testing.assert_allclose(call.state.transform.transform_point((5, 10)), (100.0, 50.0), atol=1e-12)
    expected = Transform.identity().translate((100, 50)).rotate(90).scale((2, 2)).translate((-5, -10))
    np.testing.assert_allclose(call.state.transform.matrix, expected.matrix)


def test_parent_transform_is_combined_on_the_left() -> None:
    parent = Transform.identity().translate((1000, 0))
    (call,) = _draw(W.rect(1, 1) | W.position((1, 2)), parent)
    assert call.state.transform.transform_point((0, 0)) == (1001.0, 2.0)


def test_style_properties_reach_draw_state() -> None:
    w = W.polygon([(0, 0), (1, 0), (0, 1)]) | W.fill(RED) | W.outline((0, 0, 1)) | W.outline_thickness(2)
    (call,) = _draw(w)
    assert call.kind == "polygon"
    assert call.state.style.fill_color == RED
    assert call.state.style.outline_color == (0.0, 0.0, 1.0, 1.0)
    assert call.state.style.outline_thickness == 2.0


def test_circle_widget() -> None:
    (call,) = _draw(W.circle(4, point_count=12))
    assert call.params == {"radius": 4.0, "point_count": 12}


def test_text_widget_properties() -> None:
    font = object()
    w = (
        W.text("hi", font=font, size=20)
        | W.set_text("bye")
        | W.letter_spacing(2)
        | W.line_spacing(1.5)
        | W.bold()
        | W.underlined()
    )
    (call,) = _draw(w)
    assert call.kind == "text"
    assert call.params["string"] == "bye"
    ts = call.state.text_style
    assert ts.font is font
    assert ts.font_size == 20
    assert ts.letter_spacing == 2.0
    assert ts.line_spacing == 1.5
    assert ts.style == TextStyleFlag.BOLD | TextStyleFlag.UNDERLINED
    assert (w | W.font_size(8) | W.italic()).get("font_style") & TextStyleFlag.ITALIC


def test_sprite_widget_without_texture_draws_nothing() -> None:
    assert _draw(W.sprite()) == []
    region = TextureRegion("tex", (0, 0, 4, 4))
    (call,) = _draw(W.sprite() | W.texture(region))
    assert call.kind == "sprite"
    assert call.params["region"] is region


def test_clone_shares_borrowed_handles_but_not_properties() -> None:
    font = object()
    a = W.text("a", font=font)
    b = a.clone()
    assert b.get("font") is font
    c = copy.deepcopy(a) | W.set_text("c")
    assert a.get("text") == "a"
    assert c.get("text") == "c"
    assert c.get("font") is font


def test_widget_is_callable() -> None:
    ctx = RecordingContext()
    W.rect(2, 2)(ctx)
    assert ctx.kinds() == ["rect"]


def test_or_with_non_modifier_raises_type_error() -> None:
    with pytest.raises(TypeError):
        W.rect(1, 1) | "red"  # noqa: B018
