"""公開 API（frameweave / frameweave.api）の再エクスポートと名前空間のテスト。"""

from __future__ import annotations

import pytest

import frameweave
from frameweave import A, C, W
from frameweave.core import ease
from frameweave.core.animation import Animation


def test_root_reexports_api() -> None:
    for name in ("A", "C", "W", "run", "primitive", "modifier"):
        assert hasattr(frameweave, name)
    assert callable(frameweave.run)


def test_animation_namespace_builds_animations() -> None:
    a = A.sequence(A.gradual(0.0, 1.0, 1.0, A.ease.quad_in), A.constant(1.0, 1.0))
    assert isinstance(a, Animation)
    assert a.duration == 2.0
    assert a.value(0.5) == pytest.approx(0.25)
    assert A.ping_pong(A.gradual(0.0, 1.0, 1.0), 2).duration == 2.0
    assert A.lerp(0.5, 0.0, 2.0) == pytest.approx(1.0)


def test_animation_namespace_resolves_ease_names() -> None:
    assert A.cubic_out is ease.cubic_out
    assert A.ease.get("sine_in_out") is ease.sine_in_out
    with pytest.raises(AttributeError):
        A.not_an_ease  # noqa: B018


def test_canvas_namespace_exposes_colors_and_helpers() -> None:
    assert C.RED == (1.0, 0.0, 0.0, 1.0)
    assert C.TRANSPARENT[3] == 0.0
    assert C.rgba(0, 0, 1) == (0.0, 0.0, 1.0, 1.0)
    with pytest.raises(AttributeError):
        C._private  # noqa: B018


def test_canvas_factories_bind_arguments_eagerly() -> None:
    item = C.circle(radius=2)
    assert dict(item.args) == {"radius": 2, "point_count": 30}
    with pytest.raises(TypeError):
        C.circle(1, 2, 3)


def test_widget_namespace_factories_and_modifiers() -> None:
    w = W.text("abc", size=12) | W.all(W.position((1, 2)), W.font_size(14))
    assert w.kind == "TextWidget"
    assert w.get("text") == "abc"
    assert w.get("font_size") == 14
    assert w.get("position") == (1.0, 2.0)
