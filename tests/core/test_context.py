"""RecordingContext の記録内容のテスト。"""

from __future__ import annotations

from frameweave.core.context import DrawCall, RecordingContext, RenderContext, TextureRegion
from frameweave.core.render_state import RenderState


def test_recording_context_satisfies_protocol() -> None:
    assert isinstance(RecordingContext(), RenderContext)


def test_records_calls_in_order() -> None:
    ctx = RecordingContext()
    state = RenderState()
    ctx.draw_rect((1.0, 2.0), state)
    ctx.draw_lines([((0.0, 0.0), (1.0, 1.0))], state)
    ctx.draw_sprite(TextureRegion("tex", (0, 0, 1, 1)), state)
    assert ctx.kinds() == ["rect", "lines", "sprite"]
    assert ctx.calls[0] == DrawCall("rect", {"size": (1.0, 2.0)}, state)
    assert ctx.calls[1].params["segments"] == (((0.0, 0.0), (1.0, 1.0)),)


def test_clear_drops_calls() -> None:
    ctx = RecordingContext()
    ctx.draw_text("x", RenderState())
    ctx.clear()
    assert ctx.calls == []
