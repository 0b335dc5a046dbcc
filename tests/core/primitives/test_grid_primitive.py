"""grid プリミティブの線分生成テスト。"""

from __future__ import annotations

import pytest

from frameweave.api import C
from frameweave.core.canvas_item import render
from frameweave.core.context import RecordingContext
from frameweave.core.primitives.grid import grid_segments


def test_grid_segments_vertical_then_horizontal() -> None:
    segments = grid_segments((30, 20), 10)
    assert segments == [
        ((0.0, 0.0), (0.0, 20.0)),
        ((10.0, 0.0), (10.0, 20.0)),
        ((20.0, 0.0), (20.0, 20.0)),
        ((0.0, 0.0), (30.0, 0.0)),
        ((0.0, 10.0), (30.0, 10.0)),
    ]


def test_grid_segments_with_anisotropic_spacing() -> None:
    segments = grid_segments((10, 10), (5, 2.5))
    vertical = [s for s in segments if s[0][0] == s[1][0]]
    horizontal = [s for s in segments if s[0][1] == s[1][1]]
    assert len(vertical) == 2
    assert len(horizontal) == 4
    assert horizontal[-1][0][1] == pytest.approx(7.5)


def test_grid_issues_single_lines_call() -> None:
    ctx = RecordingContext()
    render(C.grid((100, 50), 10) | C.outline_color((1, 0, 0)), ctx)
    assert ctx.kinds() == ["lines"]
    call = ctx.calls[0]
    assert len(call.params["segments"]) == 10 + 5
    assert call.state.style.outline_color == (1.0, 0.0, 0.0, 1.0)
