"""
どこで: `src/frameweave/core/context.py`。
何を: core が描画命令を発行する先（RenderContext）のプロトコルと、記録用の実装を定義する。
なぜ: core をバックエンド非依存に保ち、ヘッドレス実行とテストで描画結果を検査できるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence, runtime_checkable

from frameweave.core.render_state import RenderState
from frameweave.core.vec import Vec2

Segment = tuple[Vec2, Vec2]


@dataclass(frozen=True, slots=True)
class TextureRegion:
    """テクスチャハンドルとその切り出し矩形。

    Parameters
    ----------
    texture : Any
        外部ローダが供給するテクスチャ（借用参照）。
    rect : tuple[int, int, int, int]
        切り出し矩形 (x, y, w, h)。
    """

    texture: Any
    rect: tuple[int, int, int, int]


@runtime_checkable
class RenderContext(Protocol):
    """描画命令の受け口。戻り値も失敗通知も持たない。"""

    def draw_rect(self, size: Vec2, state: RenderState) -> None: ...

    def draw_circle(self, radius: float, point_count: int, state: RenderState) -> None: ...

    def draw_polygon(self, vertices: Sequence[Vec2], state: RenderState) -> None: ...

    def draw_triangles(self, vertices: Sequence[Vec2], state: RenderState) -> None: ...

    def draw_text(self, string: str, state: RenderState) -> None: ...

    def draw_sprite(self, region: TextureRegion, state: RenderState) -> None: ...

    def draw_lines(self, segments: Sequence[Segment], state: RenderState) -> None: ...


@dataclass(frozen=True, slots=True)
class DrawCall:
    """RecordingContext が記録する 1 回分の描画命令。"""

    kind: str
    params: dict[str, Any]
    state: RenderState


@dataclass
class RecordingContext:
    """描画命令を `calls` に順番どおり記録する RenderContext。"""

    calls: list[DrawCall] = field(default_factory=list)

    def _record(self, kind: str, state: RenderState, **params: Any) -> None:
        self.calls.append(DrawCall(kind=kind, params=params, state=state))

    def draw_rect(self, size: Vec2, state: RenderState) -> None:
        self._record("rect", state, size=size)

    def draw_circle(self, radius: float, point_count: int, state: RenderState) -> None:
        self._record("circle", state, radius=radius, point_count=point_count)

    def draw_polygon(self, vertices: Sequence[Vec2], state: RenderState) -> None:
        self._record("polygon", state, vertices=tuple(vertices))

    def draw_triangles(self, vertices: Sequence[Vec2], state: RenderState) -> None:
        self._record("triangles", state, vertices=tuple(vertices))

    def draw_text(self, string: str, state: RenderState) -> None:
        self._record("text", state, string=string)

    def draw_sprite(self, region: TextureRegion, state: RenderState) -> None:
        self._record("sprite", state, region=region)

    def draw_lines(self, segments: Sequence[Segment], state: RenderState) -> None:
        self._record("lines", state, segments=tuple(segments))

    def kinds(self) -> list[str]:
        return [call.kind for call in self.calls]

    def clear(self) -> None:
        self.calls.clear()


__all__ = ["DrawCall", "RecordingContext", "RenderContext", "Segment", "TextureRegion"]
