# どこで: `src/frameweave/interactive/pyglet_context.py`。
# 何を: RenderContext を pyglet の shapes / text / sprite で実装する。
# なぜ: core の描画命令を実ウィンドウへ出す経路を interactive 層に閉じ込めるため。

from __future__ import annotations

import logging
import math
from typing import Any, Sequence

import numpy as np
import pyglet
from pyglet import gl

from frameweave.core.context import Segment, TextureRegion
from frameweave.core.render_state import BlendMode, ColorRGBA, RenderState, TextStyleFlag
from frameweave.core.transform import Transform
from frameweave.core.vec import Vec2
from frameweave.interactive.label_style import label_styles

_logger = logging.getLogger(__name__)

_BLEND_FUNCS: dict[BlendMode, tuple[int, int]] = {
    BlendMode.ALPHA: (gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA),
    BlendMode.ADD: (gl.GL_SRC_ALPHA, gl.GL_ONE),
    BlendMode.MULTIPLY: (gl.GL_DST_COLOR, gl.GL_ZERO),
    BlendMode.NONE: (gl.GL_ONE, gl.GL_ZERO),
}


def _color255(color: ColorRGBA) -> tuple[int, int, int, int]:
    return tuple(int(round(max(0.0, min(1.0, c)) * 255)) for c in color)  # type: ignore[return-value]


def _rotation_deg(transform: Transform) -> float:
    """y 下向き座標での回転角 [deg]（時計回り正）を返す。"""
    m = transform.matrix
    return math.degrees(math.atan2(m[1, 0], m[0, 0]))


def _scale_xy(transform: Transform) -> tuple[float, float]:
    m = transform.matrix
    return (math.hypot(m[0, 0], m[1, 0]), math.hypot(m[0, 1], m[1, 1]))


class PygletContext:
    """1 フレーム分の描画命令を pyglet Batch に積む RenderContext。

    Parameters
    ----------
    height : float
        描画領域の高さ。scene の y 下向き座標を pyglet の y 上向き座標へ反転するのに使う。
    batch : pyglet.graphics.Batch or None, optional
        積む先の Batch。None の場合は新規作成する。

    Notes
    -----
    pyglet の shape は参照が切れると描画対象から外れるため、`draw()` まで `_items` に保持する。
    """

    def __init__(self, height: float, batch: Any = None) -> None:
        self._flip = Transform.from_values(1.0, 0.0, 0.0, 0.0, -1.0, float(height))
        self.batch = batch if batch is not None else pyglet.graphics.Batch()
        self._items: list[Any] = []

    def _screen_points(self, points: Sequence[Vec2], state: RenderState) -> np.ndarray:
        return self._flip.combine(state.transform).transform_points(points)

    def _blend_kwargs(self, state: RenderState) -> dict[str, int]:
        src, dest = _BLEND_FUNCS[state.blend_mode]
        return {"blend_src": src, "blend_dest": dest}

    def _fill_and_outline(self, points: Sequence[Vec2], state: RenderState) -> None:
        screen = self._screen_points(points, state)
        style = state.style
        blend = self._blend_kwargs(state)
        fill = _color255(style.fill_color)
        if fill[3] > 0 and len(screen) >= 3:
            coords = [(float(x), float(y)) for x, y in screen]
            self._items.append(
                pyglet.shapes.Polygon(*coords, color=fill, batch=self.batch, **blend)
            )
        if style.outline_thickness > 0:
            closed = np.concatenate([screen, screen[:1]], axis=0)
            self._add_polyline(closed, _color255(style.outline_color), style.outline_thickness, blend)

    def _add_polyline(
        self,
        screen: np.ndarray,
        color: tuple[int, int, int, int],
        thickness: float,
        blend: dict[str, int],
    ) -> None:
        for (x0, y0), (x1, y1) in zip(screen[:-1], screen[1:]):
            self._items.append(
                pyglet.shapes.Line(
                    float(x0), float(y0), float(x1), float(y1), float(thickness),
                    color=color, batch=self.batch, **blend,
                )
            )

    def draw_rect(self, size: Vec2, state: RenderState) -> None:
        w, h = size
        self._fill_and_outline([(0.0, 0.0), (w, 0.0), (w, h), (0.0, h)], state)

    def draw_circle(self, radius: float, point_count: int, state: RenderState) -> None:
        # 外接矩形の左上を原点とする。
        angles = np.linspace(0.0, 2.0 * math.pi, num=max(int(point_count), 3), endpoint=False)
        points = [(radius + radius * math.cos(a), radius + radius * math.sin(a)) for a in angles]
        self._fill_and_outline(points, state)

    def draw_polygon(self, vertices: Sequence[Vec2], state: RenderState) -> None:
        self._fill_and_outline(vertices, state)

    def draw_triangles(self, vertices: Sequence[Vec2], state: RenderState) -> None:
        screen = self._screen_points(vertices, state)
        color = _color255(state.style.fill_color)
        blend = self._blend_kwargs(state)
        for i in range(0, len(screen) - 2, 3):
            (x0, y0), (x1, y1), (x2, y2) = screen[i : i + 3]
            self._items.append(
                pyglet.shapes.Triangle(
                    float(x0), float(y0), float(x1), float(y1), float(x2), float(y2),
                    color=color, batch=self.batch, **blend,
                )
            )

    def draw_lines(self, segments: Sequence[Segment], state: RenderState) -> None:
        color = _color255(state.style.outline_color)
        blend = self._blend_kwargs(state)
        for a, b in segments:
            screen = self._screen_points([a, b], state)
            self._add_polyline(screen, color, 1.0, blend)

    def draw_text(self, string: str, state: RenderState) -> None:
        ts = state.text_style
        font = ts.font
        font_name = font if isinstance(font, str) or font is None else getattr(font, "name", None)
        x, y = self._flip.combine(state.transform).transform_point((0.0, 0.0))
        label = pyglet.text.Label(
            string,
            font_name=font_name,
            font_size=ts.font_size,
            bold=bool(ts.style & TextStyleFlag.BOLD),
            italic=bool(ts.style & TextStyleFlag.ITALIC),
            color=_color255(state.style.fill_color),
            x=x,
            y=y,
            anchor_x="left",
            anchor_y="top",
            batch=self.batch,
        )
        label.rotation = _rotation_deg(state.transform)
        for key, value in label_styles(ts, _color255(state.style.fill_color)).items():
            label.set_style(key, value)
        self._items.append(label)

    def draw_sprite(self, region: TextureRegion, state: RenderState) -> None:
        rx, ry, rw, rh = region.rect
        texture = region.texture
        # rect は左上原点、pyglet の画像は左下原点。
        image = texture.get_region(int(rx), int(texture.height - ry - rh), int(rw), int(rh))
        image.anchor_x = 0
        image.anchor_y = int(rh)
        x, y = self._flip.combine(state.transform).transform_point((0.0, 0.0))
        src, dest = _BLEND_FUNCS[state.blend_mode]
        sprite = pyglet.sprite.Sprite(image, x=x, y=y, blend_src=src, blend_dest=dest, batch=self.batch)
        sprite.rotation = _rotation_deg(state.transform)
        sprite.scale_x, sprite.scale_y = _scale_xy(state.transform)
        self._items.append(sprite)

    def draw(self) -> None:
        """積んだ描画命令を実行する。"""
        _logger.debug("PygletContext.draw: items=%d", len(self._items))
        self.batch.draw()

    def release(self) -> None:
        for item in self._items:
            delete = getattr(item, "delete", None)
            if callable(delete):
                delete()
        self._items.clear()


__all__ = ["PygletContext"]
