# どこで: `src/frameweave/api/widgets.py`。
# 何を: Widget の factory と modifier を提供する公開名前空間 W を提供する。
# なぜ: 「複製してから書き換える」オブジェクト版の描画経路を canvas 版と同じ書き味で使えるようにするため。

from __future__ import annotations

from typing import Any

from frameweave.core import widget as _widget


class WidgetNamespace:
    """Widget の factory / modifier / applier の名前空間。

    Notes
    -----
    `W.text("hi")` は factory、文字列を差し替える modifier は `W.set_text("hi")`。
    `W.all(m1, m2, ...)` は modifier を左から順に連結する。
    """

    # factory
    rect = staticmethod(_widget.rect)
    circle = staticmethod(_widget.circle)
    polygon = staticmethod(_widget.polygon)
    sprite = staticmethod(_widget.sprite)
    text = staticmethod(_widget.text)

    # modifier
    modify = staticmethod(_widget.modify)
    position = staticmethod(_widget.position)
    move = staticmethod(_widget.move)
    scale = staticmethod(_widget.scale)
    rotate = staticmethod(_widget.rotate)
    origin = staticmethod(_widget.origin)
    fill = staticmethod(_widget.fill)
    outline = staticmethod(_widget.outline)
    outline_thickness = staticmethod(_widget.outline_thickness)
    texture = staticmethod(_widget.texture)
    set_text = staticmethod(_widget.set_text)
    font = staticmethod(_widget.font)
    font_size = staticmethod(_widget.font_size)
    letter_spacing = staticmethod(_widget.letter_spacing)
    line_spacing = staticmethod(_widget.line_spacing)
    bold = staticmethod(_widget.bold)
    italic = staticmethod(_widget.italic)
    underlined = staticmethod(_widget.underlined)
    all = staticmethod(_widget.all_of)  # noqa: A003

    # applier
    keep = staticmethod(_widget.keep)
    set_value = staticmethod(_widget.set_value)

    Widget = _widget.Widget
    WidgetModifier = _widget.WidgetModifier

    @staticmethod
    def identity() -> Any:
        return _widget.WidgetModifier.identity()


W = WidgetNamespace()
"""Widget を生成・変更する公開名前空間。"""

__all__ = ["W", "WidgetNamespace"]
