# どこで: `src/frameweave/interactive/label_style.py`。
# 何を: TextStyle を pyglet Label の document style（`Label.set_style` のキー）へ写像する。
# なぜ: pyglet を import せずに写像規則だけを検証できるようにするため。

from __future__ import annotations

from typing import Any

from frameweave.core.render_state import TextStyle, TextStyleFlag

# 字間係数 1.0 を「通常」とし、(係数 - 1) * font_size / 12 を追加字間とする。
_LETTER_SPACING_UNIT = 1.0 / 12.0
# 行間係数 1.0 の行送り（font_size 比）。
_LINE_HEIGHT_RATIO = 1.2


def label_styles(text_style: TextStyle, color: tuple[int, int, int, int]) -> dict[str, Any]:
    """Label へ適用する document style を返す。

    Parameters
    ----------
    text_style : TextStyle
        描画時の文字スタイル。
    color : tuple[int, int, int, int]
        下線色に使う 0..255 の RGBA。

    Returns
    -------
    dict[str, Any]
        `kerning` / `line_spacing` / `underline` のうち既定値から変わるものだけ。
        係数がどちらも 1.0 で下線なしなら空 dict。
    """

    size = float(text_style.font_size)
    styles: dict[str, Any] = {}
    if text_style.letter_spacing != 1.0:
        styles["kerning"] = (float(text_style.letter_spacing) - 1.0) * size * _LETTER_SPACING_UNIT
    if text_style.line_spacing != 1.0:
        styles["line_spacing"] = float(text_style.line_spacing) * size * _LINE_HEIGHT_RATIO
    if text_style.style & TextStyleFlag.UNDERLINED:
        styles["underline"] = color
    return styles


__all__ = ["label_styles"]
