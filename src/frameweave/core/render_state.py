"""
どこで: `src/frameweave/core/render_state.py`。
何を: canvas item が描画時に継承する RenderState（塗り/線/文字スタイル/累積変換/ブレンド）を定義する。
なぜ: 状態を不変値にして、modifier の適用が常に「コピーへの変更」になるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntFlag
from typing import Any, Sequence

from frameweave.core.transform import Transform

ColorRGBA = tuple[float, float, float, float]


def rgba(*components: Any) -> ColorRGBA:
    """RGB(A) を [0, 1] の RGBA タプルへ正規化する。

    `rgba(1, 0, 0)` / `rgba(1, 0, 0, 0.5)` / `rgba((1, 0, 0))` のいずれも受け付ける。
    alpha 省略時は 1.0。

    Raises
    ------
    ValueError
        成分数が 3 または 4 でない場合。
    """
    if len(components) == 1 and isinstance(components[0], Sequence):
        components = tuple(components[0])
    if len(components) == 3:
        r, g, b = components
        a = 1.0
    elif len(components) == 4:
        r, g, b, a = components
    else:
        raise ValueError(f"色は RGB または RGBA である必要がある: got={components!r}")
    return (float(r), float(g), float(b), float(a))


BLACK: ColorRGBA = (0.0, 0.0, 0.0, 1.0)
WHITE: ColorRGBA = (1.0, 1.0, 1.0, 1.0)
RED: ColorRGBA = (1.0, 0.0, 0.0, 1.0)
GREEN: ColorRGBA = (0.0, 1.0, 0.0, 1.0)
BLUE: ColorRGBA = (0.0, 0.0, 1.0, 1.0)
YELLOW: ColorRGBA = (1.0, 1.0, 0.0, 1.0)
MAGENTA: ColorRGBA = (1.0, 0.0, 1.0, 1.0)
CYAN: ColorRGBA = (0.0, 1.0, 1.0, 1.0)
TRANSPARENT: ColorRGBA = (0.0, 0.0, 0.0, 0.0)


class TextStyleFlag(IntFlag):
    """文字装飾フラグ（OR で組み合わせる）。"""

    REGULAR = 0
    BOLD = 1
    ITALIC = 2
    UNDERLINED = 4
    STRIKETHROUGH = 8


class BlendMode(Enum):
    """描画時の合成モード。"""

    ALPHA = "alpha"
    ADD = "add"
    MULTIPLY = "multiply"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class Style:
    """塗り色・線色・線幅。"""

    fill_color: ColorRGBA = BLACK
    outline_color: ColorRGBA = WHITE
    outline_thickness: float = 1.0


@dataclass(frozen=True, slots=True)
class TextStyle:
    """文字描画のスタイル。

    Notes
    -----
    font は外部ローダが供給するハンドル（借用参照）で、core は中身を解釈しない。
    """

    font: Any = None
    font_size: int = 16
    letter_spacing: float = 1.0
    line_spacing: float = 1.0
    style: TextStyleFlag = TextStyleFlag.REGULAR


@dataclass(frozen=True, slots=True)
class RenderState:
    """canvas item に継承される描画状態。

    Parameters
    ----------
    style : Style
        塗り/線スタイル。
    text_style : TextStyle
        文字スタイル。
    transform : Transform
        ルートからの累積アフィン変換。
    blend_mode : BlendMode
        合成モード。

    Notes
    -----
    不変値として扱い、変更は `dataclasses.replace` による新インスタンス生成で表す。
    兄弟ノード間で状態が漏れないことはこの不変性で保証する。
    """

    style: Style = field(default_factory=Style)
    text_style: TextStyle = field(default_factory=TextStyle)
    transform: Transform = field(default_factory=Transform.identity)
    blend_mode: BlendMode = BlendMode.ALPHA

    def with_style(self, **changes: Any) -> "RenderState":
        return replace(self, style=replace(self.style, **changes))

    def with_text_style(self, **changes: Any) -> "RenderState":
        return replace(self, text_style=replace(self.text_style, **changes))

    def with_transform(self, transform: Transform) -> "RenderState":
        return replace(self, transform=transform)

    def with_blend_mode(self, blend_mode: BlendMode) -> "RenderState":
        return replace(self, blend_mode=blend_mode)


__all__ = [
    "BLACK",
    "BLUE",
    "BlendMode",
    "CYAN",
    "ColorRGBA",
    "GREEN",
    "MAGENTA",
    "RED",
    "RenderState",
    "Style",
    "TRANSPARENT",
    "TextStyle",
    "TextStyleFlag",
    "WHITE",
    "YELLOW",
    "rgba",
]
