"""
どこで: `src/frameweave/core/widget.py`。
何を: オブジェクト指向版の描画要素（Widget）と、applier を介した property 変更（WidgetModifier）を定義する。
なぜ: 関数型の canvas item とは別に「複製してから内部を書き換える」描画経路を提供するため。
"""

from __future__ import annotations

from dataclasses import dataclass
from types import NotImplementedType
from typing import Any, Callable, ClassVar, Sequence, TypeVar

from frameweave.core.context import RenderContext, TextureRegion
from frameweave.core.render_state import WHITE, RenderState, Style, TextStyle, TextStyleFlag, rgba
from frameweave.core.transform import Transform
from frameweave.core.vec import Vec2, add, as_vec2, neg

V = TypeVar("V")
Applier = Callable[[Any], Any]


def keep(value: V) -> V:
    """現在値をそのまま返す applier（property を変更しない）。"""
    return value


def set_value(value: Any) -> Applier:
    """現在値を value で上書きする applier を返す。"""

    def applier(_current: Any) -> Any:
        return value

    return applier


_GEOMETRY_PROPERTIES = ("position", "scale", "rotation", "origin")
_STYLE_PROPERTIES = ("fill_color", "outline_color", "outline_thickness")
_TEXT_PROPERTIES = ("text", "font", "font_size", "letter_spacing", "line_spacing", "font_style")

_DEFAULTS: dict[str, Any] = {
    "position": (0.0, 0.0),
    "scale": (1.0, 1.0),
    "rotation": 0.0,
    "origin": (0.0, 0.0),
    "fill_color": WHITE,
    "outline_color": WHITE,
    "outline_thickness": 0.0,
    "texture": None,
    "text": "",
    "font": None,
    "font_size": 30,
    "letter_spacing": 1.0,
    "line_spacing": 1.0,
    "font_style": TextStyleFlag.REGULAR,
}


class WidgetImpl:
    """Widget が排他的に所有する具象描画オブジェクトの基底。

    Notes
    -----
    property は `_props` に保持し、`_set` でのみ書き換える。
    `_set` は Widget の複製境界（`Widget.__or__`）からのみ呼ばれる。
    対応しない property への applier は無視する。
    """

    properties: ClassVar[tuple[str, ...]] = ()

    def __init__(self, **props: Any) -> None:
        self._props: dict[str, Any] = {name: _DEFAULTS[name] for name in self.properties}
        for name, value in props.items():
            self._set(name, set_value(value))

    def clone(self) -> "WidgetImpl":
        """所有する property を複製した新しいインスタンスを返す。

        font / texture のハンドルは借用参照なので複製せずに共有する。
        """
        other = object.__new__(type(self))
        other.__dict__.update(self.__dict__)
        other._props = dict(self._props)
        return other

    def get(self, name: str) -> Any:
        """property の現在値を返す。

        Raises
        ------
        KeyError
            この widget が持たない property の場合。
        """
        return self._props[name]

    def supports(self, name: str) -> bool:
        return name in self._props

    def _set(self, name: str, applier: Applier) -> None:
        if name not in self._props:
            return
        self._props[name] = applier(self._props[name])

    def local_transform(self) -> Transform:
        """`T(position) R(rotation) S(scale) T(-origin)` を返す。"""
        p = self._props
        return (
            Transform.identity()
            .translate(p["position"])
            .rotate(p["rotation"])
            .scale(p["scale"])
            .translate(neg(p["origin"]))
        )

    def draw(self, ctx: RenderContext, transform: Transform) -> None:
        raise NotImplementedError

    def _style(self) -> Style:
        p = self._props
        return Style(
            fill_color=rgba(p["fill_color"]),
            outline_color=rgba(p["outline_color"]),
            outline_thickness=float(p["outline_thickness"]),
        )


class ShapeWidget(WidgetImpl):
    """矩形・円・多角形の widget。"""

    properties = _GEOMETRY_PROPERTIES + _STYLE_PROPERTIES

    def __init__(self, shape: str, geometry: dict[str, Any], **props: Any) -> None:
        self.shape = shape
        self.geometry = dict(geometry)
        super().__init__(**props)

    def clone(self) -> "WidgetImpl":
        other = super().clone()
        other.geometry = dict(self.geometry)  # type: ignore[attr-defined]
        return other

    def draw(self, ctx: RenderContext, transform: Transform) -> None:
        state = RenderState(style=self._style(), transform=transform.combine(self.local_transform()))
        if self.shape == "rect":
            ctx.draw_rect(self.geometry["size"], state)
        elif self.shape == "circle":
            ctx.draw_circle(self.geometry["radius"], self.geometry["point_count"], state)
        elif self.shape == "polygon":
            ctx.draw_polygon(self.geometry["vertices"], state)
        else:
            raise ValueError(f"未対応の shape: {self.shape!r}")


class SpriteWidget(WidgetImpl):
    """テクスチャ領域を描く widget。texture 未設定なら何も描かない。"""

    properties = _GEOMETRY_PROPERTIES + ("texture",)

    def draw(self, ctx: RenderContext, transform: Transform) -> None:
        region = self._props["texture"]
        if region is None:
            return
        ctx.draw_sprite(region, RenderState(transform=transform.combine(self.local_transform())))


class TextWidget(WidgetImpl):
    """文字列を描く widget。"""

    properties = _GEOMETRY_PROPERTIES + _STYLE_PROPERTIES + _TEXT_PROPERTIES

    def draw(self, ctx: RenderContext, transform: Transform) -> None:
        p = self._props
        text_style = TextStyle(
            font=p["font"],
            font_size=int(p["font_size"]),
            letter_spacing=float(p["letter_spacing"]),
            line_spacing=float(p["line_spacing"]),
            style=TextStyleFlag(p["font_style"]),
        )
        state = RenderState(
            style=self._style(),
            text_style=text_style,
            transform=transform.combine(self.local_transform()),
        )
        ctx.draw_text(str(p["text"]), state)


@dataclass(frozen=True, slots=True)
class WidgetModifier:
    """(property 名, applier) の列。`m1 | m2` で連結し、左から順に適用する。"""

    steps: tuple[tuple[str, Applier], ...] = ()

    @classmethod
    def identity(cls) -> "WidgetModifier":
        return cls(())

    def __or__(self, other: object) -> "WidgetModifier | NotImplementedType":
        if not isinstance(other, WidgetModifier):
            return NotImplemented
        return WidgetModifier(self.steps + other.steps)

    def _apply_to(self, impl: WidgetImpl) -> None:
        for name, applier in self.steps:
            impl._set(name, applier)


class Widget:
    """1 つの WidgetImpl を排他的に所有する値オブジェクト。

    Notes
    -----
    `widget | modifier` は複製に modifier を適用したものを返し、元の widget は変更しない。
    コピー（`copy.copy` / `copy.deepcopy`）も `clone()` と同じく impl を複製する。
    """

    __slots__ = ("_impl",)

    def __init__(self, impl: WidgetImpl) -> None:
        self._impl = impl

    @property
    def kind(self) -> str:
        return type(self._impl).__name__

    def clone(self) -> "Widget":
        return Widget(self._impl.clone())

    def __copy__(self) -> "Widget":
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> "Widget":
        return self.clone()

    def get(self, name: str) -> Any:
        """property の現在値を返す（読み出し専用）。"""
        return self._impl.get(name)

    def supports(self, name: str) -> bool:
        return self._impl.supports(name)

    def draw(self, ctx: RenderContext, transform: Transform | None = None) -> None:
        """親変換 transform（既定は恒等）の下で 1 回描画する。"""
        self._impl.draw(ctx, transform if transform is not None else Transform.identity())

    def __call__(self, ctx: RenderContext) -> None:
        self.draw(ctx)

    def __or__(self, other: object) -> "Widget | NotImplementedType":
        if not isinstance(other, WidgetModifier):
            return NotImplemented
        result = self.clone()
        other._apply_to(result._impl)
        return result


# --- factory -----------------------------------------------------------------


def rect(width: float, height: float) -> Widget:
    return Widget(ShapeWidget("rect", {"size": (float(width), float(height))}))


def circle(radius: float, point_count: int = 30) -> Widget:
    return Widget(ShapeWidget("circle", {"radius": float(radius), "point_count": int(point_count)}))


def polygon(vertices: Sequence[Any]) -> Widget:
    return Widget(ShapeWidget("polygon", {"vertices": tuple(as_vec2(v) for v in vertices)}))


def sprite(region: TextureRegion | None = None) -> Widget:
    return Widget(SpriteWidget(texture=region))


def text(string: str, font: Any = None, size: int = 30) -> Widget:
    return Widget(TextWidget(text=str(string), font=font, font_size=int(size)))


# --- modifier ----------------------------------------------------------------


def modify(name: str, applier: Applier) -> WidgetModifier:
    """任意の property に applier を適用する modifier を返す。"""
    return WidgetModifier(((name, applier),))


def position(p: Any) -> WidgetModifier:
    return modify("position", set_value(as_vec2(p)))


def move(delta: Any) -> WidgetModifier:
    """現在位置に delta を足す。"""
    d = as_vec2(delta)

    def applier(current: Vec2) -> Vec2:
        return add(current, d)

    return modify("position", applier)


def scale(factor: Any) -> WidgetModifier:
    return modify("scale", set_value(as_vec2(factor)))


def rotate(angle: float) -> WidgetModifier:
    return modify("rotation", set_value(float(angle)))


def origin(p: Any) -> WidgetModifier:
    return modify("origin", set_value(as_vec2(p)))


def fill(color: Any) -> WidgetModifier:
    return modify("fill_color", set_value(rgba(color)))


def outline(color: Any) -> WidgetModifier:
    return modify("outline_color", set_value(rgba(color)))


def outline_thickness(value: float) -> WidgetModifier:
    return modify("outline_thickness", set_value(float(value)))


def texture(region: TextureRegion | None) -> WidgetModifier:
    return modify("texture", set_value(region))


def set_text(string: str) -> WidgetModifier:
    return modify("text", set_value(str(string)))


def font(handle: Any) -> WidgetModifier:
    return modify("font", set_value(handle))


def font_size(size: int) -> WidgetModifier:
    return modify("font_size", set_value(int(size)))


def letter_spacing(value: float) -> WidgetModifier:
    return modify("letter_spacing", set_value(float(value)))


def line_spacing(value: float) -> WidgetModifier:
    return modify("line_spacing", set_value(float(value)))


def _add_style_flag(flag: TextStyleFlag) -> WidgetModifier:
    def applier(current: TextStyleFlag) -> TextStyleFlag:
        return TextStyleFlag(current) | flag

    return modify("font_style", applier)


def bold() -> WidgetModifier:
    return _add_style_flag(TextStyleFlag.BOLD)


def italic() -> WidgetModifier:
    return _add_style_flag(TextStyleFlag.ITALIC)


def underlined() -> WidgetModifier:
    return _add_style_flag(TextStyleFlag.UNDERLINED)


def all_of(*modifiers: WidgetModifier) -> WidgetModifier:
    """modifiers を左から順に連結する。"""
    result = WidgetModifier.identity()
    for m in modifiers:
        result = result | m
    return result


__all__ = [
    "Applier",
    "ShapeWidget",
    "SpriteWidget",
    "TextWidget",
    "Widget",
    "WidgetImpl",
    "WidgetModifier",
    "all_of",
    "bold",
    "circle",
    "fill",
    "font",
    "font_size",
    "italic",
    "keep",
    "letter_spacing",
    "line_spacing",
    "modify",
    "move",
    "origin",
    "outline",
    "outline_thickness",
    "polygon",
    "position",
    "rect",
    "rotate",
    "scale",
    "set_text",
    "set_value",
    "sprite",
    "text",
    "texture",
    "underlined",
]
