# どこで: `src/frameweave/api/animations.py`。
# 何を: アニメーションを組み立てる公開名前空間 A を提供する。
# なぜ: `A.gradual(...)` / `A.ease.quad_in` のように 1 つの入口から combinator とイージングを引けるようにするため。

from __future__ import annotations

from typing import Any

from frameweave.core import animation as _animation
from frameweave.core import ease as _ease


class AnimationNamespace:
    """アニメーション combinator の名前空間。

    Attributes
    ----------
    constant, gradual, sequence, repeat, reverse, ping_pong, slice, rescale : Callable
        `frameweave.core.animation` の同名関数。
    lerp : Callable
        線形補間 `lerp(ratio, a, b)`。
    ease : module
        イージング関数群。`A.ease.quad_in` / `A.ease.get("quad_in")`。
    """

    constant = staticmethod(_animation.constant)
    gradual = staticmethod(_animation.gradual)
    sequence = staticmethod(_animation.sequence)
    repeat = staticmethod(_animation.repeat)
    reverse = staticmethod(_animation.reverse)
    ping_pong = staticmethod(_animation.ping_pong)
    slice = staticmethod(_animation.slice)
    rescale = staticmethod(_animation.rescale)
    lerp = staticmethod(_animation.lerp)
    wrap = staticmethod(_animation.wrap)
    ease = _ease
    Animation = _animation.Animation

    def __getattr__(self, name: str) -> Any:
        """`A.quad_in` のようなイージング名の短縮参照を解決する。"""
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return _ease.get(name)
        except KeyError:
            raise AttributeError(f"未登録の animation / ease: {name!r}") from None


A = AnimationNamespace()
"""アニメーションを組み立てる公開名前空間。"""

__all__ = ["A", "AnimationNamespace"]
