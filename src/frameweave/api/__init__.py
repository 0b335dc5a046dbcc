# どこで: `src/frameweave/api/__init__.py`。
# 何を: 公開 API パッケージのエントリポイントとして A/C/W/run と、ユーザー定義登録用の primitive/modifier を再エクスポートする。
# なぜ: ユーザーコードからシンプルに API を import できるようにするため。

from __future__ import annotations

from .animations import A
from .canvas import C
from .widgets import W
from frameweave.core.modifier_registry import modifier
from frameweave.core.primitive_registry import primitive

__all__ = ["A", "C", "W", "modifier", "primitive", "run"]


def run(*args, **kwargs):
    """公開 run API へのラッパ（遅延インポートで pyglet 依存を後回しにする）。"""

    from .runner import run as _run

    return _run(*args, **kwargs)
