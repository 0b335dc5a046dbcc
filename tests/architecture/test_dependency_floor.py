"""pyproject.toml の依存下限が利用している API に足りているかのテスト。"""

from __future__ import annotations

import re
from pathlib import Path


def _pyproject_text() -> str:
    for parent in Path(__file__).resolve().parents:
        candidate = parent / "pyproject.toml"
        if candidate.is_file():
            return candidate.read_text(encoding="utf-8")
    raise RuntimeError("pyproject.toml が見つからない")


def test_pyglet_floor_supports_shape_blend_arguments() -> None:
    # shapes の blend_src / blend_dest は 2.0.18 系で使える。
    match = re.search(r'"pyglet>=([0-9.]+)"', _pyproject_text())
    assert match is not None
    floor = tuple(int(part) for part in match.group(1).split("."))
    assert floor >= (2, 0, 18)
