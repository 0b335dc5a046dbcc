# どこで: `src/frameweave/__init__.py`。
# 何を: ルート `frameweave` パッケージを定義する。
# なぜ: import 起点を `frameweave` に統一するため。

from __future__ import annotations

from frameweave.api import A, C, W, modifier, primitive, run

__all__ = ["A", "C", "W", "modifier", "primitive", "run"]
