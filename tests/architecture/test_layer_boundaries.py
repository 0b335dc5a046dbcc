"""依存境界（core は interactive / pyglet に依存しない）の破りを検出するテスト。"""

from __future__ import annotations

import ast
from pathlib import Path


def _repo_root() -> Path:
    path = Path(__file__).resolve()
    for parent in path.parents:
        if (parent / "src").is_dir() and (parent / "tests").is_dir():
            return parent
    raise RuntimeError("repo root が見つからない")


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module is not None and not node.level:
            modules.add(node.module)
    return modules


def _assert_no_forbidden_imports(root: Path, forbidden_prefixes: tuple[str, ...]) -> None:
    repo_root = _repo_root()
    violations: list[str] = []
    for path in sorted(root.rglob("*.py")):
        bad = sorted(m for m in _imported_modules(path) if m.startswith(forbidden_prefixes))
        if bad:
            violations.append(f"{path.relative_to(repo_root)}: {', '.join(bad)}")
    if violations:
        joined = "\n".join(violations)
        raise AssertionError(f"依存境界違反の import を検出:\n{joined}")


def test_core_does_not_depend_on_interactive_or_pyglet() -> None:
    root = _repo_root()
    _assert_no_forbidden_imports(
        root / "src" / "frameweave" / "core",
        ("frameweave.interactive", "frameweave.api", "pyglet"),
    )


def test_facades_do_not_import_pyglet_eagerly() -> None:
    root = _repo_root() / "src" / "frameweave" / "api"
    for name in ("__init__.py", "animations.py", "canvas.py", "widgets.py"):
        modules = _imported_modules(root / name)
        assert not any(m.startswith(("pyglet", "frameweave.interactive")) for m in modules), name
