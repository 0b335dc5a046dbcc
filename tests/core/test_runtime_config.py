from pathlib import Path

import pytest

from frameweave.core.runtime_config import config_path_from_text, runtime_config, set_config_path


@pytest.fixture(autouse=True)
def _reset_runtime_config() -> None:
    set_config_path(None)
    yield
    set_config_path(None)


def _isolate_config_discovery(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_packaged_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    cfg = runtime_config()
    assert cfg.config_path is None
    assert cfg.window_size == (800, 600)
    assert cfg.window_caption == "frameweave"
    assert cfg.fps == 60.0
    assert cfg.background_color == (0.0, 0.0, 0.0)
    assert cfg.frame_duration == pytest.approx(0.01)
    assert cfg.log_level == "INFO"


def test_discovered_config_overrides_packaged_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    discovered = _write(
        tmp_path / ".frameweave" / "config.yaml",
        "window:\n  size: [320, 240]\n  fps: 30\n",
    )

    cfg = runtime_config()
    assert cfg.config_path == discovered
    assert cfg.window_size == (320, 240)
    assert cfg.fps == 30.0
    # 同じセクションの未指定キーは既定値のまま。
    assert cfg.window_caption == "frameweave"


def test_home_config_is_discovered(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    home_cfg = _write(
        tmp_path / ".config" / "frameweave" / "config.yaml",
        "timing:\n  frame_duration: 0.02\n",
    )

    cfg = runtime_config()
    assert cfg.config_path == home_cfg
    assert cfg.frame_duration == pytest.approx(0.02)


def test_explicit_config_overrides_discovered_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    _write(tmp_path / ".frameweave" / "config.yaml", 'window:\n  caption: "discovered"\n  fps: 30\n')
    explicit = _write(tmp_path / "explicit.yaml", 'window:\n  caption: "explicit"\nlogging:\n  level: debug\n')
    set_config_path(explicit)

    cfg = runtime_config()
    assert cfg.config_path == explicit
    assert cfg.window_caption == "explicit"
    assert cfg.fps == 30.0
    assert cfg.log_level == "DEBUG"


def test_runtime_config_is_cached_until_path_changes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    first = runtime_config()
    assert runtime_config() is first

    explicit = _write(tmp_path / "explicit.yaml", "window:\n  fps: 24\n")
    set_config_path(explicit)
    assert runtime_config().fps == 24.0


def test_explicit_config_path_missing_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(tmp_path / "missing.yaml")

    with pytest.raises(FileNotFoundError):
        runtime_config()


def test_malformed_yaml_raises_runtime_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(_write(tmp_path / "bad.yaml", "window: [unclosed\n"))

    with pytest.raises(RuntimeError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "version: 2\n",
        "window:\n  size: [1, 2, 3]\n",
        "window:\n  background: red\n",
        "logging:\n  level: LOUD\n",
        "- just\n- a list\n",
    ],
)
def test_invalid_values_raise_runtime_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, text: str):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(_write(tmp_path / "invalid.yaml", text))

    with pytest.raises(RuntimeError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "window:\n  fps: 0\n",
        "window:\n  size: [0, 100]\n",
        "timing:\n  frame_duration: -0.5\n",
    ],
)
def test_non_positive_values_raise_value_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, text: str):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(_write(tmp_path / "range.yaml", text))

    with pytest.raises(ValueError):
        runtime_config()


def test_config_path_from_text_expands_user_and_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("FW_CFG_DIR", "cfgs")

    assert config_path_from_text(None) is None
    assert config_path_from_text("  ") is None
    assert config_path_from_text("~/$FW_CFG_DIR/a.yaml") == tmp_path / "cfgs" / "a.yaml"
