# どこで: `src/frameweave/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: ウィンドウや固定タイムステップをコード外から調整できるようにするため。

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

_logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """frameweave の実行時設定。"""

    config_path: Path | None
    window_size: tuple[int, int]
    window_caption: str
    fps: float
    background_color: tuple[float, float, float]
    frame_duration: float
    log_level: str


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".frameweave" / "config.yaml",
        home / ".config" / "frameweave" / "config.yaml",
    )


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_int_pair(value: Any, *, key: str) -> tuple[int, int]:
    try:
        seq = list(value)
    except TypeError as exc:
        raise RuntimeError(f"{key} は [w, h] の配列である必要があります: got={value!r}") from exc
    if len(seq) != 2:
        raise RuntimeError(f"{key} は [w, h] の配列である必要があります: got={value!r}")
    try:
        return (int(seq[0]), int(seq[1]))
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は [w, h] の整数配列である必要があります: got={value!r}") from exc


def _as_rgb(value: Any, *, key: str) -> tuple[float, float, float]:
    try:
        seq = [float(v) for v in value]
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は [r, g, b] の数値配列である必要があります: got={value!r}") from exc
    if len(seq) != 3:
        raise RuntimeError(f"{key} は [r, g, b] の数値配列である必要があります: got={value!r}")
    return (seq[0], seq[1], seq[2])


def _as_positive_float(value: Any, *, key: str) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc
    if v <= 0:
        raise ValueError(f"{key} は正の値である必要があります: got={v}")
    return v


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    blob = (
        resources.files("frameweave")
        .joinpath("resource", "default_config.yaml")
        .read_text(encoding="utf-8")
    )
    return _load_yaml_text(blob, source="frameweave/resource/default_config.yaml")


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """セクション（mapping）単位で浅くマージする。"""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.frameweave/config.yaml` / `~/.config/frameweave/config.yaml`（先に見つかった方）
    3) `set_config_path()` / `run(..., config_path=...)` の明示パス
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        _logger.debug("config を読み込みます: %s", discovered_path)
        payload = _merge(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        _logger.debug("config を読み込みます: %s", explicit_path)
        payload = _merge(payload, _load_yaml_config(explicit_path))

    version = payload.get("version")
    if version is None:
        raise RuntimeError("config.yaml の version が未設定です")
    try:
        version_i = int(version)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    window = _as_mapping(payload.get("window"), key="window")
    window_size = _as_int_pair(window.get("size"), key="window.size")
    if window_size[0] <= 0 or window_size[1] <= 0:
        raise ValueError(f"window.size は正の値である必要があります: got={window_size}")
    caption = str(window.get("caption", "frameweave"))
    fps = _as_positive_float(window.get("fps"), key="window.fps")
    background = _as_rgb(window.get("background"), key="window.background")

    timing = _as_mapping(payload.get("timing"), key="timing")
    frame_duration = _as_positive_float(timing.get("frame_duration"), key="timing.frame_duration")

    logging_section = _as_mapping(payload.get("logging"), key="logging")
    log_level = str(logging_section.get("level", "INFO")).upper()
    if log_level not in _LOG_LEVELS:
        raise RuntimeError(f"logging.level が不正です: got={log_level!r}")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        window_size=window_size,
        window_caption=caption,
        fps=fps,
        background_color=background,
        frame_duration=frame_duration,
        log_level=log_level,
    )
    _CONFIG_CACHE = cfg
    return cfg


def _expand_path_text(text: str) -> str:
    return os.path.expandvars(os.path.expanduser(str(text)))


def config_path_from_text(text: str | None) -> Path | None:
    """`~` と環境変数を展開したパスを返す（空文字は None）。"""
    if text is None:
        return None
    s = str(text).strip()
    if not s:
        return None
    return Path(_expand_path_text(s))


__all__ = ["RuntimeConfig", "config_path_from_text", "runtime_config", "set_config_path"]
