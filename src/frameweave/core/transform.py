# どこで: `src/frameweave/core/transform.py`。
# 何を: 2D アフィン変換（3x3 行列）の不変値オブジェクトを定義する。
# なぜ: RenderState に累積変換を保持し、コピー意味論のまま合成できるようにするため。

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from frameweave.core.vec import Vec2, as_vec2


@dataclass(frozen=True, slots=True, eq=False)
class Transform:
    """3x3 同次座標のアフィン変換。

    Parameters
    ----------
    matrix : np.ndarray
        float64 型 shape (3, 3) の行列。最終行は (0, 0, 1)。

    Notes
    -----
    不変性を契約とし、行列は writeable=False で保持する。
    `translate` / `scale` / `rotate` は右から合成する（``M' = M @ X``）。
    したがって後から積んだ変換ほど点に先に作用する。
    """

    matrix: np.ndarray

    def __post_init__(self) -> None:
        m = np.array(self.matrix, dtype=np.float64)
        if m.shape != (3, 3):
            raise ValueError(f"Transform は shape (3,3) である必要がある: got={m.shape}")
        m.setflags(write=False)
        object.__setattr__(self, "matrix", m)

    @classmethod
    def identity(cls) -> "Transform":
        return cls(np.eye(3, dtype=np.float64))

    @classmethod
    def from_values(cls, a: float, b: float, c: float, d: float, e: float, f: float) -> "Transform":
        """行優先の 2x3 成分 ``[[a, b, c], [d, e, f]]`` から生成する。"""
        return cls(np.array([[a, b, c], [d, e, f], [0.0, 0.0, 1.0]], dtype=np.float64))

    def combine(self, other: "Transform") -> "Transform":
        return Transform(self.matrix @ other.matrix)

    def translate(self, offset: Any) -> "Transform":
        dx, dy = as_vec2(offset)
        return self.combine(Transform.from_values(1.0, 0.0, dx, 0.0, 1.0, dy))

    def scale(self, factor: Any) -> "Transform":
        sx, sy = as_vec2(factor)
        return self.combine(Transform.from_values(sx, 0.0, 0.0, 0.0, sy, 0.0))

    def rotate(self, angle: float) -> "Transform":
        """原点まわりに angle [deg] 回転する（y 下向き座標で時計回り）。"""
        rad = math.radians(float(angle))
        c, s = math.cos(rad), math.sin(rad)
        return self.combine(Transform.from_values(c, -s, 0.0, s, c, 0.0))

    def inverse(self) -> "Transform":
        return Transform(np.linalg.inv(self.matrix))

    def transform_point(self, point: Sequence[float]) -> Vec2:
        x, y = as_vec2(point)
        m = self.matrix
        return (
            float(m[0, 0] * x + m[0, 1] * y + m[0, 2]),
            float(m[1, 0] * x + m[1, 1] * y + m[1, 2]),
        )

    def transform_points(self, points: Any) -> np.ndarray:
        """shape (N, 2) の点列を変換して float64 (N, 2) を返す。"""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        return pts @ self.matrix[:2, :2].T + self.matrix[:2, 2]

    def __matmul__(self, other: object) -> "Transform":
        if not isinstance(other, Transform):
            return NotImplemented
        return self.combine(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.array_equal(self.matrix, other.matrix))

    def __hash__(self) -> int:
        return hash(self.matrix.tobytes())

    def __repr__(self) -> str:
        m = self.matrix
        return (
            f"Transform(({m[0, 0]:g}, {m[0, 1]:g}, {m[0, 2]:g}), "
            f"({m[1, 0]:g}, {m[1, 1]:g}, {m[1, 2]:g}))"
        )


IDENTITY = Transform.identity()

__all__ = ["IDENTITY", "Transform"]
