from __future__ import annotations

import math
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from svgtransform.TransformCommand import TransformCommand
from svgtransform.TransformConstants import DEFAULT_SINGULAR_EPSILON
from svgtransform.TransformErrors import SingularMatrix
from svgtransform.TransformType import TransformType


class Affine2D:
    """2D affine transform: 3x3 homogeneous matrix.

    Stored as numpy array with shape (3,3). Points are column vectors [x,y,1]^T,
    so `A @ B` applies B first, then A.
    """

    def __init__(self, m: Optional[np.ndarray] = None):
        if m is None:
            self.m = np.eye(3, dtype=float)
        else:
            self.m = np.array(m, dtype=float).reshape(3, 3)

    def __matmul__(self, other: "Affine2D") -> "Affine2D":
        return Affine2D(self.m @ other.m)

    def __repr__(self) -> str:
        return f"Affine2D({self.to_rows()!r})"

    def to_rows(self) -> List[List[float]]:
        return self.m.tolist()

    def almost_equal(self, other: "Affine2D", tol: float = 1e-9) -> bool:
        return bool(np.allclose(self.m, other.m, atol=tol))

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        v = np.array([x, y, 1.0], dtype=float)
        res = self.m @ v
        return (float(res[0]), float(res[1]))

    def apply_many(self, pts: np.ndarray) -> np.ndarray:
        """Map an (N,2) array of points; returns a new (N,2) array."""
        pts = np.asarray(pts, dtype=float).reshape(-1, 2)
        homog = np.hstack([pts, np.ones((pts.shape[0], 1))])
        return (self.m @ homog.T).T[:, :2]

    def determinant(self) -> float:
        return float(np.linalg.det(self.m))

    def inverse(self, epsilon: float = DEFAULT_SINGULAR_EPSILON) -> "Affine2D":
        det = self.determinant()
        if abs(det) < epsilon:
            raise SingularMatrix(det)
        try:
            return Affine2D(np.linalg.inv(self.m))
        except np.linalg.LinAlgError:
            raise SingularMatrix(det) from None

    def to_svg(self) -> Tuple[float, float, float, float, float, float]:
        """(a, b, c, d, e, f) as written in an SVG matrix(...) transform."""
        m = self.m
        return (float(m[0, 0]), float(m[1, 0]), float(m[0, 1]),
                float(m[1, 1]), float(m[0, 2]), float(m[1, 2]))

    @staticmethod
    def identity() -> "Affine2D":
        return Affine2D()

    @staticmethod
    def translation(tx: float, ty: float = 0.0) -> "Affine2D":
        m = np.eye(3)
        m[0, 2] = tx
        m[1, 2] = ty
        return Affine2D(m)

    @staticmethod
    def scale(sx: float, sy: Optional[float] = None) -> "Affine2D":
        if sy is None:
            sy = sx
        m = np.eye(3)
        m[0, 0] = sx
        m[1, 1] = sy
        return Affine2D(m)

    @staticmethod
    def rotation_deg(angle_deg: float) -> "Affine2D":
        a = math.radians(angle_deg)
        cos_a, sin_a = math.cos(a), math.sin(a)
        return Affine2D(
            [[cos_a, -sin_a, 0.0], [sin_a, cos_a, 0.0], [0, 0, 1]])

    @staticmethod
    def skew_x_deg(angle_deg: float) -> "Affine2D":
        m = np.eye(3)
        m[0, 1] = math.tan(math.radians(angle_deg))
        return Affine2D(m)

    @staticmethod
    def skew_y_deg(angle_deg: float) -> "Affine2D":
        m = np.eye(3)
        m[1, 0] = math.tan(math.radians(angle_deg))
        return Affine2D(m)

    @staticmethod
    def from_svg(a: float, b: float, c: float, d: float, e: float, f: float) -> "Affine2D":
        m = np.array([[a, c, e], [b, d, f], [0, 0, 1]],
                     dtype=float)  # SVG's (a b c d e f)
        return Affine2D(m)

    @staticmethod
    def from_command(cmd: TransformCommand) -> "Affine2D":
        parts = cmd.expand()
        if len(parts) > 1:
            return Affine2D.combine(parts)
        return _BUILDERS[cmd.type](cmd.params)

    @staticmethod
    def combine(commands: Iterable[TransformCommand]) -> "Affine2D":
        """Combined transformation matrix for commands in source order.

        Each later command multiplies from the left, so the first command in
        the attribute is the first one applied to a local point:
        CTM = Cn-1 @ ... @ C1 @ C0.
        """
        ctm: Optional[Affine2D] = None
        for cmd in commands:
            m = Affine2D.from_command(cmd)
            ctm = m if ctm is None else m @ ctm
        return ctm if ctm is not None else Affine2D.identity()


def _opt(params: Sequence[float], idx: int) -> Optional[float]:
    return params[idx] if len(params) > idx else None


_BUILDERS: Dict[TransformType, Callable[[Sequence[float]], Affine2D]] = {
    TransformType.Translate: lambda p: Affine2D.translation(p[0], _opt(p, 1) or 0.0),
    TransformType.Scale: lambda p: Affine2D.scale(p[0], _opt(p, 1)),
    TransformType.Rotate: lambda p: Affine2D.rotation_deg(p[0]),
    TransformType.SkewX: lambda p: Affine2D.skew_x_deg(p[0]),
    TransformType.SkewY: lambda p: Affine2D.skew_y_deg(p[0]),
    TransformType.Matrix: lambda p: Affine2D.from_svg(*p),
}
