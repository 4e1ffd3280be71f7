"""
Read the "transform" attribute of an SVG element and map points through it.

    t = SvgTransform()
    t.extract_transforms("translate(4,8) scale(0.5)")
    viewport = t.transform((5, 10))
    local = t.untransform(viewport)

The combined transformation matrix (CTM) is built lazily the first time a
point is mapped and reused until the transform list changes. Instances hold
mutable state and do no locking; callers sharing one across threads must
serialize extract_transforms() against the point-mapping calls.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Tuple, Union

import numpy as np

from geometry.PointFloat import PointFloat
from svgtransform.Affine2D import Affine2D
from svgtransform.TransformCommand import TransformCommand
from svgtransform.TransformConfig import TransformConfig
from svgtransform.TransformErrors import TransformError
from svgtransform.TransformParser import TransformParser

logger = logging.getLogger(__name__)


class SvgTransform:
    def __init__(self, transform: Optional[str] = None, config: Optional[TransformConfig] = None) -> None:
        self.config = config if config is not None else TransformConfig()
        self._transforms: List[TransformCommand] = []
        self._ctm: Optional[Affine2D] = None
        self._inverse: Optional[Affine2D] = None
        if transform:
            self.extract_transforms(transform)

    # -----------------------------
    # Transform list
    # -----------------------------

    @property
    def transforms(self) -> Tuple[TransformCommand, ...]:
        """Parsed commands in source order (rotate with a pivot already expanded)."""
        return tuple(self._transforms)

    @property
    def has_transforms(self) -> bool:
        return bool(self._transforms)

    def clear_transforms(self) -> None:
        self._transforms = []
        self.clear_ctm()

    def extract_transforms(self, transform: Optional[str]) -> None:
        """Parse `transform` and replace the stored commands.

        The empty string clears the transforms. On any TransformError the
        previously stored commands and CTM are left untouched.
        """
        try:
            commands = TransformParser.parse(transform)
        except TransformError as e:
            logger.debug("Rejected transform %r: %s", transform, e)
            raise

        self._transforms = commands
        self.clear_ctm()
        logger.debug("Parsed %d transform command(s) from %r", len(commands), transform)

    # -----------------------------
    # Combined transformation matrix
    # -----------------------------

    @property
    def ctm(self) -> Affine2D:
        if self._ctm is None:
            self._ctm = Affine2D.combine(self._transforms)
        return self._ctm

    @ctm.setter
    def ctm(self, value: Union[Affine2D, np.ndarray, List[List[float]]]) -> None:
        self._ctm = value if isinstance(value, Affine2D) else Affine2D(value)
        self._inverse = None

    def clear_ctm(self) -> None:
        self._ctm = None
        self._inverse = None

    @property
    def inverse_ctm(self) -> Affine2D:
        """Inverse of the CTM; raises SingularMatrix when there is none."""
        if self._inverse is None:
            self._inverse = self.ctm.inverse(self.config.singular_epsilon)
        return self._inverse

    def _is_identity(self) -> bool:
        return not self._transforms and self._ctm is None

    # -----------------------------
    # Point mapping
    # -----------------------------

    def transform(self, point: Any) -> PointFloat:
        """Map `point` from local (user) space to viewport space."""
        p = PointFloat.from_any(point)
        if self._is_identity():
            return p
        return PointFloat(*self.ctm.apply(p.x, p.y))

    def untransform(self, point: Any) -> PointFloat:
        """Map `point` from viewport space back to local space."""
        p = PointFloat.from_any(point)
        if self._is_identity():
            return p
        return PointFloat(*self.inverse_ctm.apply(p.x, p.y))

    def transform_points(self, points: Iterable[Any]) -> List[PointFloat]:
        return self._map_many(points, inverse=False)

    def untransform_points(self, points: Iterable[Any]) -> List[PointFloat]:
        return self._map_many(points, inverse=True)

    def _map_many(self, points: Iterable[Any], inverse: bool) -> List[PointFloat]:
        pts = [PointFloat.from_any(p) for p in points]
        if not pts or self._is_identity():
            return pts
        m = self.inverse_ctm if inverse else self.ctm
        out = m.apply_many(np.array([p.as_tuple() for p in pts], dtype=float))
        return [PointFloat(float(x), float(y)) for x, y in out]
