from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from geometry.VectorFloat import VectorFloat


@dataclass(frozen=True, slots=True)
class PointFloat:
    x: float
    y: float
    def as_tuple(self) -> Tuple[float, float]: return (self.x, self.y)
    def __iter__(self) -> Iterator[float]: return iter((self.x, self.y))
    def __add__(self, v: VectorFloat) -> "PointFloat": return PointFloat(self.x + v.dx, self.y + v.dy)
    def __sub__(self, p: "PointFloat") -> VectorFloat: return VectorFloat(self.x - p.x, self.y - p.y)

    def distance_to(self, p: "PointFloat") -> float:
        return abs(self - p)

    @staticmethod
    def from_any(pt: Any) -> "PointFloat":
        """Coerce a PointFloat, an (x, y) pair or an {"x", "y"} mapping.

        The caller's object is only read, never padded or modified.
        """
        if isinstance(pt, PointFloat):
            return pt
        if isinstance(pt, dict) and "x" in pt and "y" in pt:
            return PointFloat(float(pt["x"]), float(pt["y"]))
        if (
            isinstance(pt, (list, tuple))
            and len(pt) == 2
            and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in pt)
        ):
            return PointFloat(float(pt[0]), float(pt[1]))
        raise ValueError(f"Unsupported point format: {pt!r}")
