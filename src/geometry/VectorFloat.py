from dataclasses import dataclass
import math
from typing import Tuple


@dataclass(frozen=True, slots=True)
class VectorFloat:
    """Displacement between two points in the same coordinate space."""
    dx: float
    dy: float
    def as_tuple(self) -> Tuple[float, float]: return (self.dx, self.dy)
    def __neg__(self) -> "VectorFloat": return VectorFloat(-self.dx, -self.dy)
    def __mul__(self, k: float) -> "VectorFloat": return VectorFloat(self.dx * k, self.dy * k)
    __rmul__ = __mul__
    def __abs__(self) -> float: return math.hypot(self.dx, self.dy)
