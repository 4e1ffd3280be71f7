from enum import Enum

from svgtransform.TransformConstants import MAX_PARAMS
from svgtransform.TransformErrors import UnknownTransformType


class TransformType(Enum):
    Scale = "scale"
    Translate = "translate"
    Rotate = "rotate"
    SkewX = "skewX"
    SkewY = "skewY"
    Matrix = "matrix"

    @property
    def max_params(self) -> int:
        return MAX_PARAMS[self.value]

    @staticmethod
    def from_name(name: str) -> "TransformType":
        """Look up a transform by its attribute name (case sensitive)."""
        try:
            return TransformType(name)
        except ValueError:
            raise UnknownTransformType(name) from None
