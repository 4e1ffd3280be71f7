from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from svgtransform.TransformErrors import (
    InvalidMatrixArity,
    InvalidRotateArity,
    NoParameters,
    TooManyParameters,
)
from svgtransform.TransformType import TransformType


def check_arity(kind: TransformType, count: int) -> None:
    """Raise the matching TransformError if `count` params is invalid for `kind`."""
    name = kind.value
    if count == 0:
        raise NoParameters(name)
    if count > kind.max_params:
        raise TooManyParameters(count, name)
    if kind is TransformType.Rotate and count == 2:
        raise InvalidRotateArity(count)
    if kind is TransformType.Matrix and count != 6:
        raise InvalidMatrixArity(count)


@dataclass(frozen=True, slots=True)
class TransformCommand:
    """One parsed transform, e.g. scale(2 3) -> (Scale, (2.0, 3.0))."""
    type: TransformType
    params: Tuple[float, ...]

    def __post_init__(self) -> None:
        params = tuple(float(p) for p in self.params)
        check_arity(self.type, len(params))
        object.__setattr__(self, "params", params)

    @staticmethod
    def of(kind: TransformType, params: Iterable[float]) -> "TransformCommand":
        return TransformCommand(kind, tuple(params))

    @property
    def name(self) -> str:
        return self.type.value

    def expand(self) -> List["TransformCommand"]:
        """rotate(a cx cy) -> translate(cx cy), rotate(a), translate(-cx -cy).

        Every other command expands to itself.
        """
        if self.type is TransformType.Rotate and len(self.params) == 3:
            angle, cx, cy = self.params
            return [
                TransformCommand(TransformType.Translate, (cx, cy)),
                TransformCommand(TransformType.Rotate, (angle,)),
                TransformCommand(TransformType.Translate, (-cx, -cy)),
            ]
        return [self]

    def as_dict(self) -> Dict[str, Any]:
        return {"type": self.name, "params": list(self.params)}

    def __str__(self) -> str:
        return f"{self.name}({' '.join(repr(p) for p in self.params)})"
