from dataclasses import dataclass

from svgtransform.TransformConstants import DEFAULT_SINGULAR_EPSILON


@dataclass(frozen=True)
class TransformConfig:
    singular_epsilon: float = DEFAULT_SINGULAR_EPSILON

    def __post_init__(self) -> None:
        if self.singular_epsilon < 0:
            raise ValueError("singular_epsilon must be >= 0")
