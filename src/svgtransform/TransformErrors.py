"""Failures raised while parsing a transform attribute or inverting its matrix.

Every error carries a stable ``code`` so callers can branch without matching
on message text.
"""


class TransformError(ValueError):
    code = "transform_error"


class UnparseableInput(TransformError):
    code = "bad_transform_string"

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unable to parse the transform string {text!r}")


class UnknownTransformType(TransformError):
    code = "unknown_type"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown transform {name}")


class NoParameters(TransformError):
    code = "no_parameters"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No parameters for transform {name}")


class TooManyParameters(TransformError):
    code = "too_many_parameters"

    def __init__(self, count: int, name: str):
        self.count = count
        self.name = name
        super().__init__(f"Too many parameters {count} for transform {name}")


class InvalidRotateArity(TransformError):
    code = "rotate_2"

    def __init__(self, count: int = 2):
        self.count = count
        super().__init__("rotate transform may not have two parameters")


class InvalidMatrixArity(TransformError):
    code = "matrix_6"

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"matrix transform must have exactly six parameters, got {count}")


class SingularMatrix(TransformError):
    code = "singular_matrix"

    def __init__(self, determinant: float):
        self.determinant = determinant
        super().__init__(f"Transformation matrix is not invertible (determinant={determinant!r})")
