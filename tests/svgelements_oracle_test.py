import os
import sys

import pytest
from svgelements import Matrix
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from svgtransform.Affine2D import Affine2D
from svgtransform.TransformParser import TransformParser

# svgelements nests transforms the other way round (last written applies
# first), so it is fed the parsed commands in reverse to get the same CTM.


@pytest.mark.parametrize("transform", [
    "translate(4,8)",
    "scale(2 3)",
    "matrix(1 2 3 4 5 6)",
    "translate(4,8) scale(0.5)",
    "scale(2) translate(10 -3), matrix(0 1 -1 0 2 2)",
    "translate(1.23456789 -7.654321098) scale(1.0000001 3.14159265358979)",
])
def test_ctm_matches_svgelements(transform):
    commands = TransformParser.parse(transform)
    reference = Matrix(" ".join(str(c) for c in reversed(commands)))
    ours = Affine2D.combine(commands).to_svg()
    assert ours == pytest.approx((reference.a, reference.b, reference.c, reference.d, reference.e, reference.f))
