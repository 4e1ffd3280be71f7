import os
import sys

import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from svgtransform.TransformCommand import TransformCommand
from svgtransform.TransformErrors import (
    InvalidMatrixArity,
    InvalidRotateArity,
    NoParameters,
    TooManyParameters,
    TransformError,
    UnknownTransformType,
    UnparseableInput,
)
from svgtransform.TransformParser import TransformParser
from svgtransform.TransformType import TransformType


def as_dicts(commands):
    return [c.as_dict() for c in commands]


@pytest.mark.parametrize("raw", ["", "   ", "\n\t ", None])
def test_blank_input_yields_no_commands(raw):
    assert TransformParser.parse(raw) == []


def test_scale_one_and_two_params():
    assert as_dicts(TransformParser.parse("scale(1)")) == [{"type": "scale", "params": [1.0]}]
    assert as_dicts(TransformParser.parse("scale(1 2)")) == [{"type": "scale", "params": [1.0, 2.0]}]


def test_commands_are_typed_and_immutable():
    (cmd,) = TransformParser.parse("skewY(30)")
    assert cmd == TransformCommand(TransformType.SkewY, (30.0,))
    with pytest.raises(AttributeError):
        cmd.params = (1.0,)


@pytest.mark.parametrize("raw", [
    "translate(4,8) scale(0.5)",
    "translate(4,8), scale(0.5)",
    "translate(4,8) , scale(0.5)",
    "  translate( 4 , 8 )scale(0.5)  ",
])
def test_separator_placement_does_not_matter(raw):
    assert as_dicts(TransformParser.parse(raw)) == [
        {"type": "translate", "params": [4.0, 8.0]},
        {"type": "scale", "params": [0.5]},
    ]


def test_minus_sign_separates_numbers():
    assert as_dicts(TransformParser.parse("translate(4-7)")) == [{"type": "translate", "params": [4.0, -7.0]}]


def test_exponent_minus_is_not_a_separator():
    assert TransformParser.parse("scale(1e-5)")[0].params == (1e-5,)
    assert TransformParser.parse("translate(1E-2-3)")[0].params == (0.01, -3.0)


def test_split_numbers_drops_empty_tokens():
    assert TransformParser.split_numbers("4,-7 ") == ["4", "-7"]
    assert TransformParser.split_numbers("1.5e-3 -2,3") == ["1.5e-3", "-2", "3"]


def test_all_six_types():
    cmds = TransformParser.parse("matrix(1 0 0 1 5 6) translate(1) scale(2) rotate(30) skewX(10) skewY(20)")
    assert [c.type for c in cmds] == [
        TransformType.Matrix, TransformType.Translate, TransformType.Scale,
        TransformType.Rotate, TransformType.SkewX, TransformType.SkewY,
    ]


def test_rotate_with_pivot_expands_to_three_commands():
    assert as_dicts(TransformParser.parse("rotate(45 10 20)")) == [
        {"type": "translate", "params": [10.0, 20.0]},
        {"type": "rotate", "params": [45.0]},
        {"type": "translate", "params": [-10.0, -20.0]},
    ]


def test_rotate_without_pivot_stays_single():
    assert as_dicts(TransformParser.parse("rotate(45)")) == [{"type": "rotate", "params": [45.0]}]


def test_unknown_type():
    with pytest.raises(UnknownTransformType) as exc:
        TransformParser.parse("scalx(1 2)")
    assert exc.value.name == "scalx"
    assert exc.value.code == "unknown_type"


def test_names_are_case_sensitive():
    with pytest.raises(UnknownTransformType):
        TransformParser.parse("skewx(10)")


def test_unknown_type_reported_before_missing_params():
    with pytest.raises(UnknownTransformType):
        TransformParser.parse("scalx()")


def test_too_many_parameters():
    with pytest.raises(TooManyParameters) as exc:
        TransformParser.parse("scale(1 2 3)")
    assert (exc.value.count, exc.value.name) == (3, "scale")
    assert "Too many parameters 3 for transform scale" in str(exc.value)


def test_no_parameters():
    with pytest.raises(NoParameters) as exc:
        TransformParser.parse("skewX()")
    assert exc.value.name == "skewX"


def test_rotate_with_two_parameters():
    with pytest.raises(InvalidRotateArity):
        TransformParser.parse("rotate(45 10)")


def test_matrix_needs_six_parameters():
    with pytest.raises(InvalidMatrixArity) as exc:
        TransformParser.parse("matrix(1 2 3 4 5)")
    assert exc.value.count == 5

    with pytest.raises(TooManyParameters):
        TransformParser.parse("matrix(1 2 3 4 5 6 7)")


def test_later_bad_command_fails_whole_string():
    with pytest.raises(TooManyParameters):
        TransformParser.parse("translate(1) skewY(1 2)")


@pytest.mark.parametrize("raw", [
    "not a transform",
    "scale 2",
    "scale(1) garbage translate(2)",
    "scale(1) translate(2",
    "scale(1),,scale(2)",
    "scale(1.2.3)",
    "scale(e)",
])
def test_unparseable_input(raw):
    with pytest.raises(UnparseableInput) as exc:
        TransformParser.parse(raw)
    assert exc.value.code == "bad_transform_string"


def test_unparseable_reports_the_leftover_text():
    with pytest.raises(UnparseableInput) as exc:
        TransformParser.parse("scale(1) garbage translate(2)")
    assert exc.value.text == "garbage translate(2)"


def test_trailing_separator_is_accepted():
    assert len(TransformParser.parse("scale(2),")) == 1


def test_errors_are_value_errors():
    assert issubclass(TransformError, ValueError)
    with pytest.raises(ValueError):
        TransformParser.parse("bogus(1)")


@pytest.mark.parametrize("raw", ["scale(1e999)", "translate(1 -1e400)"])
def test_overflowing_numbers_are_rejected(raw):
    with pytest.raises(UnparseableInput) as exc:
        TransformParser.parse(raw)
    assert exc.value.text in ("1e999", "-1e400")


def test_command_text_keeps_full_precision():
    (cmd,) = TransformParser.parse("translate(1.23456789 -0.000123456789)")
    assert str(cmd) == "translate(1.23456789 -0.000123456789)"
    assert TransformParser.parse(str(cmd)) == [cmd]
