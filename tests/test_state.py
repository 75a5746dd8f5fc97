"""Tests for line classification and explicit parser state stepping."""

import numpy as np
import pytest

from nao_pos.core import NUMJOINTS
from nao_pos.io import (
    Failure,
    IgnoredLine,
    InvalidNumericField,
    ParserState,
    PositionLine,
    StiffnessLine,
    classify_line,
    split_line,
    step,
)


def test_split_line():
    assert split_line("!  1\t2   3 ") == ("!", "1", "2", "3")
    assert split_line("   ") == ()


@pytest.mark.parametrize(
    "line, kind",
    [
        ("$ 1 2", StiffnessLine),
        ("! 1 2 3", PositionLine),
        ("  ! 1 2 3", PositionLine),
        ("# comment", IgnoredLine),
        ("", IgnoredLine),
        ("  \t ", IgnoredLine),
        ("x ! 1", IgnoredLine),
    ],
)
def test_classify_line(line, kind):
    """Test that the first character alone decides the directive kind."""
    assert isinstance(classify_line(line), kind)


def test_classify_keeps_tokens():
    directive = classify_line(" $ 0.5 - ")
    assert directive.line == "$ 0.5 -"
    assert directive.tokens == ("$", "0.5", "-")


def test_ignored_line_keeps_state():
    state = ParserState(absolute_time=42, previous_indexes=(0,))
    new_state, keyframe = step(state, classify_line("# nothing"))

    assert new_state == state
    assert keyframe is None


def test_stiffness_step_sets_pending_state():
    """Test that a stiffness line only updates pending state."""
    directive = classify_line("$ 0.5 - 0.25")
    state, keyframe = step(ParserState(), directive, num_joints=3)

    assert keyframe is None
    assert state.has_custom_stiffness
    assert state.stiffness_indexes == (0, 2)
    assert state.stiffness_values == (0.5, 0.25)
    assert state.absolute_time == 0


def test_position_step_resets_pending_state():
    """Test that a position line consumes pending stiffness and advances time."""
    pending = ParserState(
        absolute_time=100,
        stiffness_indexes=(0, 2),
        stiffness_values=(0.5, 0.25),
        has_custom_stiffness=True,
    )
    state, keyframe = step(pending, classify_line("! 10 - 20 50"), num_joints=3)

    assert state == ParserState(absolute_time=150, previous_indexes=(0, 2))
    assert keyframe.absolute_time == 150
    np.testing.assert_allclose(keyframe.joint_stiffness_values, [0.5, 0.25])


def test_failed_step_returns_failure():
    state = ParserState()
    result = step(state, classify_line("! 10 abc 20 50"), num_joints=3)

    assert isinstance(result, Failure)
    assert isinstance(result.error, InvalidNumericField)
    assert state == ParserState()


def test_default_joint_count():
    line = " ".join(["!"] + ["0"] * NUMJOINTS + ["10"])
    state, keyframe = step(ParserState(), classify_line(line))

    assert keyframe.joint_indexes == tuple(range(NUMJOINTS))
    assert state.previous_indexes == tuple(range(NUMJOINTS))


def test_unknown_directive():
    with pytest.raises(TypeError, match="Unknown directive type"):
        step(ParserState(), "! 1 2 3")
