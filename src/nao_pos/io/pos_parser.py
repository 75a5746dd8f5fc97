"""Pos script parser for loading NAO keyframes into JAX-native data structures.

A pos script is line oriented. Lines starting with ``$`` set the stiffness of
the following keyframe, lines starting with ``!`` describe a keyframe (one
angle in degrees per joint plus a duration in milliseconds), everything else is
a comment. ``-`` leaves a joint unset::

    # HeadYaw HeadPitch ... RHand duration
    $ 0.5 0.5 - - ... -
    !  10   -5 - - ... - 500

Parsing is a pure fold of ``step`` over classified lines. The first error
aborts the whole parse and no keyframes are returned.
"""

import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

import jax.numpy as jnp

from nao_pos.angles import degrees_to_radians
from nao_pos.core.joints import NUMJOINTS
from nao_pos.core.keyframe import KeyFrame
from nao_pos.io.errors import (
    InconsistentJointSet,
    InvalidDuration,
    InvalidNumericField,
    MalformedLine,
    ParseError,
    StiffnessPositionMismatch,
)

logger = logging.getLogger(__name__)

STIFFNESS_MARKER = "$"
POSITION_MARKER = "!"
UNSET = "-"

FULL_STIFFNESS = 1.0


@dataclass(frozen=True)
class StiffnessLine:
    line: str
    tokens: Tuple[str, ...]


@dataclass(frozen=True)
class PositionLine:
    line: str
    tokens: Tuple[str, ...]


@dataclass(frozen=True)
class IgnoredLine:
    line: str


Directive = Union[StiffnessLine, PositionLine, IgnoredLine]


@dataclass(frozen=True)
class Success:
    """A parse that consumed every line; keyframes may be empty."""
    keyframes: Tuple[KeyFrame, ...]

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Tuple[KeyFrame, ...]:
        return self.keyframes


@dataclass(frozen=True)
class Failure:
    """A rejected parse, carrying the first error encountered."""
    error: ParseError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Tuple[KeyFrame, ...]:
        raise self.error


ParseOutcome = Union[Success, Failure]


class ParserState(NamedTuple):
    """Carry-over state between lines of a single parse.

    Attributes:
        absolute_time: Sum of all durations seen so far, in milliseconds.
        stiffness_indexes: Pending stiffness joint indexes, in line order.
        stiffness_values: Pending stiffness values, parallel to the indexes.
        has_custom_stiffness: True once a stiffness line is pending for the
                              next position line.
        previous_indexes: Joint indexes of the last position line, or None
                          before the first one.
    """
    absolute_time: int = 0
    stiffness_indexes: Tuple[int, ...] = ()
    stiffness_values: Tuple[float, ...] = ()
    has_custom_stiffness: bool = False
    previous_indexes: Optional[Tuple[int, ...]] = None


StepResult = Union[Tuple[ParserState, Optional[KeyFrame]], Failure]


def parse(lines: Sequence[str], num_joints: int = NUMJOINTS) -> ParseOutcome:
    """Parse pos script lines into time-ordered keyframes.

    Args:
        lines: Script lines, without trailing newlines.
        num_joints: Number of value fields per directive. Defaults to the
                    NAO joint count.

    Returns:
        Success with every keyframe, or Failure with the first error.
    """
    if num_joints < 1:
        raise ValueError(f"num_joints must be at least 1, got {num_joints}")

    state = ParserState()
    keyframes: List[KeyFrame] = []

    for line in lines:
        result = step(state, classify_line(line), num_joints)
        if isinstance(result, Failure):
            logger.error(str(result.error))
            return result
        state, keyframe = result
        if keyframe is not None:
            keyframes.append(keyframe)

    return Success(tuple(keyframes))


def split_line(line: str) -> Tuple[str, ...]:
    """Split a line on runs of whitespace."""
    return tuple(line.split())


def classify_line(line: str) -> Directive:
    """Decide once, from the first character, what kind of line this is."""
    stripped = line.strip()
    if stripped.startswith(STIFFNESS_MARKER):
        return StiffnessLine(line=stripped, tokens=split_line(stripped))
    if stripped.startswith(POSITION_MARKER):
        return PositionLine(line=stripped, tokens=split_line(stripped))
    return IgnoredLine(line=stripped)


def step(state: ParserState, directive: Directive, num_joints: int = NUMJOINTS) -> StepResult:
    """Apply one classified line to the parser state.

    Returns:
        ``(new_state, keyframe)`` where keyframe is None unless the line was a
        position directive, or a Failure.
    """
    if isinstance(directive, StiffnessLine):
        return _stiffness_step(state, directive, num_joints)
    if isinstance(directive, PositionLine):
        return _position_step(state, directive, num_joints)
    if isinstance(directive, IgnoredLine):
        logger.debug("Ignoring: %s", directive.line)
        return state, None
    raise TypeError(f"Unknown directive type: {type(directive).__name__}")


def format_indexes(indexes: Sequence[int]) -> str:
    """Format joint indexes for log output, e.g. ``[ 0 1 ]``."""
    return "[ " + "".join(f"{i} " for i in indexes) + "]"


def _stiffness_step(state: ParserState, directive: StiffnessLine, num_joints: int) -> StepResult:
    logger.debug("Stiffness: %s", directive.line)

    # +1 for the leading marker
    expected = num_joints + 1
    if len(directive.tokens) != expected:
        return Failure(MalformedLine(directive.line, expected, len(directive.tokens)))

    fields = _parse_fields(directive.line, directive.tokens[1:num_joints + 1])
    if isinstance(fields, Failure):
        return fields
    indexes, values = fields

    return state._replace(
        stiffness_indexes=state.stiffness_indexes + indexes,
        stiffness_values=state.stiffness_values + values,
        has_custom_stiffness=True,
    ), None


def _position_step(state: ParserState, directive: PositionLine, num_joints: int) -> StepResult:
    logger.debug("Position: %s", directive.line)

    # +2 for the leading marker and the trailing duration
    expected = num_joints + 2
    if len(directive.tokens) != expected:
        return Failure(MalformedLine(directive.line, expected, len(directive.tokens)))

    fields = _parse_fields(directive.line, directive.tokens[1:num_joints + 1])
    if isinstance(fields, Failure):
        return fields
    indexes, degrees = fields

    if state.has_custom_stiffness:
        stiffness_indexes = state.stiffness_indexes
        stiffness_values = state.stiffness_values
    else:
        stiffness_indexes = indexes
        stiffness_values = (FULL_STIFFNESS,) * len(indexes)

    if state.previous_indexes is not None and indexes != state.previous_indexes:
        return Failure(InconsistentJointSet(directive.line, state.previous_indexes, indexes))

    duration = _parse_duration(directive.line, directive.tokens[-1])
    if isinstance(duration, Failure):
        return duration
    absolute_time = state.absolute_time + duration

    if state.has_custom_stiffness and stiffness_indexes != indexes:
        return Failure(StiffnessPositionMismatch(directive.line, indexes, stiffness_indexes))

    keyframe = KeyFrame(
        absolute_time=absolute_time,
        joint_indexes=indexes,
        joint_positions_rad=degrees_to_radians(degrees),
        joint_stiffness_indexes=stiffness_indexes,
        joint_stiffness_values=jnp.array(stiffness_values, dtype=jnp.float64),
    )
    logger.info("joint position indexes: %s", format_indexes(indexes))
    logger.info("joint position count: %d", len(indexes))
    logger.info("joint stiffness indexes: %s", format_indexes(stiffness_indexes))
    logger.info("joint stiffness count: %d", len(stiffness_indexes))

    # Pending stiffness is consumed by exactly one position line.
    return ParserState(absolute_time=absolute_time, previous_indexes=indexes), keyframe


def _parse_fields(
    line: str, tokens: Sequence[str]
) -> Union[Tuple[Tuple[int, ...], Tuple[float, ...]], Failure]:
    """Parse per-joint value tokens, skipping unset joints.

    Returns:
        Parallel (indexes, values) tuples in ascending joint order.
    """
    indexes = []
    values = []
    for index, token in enumerate(tokens):
        if token == UNSET:
            continue
        value = _parse_float(token)
        if value is None:
            return Failure(InvalidNumericField(line, token))
        indexes.append(index)
        values.append(value)
    return tuple(indexes), tuple(values)


def _parse_float(token: str) -> Optional[float]:
    # float() accepts "1_0"; pos scripts do not.
    if "_" in token:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def _parse_duration(line: str, token: str) -> Union[int, Failure]:
    if "_" in token:
        return Failure(InvalidDuration(line, token))
    try:
        duration = int(token)
    except ValueError:
        return Failure(InvalidDuration(line, token))
    # Absolute time must never decrease.
    if duration < 0:
        return Failure(InvalidDuration(line, token))
    return duration
