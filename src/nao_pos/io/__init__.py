"""I/O utilities for parsing NAO pos keyframe scripts.

This module provides the pos script parser and its failure taxonomy,
converting raw script lines to JAX-native keyframes.
"""

from .errors import (
    ParseError,
    MalformedLine,
    InvalidNumericField,
    InvalidDuration,
    InconsistentJointSet,
    StiffnessPositionMismatch,
)
from .pos_parser import (
    POSITION_MARKER,
    STIFFNESS_MARKER,
    UNSET,
    Success,
    Failure,
    ParseOutcome,
    ParserState,
    StiffnessLine,
    PositionLine,
    IgnoredLine,
    parse,
    classify_line,
    split_line,
    step,
    format_indexes,
)

__all__ = [
    "ParseError",
    "MalformedLine",
    "InvalidNumericField",
    "InvalidDuration",
    "InconsistentJointSet",
    "StiffnessPositionMismatch",
    "POSITION_MARKER",
    "STIFFNESS_MARKER",
    "UNSET",
    "Success",
    "Failure",
    "ParseOutcome",
    "ParserState",
    "StiffnessLine",
    "PositionLine",
    "IgnoredLine",
    "parse",
    "classify_line",
    "split_line",
    "step",
    "format_indexes",
]
