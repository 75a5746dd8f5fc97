"""Failure taxonomy for pos script parsing.

Every error is a value carrying the offending line and enough context
to show an operator. They subclass ValueError so a caller may raise them.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(eq=False)
class ParseError(ValueError):
    """Base class for all pos script parse failures."""
    line: str

    def __str__(self) -> str:
        return f"{self.describe()}: '{self.line}'"

    def describe(self) -> str:
        return "invalid pos line"


@dataclass(eq=False)
class MalformedLine(ParseError):
    """Wrong token count for the directive type."""
    expected: int
    actual: int

    def describe(self) -> str:
        return f"pos file line has {self.actual} elements, but expected {self.expected}"


@dataclass(eq=False)
class InvalidNumericField(ParseError):
    """A value token is neither the unset sentinel nor a number."""
    token: str

    def describe(self) -> str:
        return f"value '{self.token}' cannot be converted to float"


@dataclass(eq=False)
class InvalidDuration(ParseError):
    """The trailing duration token is not a non-negative integer."""
    token: str

    def describe(self) -> str:
        return f"duration '{self.token}' is not a valid duration value"


@dataclass(eq=False)
class InconsistentJointSet(ParseError):
    """Two position directives disagree on which joints are driven."""
    expected_indexes: Tuple[int, ...]
    actual_indexes: Tuple[int, ...]

    def describe(self) -> str:
        return (
            f"joint positions {list(self.actual_indexes)} differ from "
            f"previous joint positions {list(self.expected_indexes)}"
        )


@dataclass(eq=False)
class StiffnessPositionMismatch(ParseError):
    """Pending stiffness joints don't match the paired position joints."""
    expected_indexes: Tuple[int, ...]
    actual_indexes: Tuple[int, ...]

    def describe(self) -> str:
        return (
            f"joint stiffness indexes {list(self.actual_indexes)} differ from "
            f"joint position indexes {list(self.expected_indexes)}"
        )
