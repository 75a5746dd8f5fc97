"""Core keyframe data structures for NAO pos.

This module provides the joint set shared with the actuation layer and the
immutable keyframe representation produced by the parser.
"""

from .joints import NUMJOINTS, JOINT_NAMES, joint_index, joint_name
from .keyframe import JointCommand, KeyFrame

__all__ = [
    "NUMJOINTS",
    "JOINT_NAMES",
    "joint_index",
    "joint_name",
    "JointCommand",
    "KeyFrame",
]
