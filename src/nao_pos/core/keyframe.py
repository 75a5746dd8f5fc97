"""KeyFrame PyTree data structures for parsed pos scripts.

This module defines the immutable records handed from the parser to the
command-dispatch layer. Index sequences are static (hashable tuples) while
joint values are stored in JAX arrays.
"""

from jax import Array
from flax import struct
from typing import Tuple


@struct.dataclass
class JointCommand:
    """One joint command message: parallel indexes and values.

    Attributes:
        indexes: Strictly increasing zero-based joint indexes.
                 Marked as a static field for JIT compilation.
        values: Array of shape (len(indexes),), one value per index.
    """
    indexes: Tuple[int, ...] = struct.field(pytree_node=False)
    values: Array

    def __len__(self) -> int:
        return len(self.indexes)


@struct.dataclass
class KeyFrame:
    """Immutable PyTree representation of one target pose plus its timing.

    Only joints explicitly set on the originating pos line are present. The
    position and stiffness data always cover the same joints in the same order.

    Attributes:
        absolute_time: Cumulative duration in milliseconds, i.e. the sum of
                       this and every preceding keyframe's duration. A PyTree
                       leaf, so keyframes at different times share one trace.
        joint_indexes: Joint indexes driven by this keyframe.
        joint_positions_rad: Array of shape (len(joint_indexes),) with target
                             angles in radians.
        joint_stiffness_indexes: Joint indexes carrying a stiffness value.
        joint_stiffness_values: Array of shape (len(joint_stiffness_indexes),).
    """
    absolute_time: int
    joint_indexes: Tuple[int, ...] = struct.field(pytree_node=False)
    joint_positions_rad: Array
    joint_stiffness_indexes: Tuple[int, ...] = struct.field(pytree_node=False)
    joint_stiffness_values: Array

    def position_command(self) -> JointCommand:
        return JointCommand(indexes=self.joint_indexes, values=self.joint_positions_rad)

    def stiffness_command(self) -> JointCommand:
        return JointCommand(
            indexes=self.joint_stiffness_indexes, values=self.joint_stiffness_values
        )
