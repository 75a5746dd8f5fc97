"""The NAO joint set, in the order used by the joint command schema."""

from typing import Tuple

JOINT_NAMES: Tuple[str, ...] = (
    "HeadYaw",
    "HeadPitch",
    "LShoulderPitch",
    "LShoulderRoll",
    "LElbowYaw",
    "LElbowRoll",
    "LWristYaw",
    "LHipYawPitch",
    "LHipRoll",
    "LHipPitch",
    "LKneePitch",
    "LAnklePitch",
    "LAnkleRoll",
    "RHipRoll",
    "RHipPitch",
    "RKneePitch",
    "RAnklePitch",
    "RAnkleRoll",
    "RShoulderPitch",
    "RShoulderRoll",
    "RElbowYaw",
    "RElbowRoll",
    "RWristYaw",
    "LHand",
    "RHand",
)

# Must match the actuation schema's joint count exactly.
NUMJOINTS = len(JOINT_NAMES)


def joint_name(index: int) -> str:
    """Return the name of the joint at a zero-based index."""
    if not 0 <= index < NUMJOINTS:
        raise ValueError(f"Joint index {index} out of range [0, {NUMJOINTS})")
    return JOINT_NAMES[index]


def joint_index(name: str) -> int:
    """Return the zero-based index of a named joint."""
    try:
        return JOINT_NAMES.index(name)
    except ValueError:
        raise ValueError(f"Joint '{name}' not found in NAO joint set")
