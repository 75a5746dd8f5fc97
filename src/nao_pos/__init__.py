"""
NAO pos: keyframe script parsing for NAO joint actuation.

This library turns human-authored pos scripts into validated, time-ordered
keyframes of joint positions (radians) and stiffnesses, stored as JAX-native
immutable data structures.
"""

import jax
jax.config.update("jax_enable_x64", True)

# Import core modules
from . import angles
from . import core
from . import io

__version__ = "0.1.0"
__all__ = ["angles", "core", "io"]
