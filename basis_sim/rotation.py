"""
Rotation Classifier: which single-qubit rotations survive a basis-state model.

R(axis, θ) = exp(-iθ/2 · P). Up to global phase:
  - θ ≡ 0 (mod 2π) is the identity for every axis (R(2π) = -I)
  - θ ≡ π (mod 2π) about X is -iX, a bit flip
  - anything else needs superposition or a relative phase; Y by π flips with
    a relative phase and Z by π only adds one, so neither counts as a flip
"""

from dataclasses import dataclass
from enum import Enum
import numpy as np

TWO_PI = 2 * np.pi
DEFAULT_TOLERANCE = 1e-10


class Pauli(Enum):
    X = "X"
    Y = "Y"
    Z = "Z"

    @classmethod
    def parse(cls, axis) -> "Pauli":
        """Accept a Pauli, "X", "x" or "PauliX"."""
        if isinstance(axis, cls):
            return axis
        if isinstance(axis, str):
            name = axis.strip().upper()
            if name.startswith("PAULI"):
                name = name[len("PAULI"):]
            if name in cls.__members__:
                return cls[name]
        raise ValueError(f"Unknown rotation axis: {axis!r}. Use X, Y or Z")

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class RotationClass:
    """Outcome of classify(). Both False means not representable."""
    is_flip: bool
    is_identity: bool

    @property
    def is_representable(self) -> bool:
        return self.is_flip or self.is_identity


def classify(axis, angle: float, tolerance: float = DEFAULT_TOLERANCE) -> RotationClass:
    """Classify R(axis, angle) as a flip, the identity, or neither.

    The angle is reduced into [0, 2π) first, so negative angles and any number
    of full turns behave the same. ``tolerance`` is a fixed absolute bound on
    the reduced angle and must stay below π/2, so at most one of the two
    flags is ever set. Non-finite angles are never representable.
    """
    axis = Pauli.parse(axis)
    if not 0 <= tolerance < np.pi / 2:
        raise ValueError(f"tolerance={tolerance} must be in [0, pi/2)")
    angle = float(angle)
    if not np.isfinite(angle):
        return RotationClass(is_flip=False, is_identity=False)

    r = float(np.remainder(angle, TWO_PI))

    is_identity = min(r, TWO_PI - r) <= tolerance
    is_flip = axis is Pauli.X and abs(r - np.pi) <= tolerance
    return RotationClass(is_flip=bool(is_flip), is_identity=bool(is_identity))
