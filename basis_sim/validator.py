"""
Qubit Validator: allocation and distinctness checks run before any gate.

Works against anything with an ``is_allocated(handle) -> bool`` method, so
the allocator stays an outside collaborator.
"""

from typing import Iterable, Protocol
from basis_sim.errors import DuplicateQubit, UnallocatedQubit


class Allocator(Protocol):
    def is_allocated(self, qubit) -> bool: ...


class QubitValidator:
    """Checks gate operands against an allocator.

    Allocation is checked before distinctness. Callers handle the ``None``
    target themselves; it never reaches the validator.
    """

    def __init__(self, allocator: Allocator):
        self.allocator = allocator

    def check_target(self, target):
        if not self.allocator.is_allocated(target):
            raise UnallocatedQubit(target, role="target")

    def check_controls(self, controls: Iterable, target):
        controls = list(controls)
        self.check_target(target)
        for c in controls:
            if c is None or not self.allocator.is_allocated(c):
                raise UnallocatedQubit(c, role="control")

        seen = set()
        for c in controls:
            if c == target:
                raise DuplicateQubit(c, f"control qubit {c} is also the target")
            if c in seen:
                raise DuplicateQubit(c, f"control qubit {c} is listed more than once")
            seen.add(c)
