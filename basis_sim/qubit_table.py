"""
Qubit Table: one definite boolean per allocated qubit.

Handles are small integers indexing a numpy bool vector owned by the table.
Released slots go on a free list and are handed out again lowest-first.
The vector doubles when it runs out of room.
"""

import heapq
import logging
import numpy as np
from basis_sim.errors import UnallocatedQubit

logger = logging.getLogger(__name__)


class QubitTable:
    """Arena of basis-state qubits.

    Every allocated slot holds False (|0⟩) until a gate flips it. A released
    slot is cleared, so the table never holds a value for a free handle.
    """

    def __init__(self, initial_capacity: int = 8):
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity={initial_capacity} must be positive")
        self.state = np.zeros(initial_capacity, dtype=bool)
        self.allocated = np.zeros(initial_capacity, dtype=bool)
        self._free: list[int] = []
        self._next = 0  # first never-used slot

    @property
    def capacity(self) -> int:
        return len(self.state)

    def __len__(self):
        return int(self.allocated.sum())

    def _grow(self):
        extra = self.capacity
        self.state = np.concatenate([self.state, np.zeros(extra, dtype=bool)])
        self.allocated = np.concatenate([self.allocated, np.zeros(extra, dtype=bool)])

    # ── Allocation ──────────────────────────────────────────────────

    def allocate(self) -> int:
        """Hand out a fresh qubit in the False state."""
        if self._free:
            q = heapq.heappop(self._free)
        else:
            if self._next == self.capacity:
                self._grow()
            q = self._next
            self._next += 1
        self.allocated[q] = True
        self.state[q] = False
        logger.debug("allocated qubit %d", q)
        return q

    def allocate_many(self, n: int) -> list[int]:
        if n < 0:
            raise ValueError(f"Cannot allocate {n} qubits")
        return [self.allocate() for _ in range(n)]

    def release(self, qubit: int):
        if not self.is_allocated(qubit):
            raise UnallocatedQubit(qubit, role="released")
        self.allocated[qubit] = False
        self.state[qubit] = False
        heapq.heappush(self._free, qubit)
        logger.debug("released qubit %d", qubit)

    def is_allocated(self, qubit) -> bool:
        """True iff ``qubit`` is an in-range integer handle that is in use."""
        if isinstance(qubit, (bool, np.bool_)) or not isinstance(qubit, (int, np.integer)):
            return False
        return 0 <= qubit < self._next and bool(self.allocated[qubit])

    def reset(self):
        """Release everything and forget all slots."""
        self.state[:] = False
        self.allocated[:] = False
        self._free = []
        self._next = 0

    # ── State ───────────────────────────────────────────────────────

    def flip(self, qubit: int):
        """Toggle one qubit. The only state mutation gates ever perform."""
        if not self.is_allocated(qubit):
            raise UnallocatedQubit(qubit)
        self.state[qubit] = not self.state[qubit]

    def value(self, qubit: int) -> bool:
        if not self.is_allocated(qubit):
            raise UnallocatedQubit(qubit)
        return bool(self.state[qubit])

    def allocated_qubits(self) -> list[int]:
        return np.flatnonzero(self.allocated).tolist()

    def __repr__(self):
        return f"QubitTable(allocated={len(self)}, capacity={self.capacity})"
