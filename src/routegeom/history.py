"""
Linear undo/redo history over snapshots of a coordinate sequence.
"""

from typing import List, Tuple
import logging

from .geometry import Coordinate, CoordinateSequence

logger = logging.getLogger(__name__)

Snapshot = Tuple[Coordinate, ...]


class EditHistory:
    """Undo/redo log for an interactively edited coordinate sequence.

    The history always holds at least one snapshot, starting with the empty
    sequence. Committing after an undo discards the snapshots that were
    undone; there is no branching. Undo at the oldest snapshot and redo at
    the newest are no-ops.
    """

    def __init__(self):
        self._snapshots: List[Snapshot] = [()]
        self._cursor = 0

    def __len__(self) -> int:
        """Return number of snapshots held."""
        return len(self._snapshots)

    def __repr__(self) -> str:
        return f"EditHistory(cursor={self._cursor}, snapshots={len(self._snapshots)})"

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def current(self) -> Snapshot:
        """Return the snapshot at the cursor."""
        return self._snapshots[self._cursor]

    def commit(self, sequence: CoordinateSequence) -> Snapshot:
        """
        Record a new snapshot after the current one.

        Any redoable snapshots are discarded.

        Args:
            sequence: The new coordinate sequence

        Returns:
            The new current snapshot
        """
        discarded = len(self._snapshots) - self._cursor - 1
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(tuple(sequence))
        self._cursor = len(self._snapshots) - 1
        if discarded:
            logger.debug(f"Commit discarded {discarded} redoable snapshot(s)")
        logger.debug(f"Committed snapshot {self._cursor} with {len(self.current())} points")
        return self.current()

    def undo(self) -> Snapshot:
        """Step back one snapshot, if there is one."""
        if self.can_undo:
            self._cursor -= 1
            logger.debug(f"Undo to snapshot {self._cursor}")
        return self.current()

    def redo(self) -> Snapshot:
        """Step forward one snapshot, if there is one."""
        if self.can_redo:
            self._cursor += 1
            logger.debug(f"Redo to snapshot {self._cursor}")
        return self.current()
