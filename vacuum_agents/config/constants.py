"""Centralized domain constants for vacuum-world simulations.

Judge score defaults feed ``JudgeConfig``. Run length and world width are
also the CLI defaults, and the separator joins tracked action names.
"""

from __future__ import annotations

NUM_STEPS = 7
"""Default number of simulation steps for a single scenario."""

TWO_CELL_WIDTH = 2
"""Width of the classic two-square (left/right) vacuum world."""

MOVED_SCORE = -1.0
"""Judge score for a successful move (time/energy cost)."""

DIRT_REMOVED_SCORE = 10.0
"""Judge score for sucking dirt off a square."""

BUMP_SCORE = -1.0
"""Judge score for a move rejected by a wall; treated like a normal move."""

NO_OP_SCORE = 0.0
"""Judge score when nothing in the environment changed."""

MISSING_SCORE = -10_000.0
"""Sentinel reported when an agent has no score from the requested judge."""

ACTION_SEPARATOR = ", "
"""Separator used when joining tracked action names."""
