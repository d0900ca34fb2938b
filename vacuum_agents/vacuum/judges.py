"""Performance measures for the vacuum world."""

from __future__ import annotations

from vacuum_agents.config.types import JudgeConfig
from vacuum_agents.domain.entity import Judge
from vacuum_agents.vacuum.world import ChangeKind, ChangePercept


class PerformanceJudge(Judge[ChangePercept]):
    """Scores each change: +10 for dirt removed, -1 per move, 0 for no change.

    A move rejected by a wall scores ``config.bump_score``. Percepts this
    judge does not recognise score 0.0 rather than aborting the run.
    """

    def __init__(self, config: JudgeConfig | None = None) -> None:
        super().__init__()
        self.config = config if config is not None else JudgeConfig()
        self._table: dict[ChangeKind, float] = {
            ChangeKind.NO_OP: self.config.no_op_score,
            ChangeKind.MOVED: self.config.moved_score,
            ChangeKind.BUMPED: self.config.bump_score,
            ChangeKind.DIRT_REMOVED: self.config.dirt_removed_score,
        }

    def execute(self, percept: ChangePercept) -> float:
        if not isinstance(percept, ChangePercept):
            return 0.0
        return self._table.get(percept.kind, 0.0)
