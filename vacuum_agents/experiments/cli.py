"""CLI entrypoint for vacuum-world runs.

This module owns CLI argument parsing and mode dispatch. All domain logic
lives in the extracted modules:

- ``vacuum_agents.config``               – configuration dataclasses
- ``vacuum_agents.experiments.scenario`` – scenario construction and batch runs
"""

from __future__ import annotations

import argparse
import json
import logging

from vacuum_agents.config.constants import BUMP_SCORE, NUM_STEPS, TWO_CELL_WIDTH
from vacuum_agents.config.types import AgentKind, JudgeConfig, ScenarioConfig
from vacuum_agents.experiments.scenario import (
    run_batch,
    run_scenario,
    summarize_scores,
    two_cell_scenarios,
)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_agent_kind(raw_kind: str) -> AgentKind:
    """Parse agent kind from CLI."""
    try:
        return AgentKind(raw_kind.strip())
    except ValueError as exc:
        valid = ", ".join(kind.value for kind in AgentKind)
        raise ValueError(f"agent must be one of {valid}") from exc


def _parse_agent_kinds(raw_kinds: str) -> tuple[AgentKind, ...]:
    """Parse comma-delimited agent kinds; duplicates are rejected."""
    parts = [part.strip() for part in raw_kinds.split(",") if part.strip()]
    if not parts:
        raise ValueError("agents must not be empty")
    kinds = tuple(_parse_agent_kind(part) for part in parts)
    if len(set(kinds)) != len(kinds):
        raise ValueError("agents must include distinct values")
    return kinds


def _parse_grid_shape(raw_shape: str) -> tuple[int, ...]:
    """Parse a grid shape formatted as `W` or `WxH`."""
    tokens = [token.strip() for token in raw_shape.lower().split("x")]
    try:
        sizes = tuple(int(token) for token in tokens)
    except ValueError as exc:
        raise ValueError("grid must use integer W or WxH values") from exc
    if any(size < 1 for size in sizes):
        raise ValueError("grid sizes must be >= 1")
    return sizes


def _parse_location(raw_location: str) -> tuple[int, ...]:
    """Parse a comma-delimited coordinate such as `1` or `2,0`."""
    parts = [part.strip() for part in raw_location.split(",") if part.strip()]
    if not parts:
        raise ValueError("location must not be empty")
    try:
        return tuple(int(part) for part in parts)
    except ValueError as exc:
        raise ValueError(f"location must contain integers, got {raw_location!r}") from exc


def _parse_start(raw_start: str) -> tuple[int, ...] | None:
    """Parse the start location; `random` means pick one at random."""
    if raw_start.strip().lower() == "random":
        return None
    return _parse_location(raw_start)


def _parse_dirty(raw_dirty: str) -> tuple[tuple[int, ...], ...]:
    """Parse semicolon-delimited locations such as `0;1` or `0,0;2,1`."""
    return tuple(_parse_location(part) for part in raw_dirty.split(";") if part.strip())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vacuum-agents", description="Run vacuum-world agent simulations"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command")

    run = subparsers.add_parser("run", help="Run a single scenario")
    run.add_argument("--agent", default=AgentKind.REFLEX.value)
    run.add_argument("--grid", default=str(TWO_CELL_WIDTH), help="W or WxH")
    run.add_argument("--start", default="0", help="Comma-delimited location or 'random'")
    run.add_argument("--dirty", default="", help="Semicolon-delimited dirty locations")
    run.add_argument("--steps", type=int, default=NUM_STEPS)
    run.add_argument("--seed", type=int, default=None)
    run.add_argument("--bump-score", type=float, default=BUMP_SCORE)
    run.add_argument("--render", action="store_true", help="Include the final grid")

    compare = subparsers.add_parser(
        "compare", help="Run every two-square starting state for each agent"
    )
    compare.add_argument(
        "--agents",
        default=",".join(kind.value for kind in AgentKind),
        help="Comma-delimited agent kinds",
    )
    compare.add_argument("--steps", type=int, default=NUM_STEPS)
    compare.add_argument("--seed", type=int, default=None)
    compare.add_argument("--bump-score", type=float, default=BUMP_SCORE)
    return parser


def _handle_run(args: argparse.Namespace) -> dict[str, object]:
    config = ScenarioConfig(
        agent_kind=_parse_agent_kind(args.agent),
        grid_shape=_parse_grid_shape(args.grid),
        start=_parse_start(args.start),
        dirty=_parse_dirty(args.dirty),
        steps=args.steps,
        seed=args.seed,
        judge=JudgeConfig(bump_score=args.bump_score),
    )
    result = run_scenario(config)
    summary: dict[str, object] = {
        "mode": "run",
        "agent": config.agent_kind.value,
        "steps": config.steps,
        "actions": result.actions,
        "score": result.score,
        "dirt_remaining": result.dirt_remaining,
    }
    if args.render:
        summary["grid"] = result.grid.splitlines()
    return summary


def _handle_compare(args: argparse.Namespace) -> dict[str, object]:
    judge = JudgeConfig(bump_score=args.bump_score)
    agents: dict[str, object] = {}
    for kind in _parse_agent_kinds(args.agents):
        results = run_batch(two_cell_scenarios(kind, steps=args.steps, seed=args.seed, judge=judge))
        agents[kind.value] = summarize_scores(results)
    return {"mode": "compare", "steps": args.steps, "agents": agents}


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.error("a subcommand is required (run or compare)")
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "run":
            summary = _handle_run(args)
        else:
            summary = _handle_compare(args)
    except ValueError as exc:
        parser.error(str(exc))
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
