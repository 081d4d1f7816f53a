#!/usr/bin/env python3
"""
Play unattended snake games with an autopilot player.

Usage:
    python cli/play_game.py [--games N] [--player greedy|random] [--seed S]
                            [--max-ticks T] [--interval-ms MS] [--show-board]

Examples:
    # Ten fast greedy games, print a JSON summary
    python cli/play_game.py --games 10

    # One game in real time (200 ms per tick), drawing the board every tick
    python cli/play_game.py --interval-ms 200 --show-board

After each game the final score is compared against the stored high score
and saved when it is greater.
"""

import argparse
import json
import logging
import os
import random
import sys
from typing import Any, Callable, Dict, List, Optional

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from domain.constants import GRID_SIZE  # noqa: E402
from domain.engine import GameEngine  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from domain.grid import GridModel  # noqa: E402
from players import AVAILABLE_VARIANTS, Player, get_player_class  # noqa: E402
from services.high_score_store import HighScoreStore  # noqa: E402
from services.tick_scheduler import TickScheduler  # noqa: E402

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 2000


def _summarize(state: GameState) -> Dict[str, Any]:
    return {
        "score": state.score,
        "length": state.length,
        "ticks": state.tick_count,
        "end_reason": state.end_reason,
        "game_over": state.is_game_over,
    }


def play_game(
    engine: GameEngine,
    player: Player,
    max_ticks: int = DEFAULT_MAX_TICKS,
    printer: Optional[Callable[[str], None]] = None,
) -> GameState:
    """
    Play one game synchronously: ask the player, buffer its direction, tick.

    Stops at game over or after max_ticks ticks, whichever comes first.
    """
    state = engine.start()
    while not state.is_game_over and state.tick_count < max_ticks:
        engine.set_direction(player.get_direction(state))
        state = engine.tick()
        if printer is not None:
            printer(f"\n{state.print_board()}\nScore: {state.score}\n")
    return state


def play_game_realtime(
    engine: GameEngine,
    player: Player,
    interval_ms: int,
    max_ticks: int = DEFAULT_MAX_TICKS,
    printer: Optional[Callable[[str], None]] = None,
) -> GameState:
    """Play one game with the TickScheduler driving the engine at interval_ms."""
    scheduler: TickScheduler

    def on_tick(state: GameState) -> None:
        if printer is not None:
            printer(f"\n{state.print_board()}\nScore: {state.score}\n")
        if state.tick_count >= max_ticks:
            scheduler.stop()
            return
        engine.set_direction(player.get_direction(state))

    scheduler = TickScheduler(engine, interval_ms=interval_ms, on_tick=on_tick)
    state = scheduler.restart()
    engine.set_direction(player.get_direction(state))
    scheduler.wait()
    scheduler.stop()
    return engine.snapshot()


def run_games(
    games: int,
    player_variant: Optional[str] = None,
    seed: Optional[int] = None,
    max_ticks: int = DEFAULT_MAX_TICKS,
    interval_ms: int = 0,
    show_board: bool = False,
    store: Optional[HighScoreStore] = None,
    grid_size: int = GRID_SIZE,
) -> Dict[str, Any]:
    """
    Play `games` games and return a summary with per-game results.

    Each game's score is offered to the high score store, mirroring the
    "new high score" check a UI host makes after game over.
    """
    rng = random.Random(seed)
    engine = GameEngine(GridModel(size=grid_size, rng=rng))
    player = get_player_class(player_variant)(rng=rng)
    store = store or HighScoreStore()
    printer = print if show_board else None

    starting_high_score = store.load()
    results: List[Dict[str, Any]] = []

    for game_number in range(1, games + 1):
        if interval_ms > 0:
            state = play_game_realtime(engine, player, interval_ms, max_ticks, printer)
        else:
            state = play_game(engine, player, max_ticks, printer)

        result = _summarize(state)
        result["game"] = game_number
        result["final_state"] = state.to_dict()
        result["new_high_score"] = store.record(state.score) if state.is_game_over else False
        results.append(result)

        logger.info(
            "Game %d finished: score=%d length=%d ticks=%d reason=%s%s",
            game_number, state.score, state.length, state.tick_count,
            state.end_reason or "tick limit",
            " (new high score!)" if result["new_high_score"] else "",
        )

    scores = [r["score"] for r in results]
    return {
        "player": player.name,
        "games": len(results),
        "best_score": max(scores) if scores else 0,
        "average_score": (sum(scores) / len(scores)) if scores else 0.0,
        "starting_high_score": starting_high_score,
        "high_score": store.best,
        "results": results,
    }


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Play unattended snake games with an autopilot player."
    )
    parser.add_argument("--games", type=int, default=1,
                        help="Number of games to play (default: 1)")
    parser.add_argument("--player", type=str, default=None, choices=AVAILABLE_VARIANTS,
                        help="Autopilot variant (default: greedy)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement and the autopilot")
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help=f"Stop a game after this many ticks (default: {DEFAULT_MAX_TICKS})")
    parser.add_argument("--interval-ms", type=int, default=0,
                        help="Real-time tick interval; 0 ticks as fast as possible (default: 0)")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--db", type=str, default=None,
                        help="SQLite file for the high score (default: SNAKE_HIGH_SCORE_DB or backend/snake_high_score.db)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.games < 1:
        parser.error("--games must be at least 1")
    if args.max_ticks < 1:
        parser.error("--max-ticks must be at least 1")
    if args.interval_ms < 0:
        parser.error("--interval-ms cannot be negative")

    summary = run_games(
        games=args.games,
        player_variant=args.player,
        seed=args.seed,
        max_ticks=args.max_ticks,
        interval_ms=args.interval_ms,
        show_board=args.show_board,
        store=HighScoreStore(db_path=args.db),
    )

    print("\nSummary:")
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
