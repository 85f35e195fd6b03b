import argparse
import json
import logging
import random
import time
from typing import Any, Callable, Dict, List, Optional

from dotenv import load_dotenv

from domain import GameConfig, GameEngine, GameState, InvalidConfiguration
from players import Player, get_player_class, AVAILABLE_PLAYERS

logger = logging.getLogger(__name__)


# -------------------------------
# Game Loop
# -------------------------------

def run_game(
    engine: GameEngine,
    player: Player,
    max_ticks: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
    on_tick: Optional[Callable[[GameState], None]] = None,
) -> Dict[str, Any]:
    """
    Drive one game from start to finish at the configured tick cadence.

    Args:
        engine: The engine to drive. It is (re)started here.
        player: Chooses the direction before every tick.
        max_ticks: Optional safety limit; the game is left ACTIVE when hit.
        sleep: Called with the tick interval in seconds between ticks.
        on_tick: Optional callback receiving the state after each tick.

    Returns:
        A dictionary summarizing the game (phase, score, ticks, end_reason,
        body_length).
    """
    engine.start()
    interval = engine.config.tick_interval_seconds
    ticks = 0

    while not engine.is_over:
        if max_ticks is not None and ticks >= max_ticks:
            logger.info(f"Stopping after {ticks} ticks (max_ticks reached)")
            break

        move = player.get_move(engine.get_current_state())
        engine.set_direction(move)
        result = engine.tick()
        ticks += 1
        logger.debug(f"Tick {ticks}: {result.to_dict()}")

        if result.consumed:
            logger.info(f"Tick {ticks}: target consumed, score {result.score}/{engine.config.max_targets}")
        if on_tick is not None:
            on_tick(engine.get_current_state())
        if result.ended:
            break

        sleep(interval)

    return {
        "phase": engine.phase,
        "score": engine.score,
        "ticks": ticks,
        "end_reason": engine.end_reason,
        "body_length": len(engine.body),
    }


def build_engine(args: argparse.Namespace) -> GameEngine:
    """
    Create an engine from parsed CLI arguments, falling back to SNAKE_*
    environment variables for anything not given on the command line.
    """
    config = GameConfig.from_env(
        grid_size=args.grid_size,
        max_targets=args.max_targets,
        tick_interval_ms=args.tick_ms,
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    return GameEngine(config, rng=rng)


def build_player(args: argparse.Namespace) -> Player:
    player_class = get_player_class(args.player)
    if args.player == "random" and args.seed is not None:
        return player_class(rng=random.Random(args.seed))
    return player_class()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run a single Snake Ventures game with an automatic player."
    )
    parser.add_argument("--grid-size", type=int, default=None,
                        help="Width and height of the board (default: SNAKE_GRID_SIZE or 20)")
    parser.add_argument("--max-targets", type=int, default=None,
                        help="Targets needed to win (default: SNAKE_MAX_TARGETS or 10)")
    parser.add_argument("--tick-ms", type=int, default=None,
                        help="Milliseconds between ticks (default: SNAKE_TICK_MS or 150)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for target placement and the random player")
    parser.add_argument("--player", type=str, default="random", choices=AVAILABLE_PLAYERS,
                        help="Automatic player driving the snake")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks even if the game is still running")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")
    return parser.parse_args(argv)


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    args = parse_args(argv)

    try:
        engine = build_engine(args)
    except InvalidConfiguration as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    player = build_player(args)

    on_tick = None
    if args.show_board:
        def on_tick(state: GameState) -> None:
            print("\n" + state.print_board() + "\n")

    result = run_game(engine, player, max_ticks=args.max_ticks, on_tick=on_tick)

    print("\nGame Result Summary:")
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
