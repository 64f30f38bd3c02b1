import argparse
import json
import logging
import random
import uuid
from typing import Any, Dict, List, Optional

import config
from domain.game_state import GameState
from game_engine import GameEngine, NullScheduler
from players.registry import AVAILABLE_PLAYERS, get_player_class
from services.tick_scheduler import TickScheduler

logger = logging.getLogger(__name__)


class SimulationRun:
    """
    Plays one game with an autopilot player and keeps every snapshot for replay.
    """

    def __init__(self, engine: GameEngine, player, max_rounds: int):
        self.engine = engine
        self.player = player
        self.max_rounds = max_rounds
        self.game_id = str(uuid.uuid4())
        self.history: List[GameState] = [engine.get_current_state()]

    def feed_input(self) -> None:
        """Ask the player for a move and pass it to the engine."""
        state = self.engine.get_current_state()
        if state.is_over:
            return
        self.engine.set_direction(self.player.get_move(state))

    def record_history(self) -> GameState:
        state = self.engine.get_current_state()
        self.history.append(state)
        return state

    def tick(self) -> GameState:
        self.feed_input()
        self.engine.step()
        return self.record_history()

    def finished(self) -> bool:
        state = self.engine.get_current_state()
        return state.is_over or state.round_number >= self.max_rounds

    def summary(self) -> Dict[str, Any]:
        state = self.engine.get_current_state()
        return {
            "game_id": self.game_id,
            "player": self.player.name,
            "final_score": state.score,
            "level": state.level,
            "rounds": state.round_number,
            "length": len(state.snake),
            "is_over": state.is_over,
            "death_reason": state.death_reason,
            "history_length": len(self.history),
        }


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    player_key: str = "random",
    max_rounds: int = 1000,
    seed: Optional[int] = None,
    realtime: bool = False
) -> SimulationRun:
    """
    Runs a single snake game driven by an autopilot player.

    Args:
        player_key: Registry key of the autopilot ('random', 'greedy')
        max_rounds: Stop after this many ticks even if the snake is alive
        seed: Seeds both food placement and the player for reproducible runs
        realtime: Tick at the engine's speed through TickScheduler instead of
                  stepping as fast as possible

    Returns:
        The finished SimulationRun (summary() and history for video export).
    """
    rng = random.Random(seed)
    player_class = get_player_class(player_key)
    player = player_class(rng=random.Random(rng.random()))

    ticker = TickScheduler() if realtime else None
    scheduler = _RecordingScheduler(ticker) if realtime else NullScheduler()
    engine = GameEngine(scheduler=scheduler, rng=rng)
    run = SimulationRun(engine, player, max_rounds)
    logger.info(f"Simulation {run.game_id} started with player '{player.name}'")

    if realtime:
        scheduler.on_tick = run.record_history
        ticker.run_forever(before_tick=run.feed_input, max_ticks=max_rounds)
    else:
        while not run.finished():
            run.tick()

    logger.info(f"Simulation {run.game_id} finished: {run.summary()}")
    return run


class _RecordingScheduler:
    """
    Wraps TickScheduler so every tick the engine requests, at whatever
    period, is followed by a history snapshot.
    """

    def __init__(self, scheduler: TickScheduler):
        self.scheduler = scheduler
        self.on_tick = None

    def start(self, period_ms: int, callback) -> None:
        def tick():
            callback()
            if self.on_tick is not None:
                self.on_tick()
        self.scheduler.start(period_ms, tick)

    def stop(self) -> None:
        self.scheduler.stop()


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run a headless snake game with an autopilot player."
    )
    parser.add_argument("--player", type=str, default="random", choices=AVAILABLE_PLAYERS,
                        help="Autopilot that steers the snake")
    parser.add_argument("--max_rounds", type=int, required=False, default=1000,
                        help="Maximum number of ticks")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Random seed for reproducible games")
    parser.add_argument("--realtime", action="store_true",
                        help="Tick at game speed instead of as fast as possible")
    parser.add_argument("--video", type=str, required=False, default=None,
                        help="Write an MP4 replay to this path")
    parser.add_argument("--fps", type=int, required=False, default=config.VIDEO_FPS,
                        help="Frames per second for --video")
    parser.add_argument("--show_board", action="store_true",
                        help="Print the final board")

    args = parser.parse_args()
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    run = run_simulation(
        player_key=args.player,
        max_rounds=args.max_rounds,
        seed=args.seed,
        realtime=args.realtime
    )

    if args.show_board:
        print("\n" + run.engine.get_current_state().print_board() + "\n")

    if args.video:
        # Imported lazily: moviepy is only needed for replays
        from services.frame_renderer import SnakeFrameRenderer

        renderer = SnakeFrameRenderer(
            width=config.FRAME_WIDTH,
            height=config.FRAME_HEIGHT,
            fps=args.fps
        )
        path = renderer.generate_video(run.history, output_path=args.video, game_id=run.game_id)
        print(f"✓ Replay written to {path}")

    print("\nSimulation Result Summary:")
    print(json.dumps(run.summary(), indent=2))


if __name__ == "__main__":
    main()
